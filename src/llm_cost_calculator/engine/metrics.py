"""
Cost metrics - data models for engine output.

Plain dataclasses, recomputed on every calculation and never persisted.
"""

from dataclasses import dataclass

from llm_cost_calculator.engine.params import Currency


@dataclass(frozen=True)
class TokenCounts:
    """Token volumes for one model's projection."""

    input_per_request: float
    output_per_request: float
    total_input: float
    total_output: float

    @property
    def total(self) -> float:
        return self.total_input + self.total_output


@dataclass(frozen=True)
class CostBreakdown:
    """Input/output/total cost in a single currency."""

    input: float
    output: float
    total: float


@dataclass(frozen=True)
class CostResult:
    """Engine output for one model: tokens plus costs in both currencies.

    INR figures are the USD figures times the exchange rate used for the
    calculation, never computed independently.
    """

    tokens: TokenCounts
    usd: CostBreakdown
    inr: CostBreakdown
    exchange_rate: float

    def costs_for(self, currency: Currency | str) -> CostBreakdown:
        """Breakdown in the requested currency."""
        return self.inr if Currency(currency) is Currency.INR else self.usd
