"""
Cost calculation engine - workload parameters in, cost records out.

- params.py: CalculationParams and its enumerations
- metrics.py: TokenCounts, CostBreakdown, CostResult
- pricing.py: compute_cost and the conversion constants
"""

from llm_cost_calculator.engine.params import (
    CalculationParams,
    ChartType,
    Currency,
    TimeFrame,
)
from llm_cost_calculator.engine.metrics import (
    CostBreakdown,
    CostResult,
    TokenCounts,
)
from llm_cost_calculator.engine.pricing import (
    USD_TO_INR,
    WORD_TO_TOKEN_RATIO,
    compute_cost,
    estimate_per_request,
    to_tokens,
)

__all__ = [
    # Params
    "CalculationParams",
    "ChartType",
    "Currency",
    "TimeFrame",
    # Metrics
    "CostBreakdown",
    "CostResult",
    "TokenCounts",
    # Pricing
    "USD_TO_INR",
    "WORD_TO_TOKEN_RATIO",
    "compute_cost",
    "estimate_per_request",
    "to_tokens",
]
