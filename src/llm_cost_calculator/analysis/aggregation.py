"""
Aggregation and ranking across a selection of models.

Every operation here requires a non-empty selection. Callers are expected to
short-circuit empty selections (the calculator does); if one slips through,
EmptySelectionError is raised instead of returning NaN.

EFFICIENCY SCORE:
-----------------
A synthetic 0-100-ish ranking blending three normalized signals:

    score = (0.4 * 1 / avg_rate
             + 0.3 * feature_count / MAX_FEATURES
             + 0.3 * context_window / CONTEXT_WINDOW_CEILING) * 100

avg_rate is the mean of the input and output rates (USD per 1M tokens).
"""

from __future__ import annotations

import math
import statistics
from dataclasses import dataclass, field
from typing import Sequence

from llm_cost_calculator.catalog.models import ModelFeature, ModelPricing, Provider
from llm_cost_calculator.engine.metrics import CostResult
from llm_cost_calculator.engine.params import Currency
from llm_cost_calculator.exceptions import EmptySelectionError


# ---------------------------------------------------------------------------
# CONSTANTS
# ---------------------------------------------------------------------------

COST_WEIGHT = 0.4
FEATURE_WEIGHT = 0.3
CONTEXT_WEIGHT = 0.3

MAX_FEATURES = len(ModelFeature)
CONTEXT_WINDOW_CEILING = 200_000


# ---------------------------------------------------------------------------
# DATA MODELS
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ModelCost:
    """A catalog entry paired with its engine result."""

    model: ModelPricing
    result: CostResult

    def total(self, currency: Currency | str = Currency.USD) -> float:
        return self.result.costs_for(currency).total


@dataclass
class CostSummary:
    """Comparative statistics for one selection of models."""

    currency: Currency
    model_count: int
    provider_count: int
    total_cost: float
    average_cost: float
    potential_savings: float
    best_value: ModelCost
    cheapest: ModelCost
    efficiency_scores: dict[str, float] = field(default_factory=dict)
    comparison_percentages: dict[str, float | None] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# PRIMITIVES
# ---------------------------------------------------------------------------


def _require(costs: Sequence[ModelCost], operation: str) -> None:
    if not costs:
        raise EmptySelectionError(operation)


def average_cost(costs: Sequence[ModelCost], currency: Currency | str = Currency.USD) -> float:
    """Arithmetic mean of total cost across the selection."""
    _require(costs, "average_cost")
    # statistics.mean is exact, so N identical costs average to that cost
    return statistics.mean(c.total(currency) for c in costs)


def comparison_percentage(total: float, average: float) -> float | None:
    """Deviation of `total` from `average`, in percent.

    Returns None when the average is zero (every model free); display that
    as "n/a".
    """
    if average == 0:
        return None
    return (total - average) / average * 100


def efficiency_score(model: ModelPricing) -> float:
    """Composite ranking score for a model; higher is better.

    A model with zero rates scores infinity.
    """
    avg_rate = model.average_rate
    if avg_rate == 0:
        return math.inf
    cost_score = 1 / avg_rate
    feature_score = len(model.features) / MAX_FEATURES
    context_score = model.context_window / CONTEXT_WINDOW_CEILING
    return (
        cost_score * COST_WEIGHT
        + feature_score * FEATURE_WEIGHT
        + context_score * CONTEXT_WEIGHT
    ) * 100


def best_value(costs: Sequence[ModelCost]) -> ModelCost:
    """Model with the strictly highest efficiency score.

    Ties go to the first model in input order.
    """
    _require(costs, "best_value")
    best = costs[0]
    best_score = efficiency_score(best.model)
    for candidate in costs[1:]:
        score = efficiency_score(candidate.model)
        if score > best_score:
            best, best_score = candidate, score
    return best


def cheapest(costs: Sequence[ModelCost], currency: Currency | str = Currency.USD) -> ModelCost:
    """Model with the lowest total cost; first occurrence wins ties."""
    _require(costs, "cheapest")
    return min(costs, key=lambda c: c.total(currency))


def potential_savings(costs: Sequence[ModelCost], currency: Currency | str = Currency.USD) -> float:
    """Saving if every model's workload had run on the cheapest one instead.

    sum(totals) - min(total) * count
    """
    _require(costs, "potential_savings")
    totals = [c.total(currency) for c in costs]
    return sum(totals) - min(totals) * len(totals)


def count_providers(costs: Sequence[ModelCost]) -> int:
    providers: set[Provider] = {c.model.provider for c in costs}
    return len(providers)


# ---------------------------------------------------------------------------
# SUMMARY
# ---------------------------------------------------------------------------


def summarize(costs: Sequence[ModelCost], currency: Currency | str = Currency.USD) -> CostSummary:
    """Compute every comparative statistic for a non-empty selection."""
    _require(costs, "summarize")
    currency = Currency(currency)

    avg = average_cost(costs, currency)

    return CostSummary(
        currency=currency,
        model_count=len(costs),
        provider_count=count_providers(costs),
        total_cost=sum(c.total(currency) for c in costs),
        average_cost=avg,
        potential_savings=potential_savings(costs, currency),
        best_value=best_value(costs),
        cheapest=cheapest(costs, currency),
        efficiency_scores={c.model.id: efficiency_score(c.model) for c in costs},
        comparison_percentages={
            c.model.id: comparison_percentage(c.total(currency), avg) for c in costs
        },
    )
