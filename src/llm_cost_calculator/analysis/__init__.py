"""
Aggregation and ranking across selected models.
"""

from llm_cost_calculator.analysis.aggregation import (
    CONTEXT_WINDOW_CEILING,
    MAX_FEATURES,
    CostSummary,
    ModelCost,
    average_cost,
    best_value,
    cheapest,
    comparison_percentage,
    efficiency_score,
    potential_savings,
    summarize,
)

__all__ = [
    "CONTEXT_WINDOW_CEILING",
    "MAX_FEATURES",
    "CostSummary",
    "ModelCost",
    "average_cost",
    "best_value",
    "cheapest",
    "comparison_percentage",
    "efficiency_score",
    "potential_savings",
    "summarize",
]
