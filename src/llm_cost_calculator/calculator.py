"""
Calculator - resolves a selection through the catalog and runs the engine.

The calculator:
1. Resolves selected providers to catalog models
2. Runs the cost engine once per model
3. Narrows to the models picked for analysis
4. Aggregates, or short-circuits when nothing is selected

DEPENDENCY INJECTION:
---------------------
calculate() accepts the catalog and exchange rate as parameters. The
defaults come from configuration, so tests can pass a small catalog and a
fixed rate without touching the environment.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Iterable

from llm_cost_calculator.analysis.aggregation import (
    CostSummary,
    ModelCost,
    average_cost,
    comparison_percentage,
    summarize,
)
from llm_cost_calculator.catalog.catalog import PricingCatalog
from llm_cost_calculator.catalog.models import Provider
from llm_cost_calculator.catalog.sources import get_catalog_source
from llm_cost_calculator.config import get_config
from llm_cost_calculator.engine.params import CalculationParams, Currency
from llm_cost_calculator.engine.pricing import compute_cost

logger = logging.getLogger(__name__)

NO_SELECTION_REASON = "No models selected for analysis"


# ---------------------------------------------------------------------------
# REPORT MODELS
# ---------------------------------------------------------------------------


@dataclass
class CostRow:
    """One line of the comparison table."""

    cost: ModelCost
    comparison_percentage: float | None
    selected: bool = True

    @property
    def model(self):
        return self.cost.model

    @property
    def result(self):
        return self.cost.result


@dataclass
class CalculationReport:
    """Everything the presentation layer needs for one set of inputs.

    summary is None when no model is selected; failure_reason then says why.
    """

    params: CalculationParams
    providers: list[Provider]
    rows: list[CostRow]
    summary: CostSummary | None = None
    failure_reason: str | None = None
    exchange_rate: float = 0.0
    analysed: list[ModelCost] = field(default_factory=list)

    @property
    def currency(self) -> Currency:
        return Currency(self.params.currency)

    @property
    def has_selection(self) -> bool:
        return self.summary is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON serialization."""
        currency = self.currency
        params = asdict(self.params)
        for key, value in params.items():
            if isinstance(value, Enum):
                params[key] = value.value

        rows = []
        for row in self.rows:
            costs = row.result.costs_for(currency)
            rows.append({
                "id": row.model.id,
                "name": row.model.name,
                "provider": row.model.provider.value,
                "input_rate": row.model.input_cost,
                "output_rate": row.model.output_cost,
                "tokens": asdict(row.result.tokens),
                "input_cost": costs.input,
                "output_cost": costs.output,
                "total_cost": costs.total,
                "comparison_percentage": row.comparison_percentage,
                "selected": row.selected,
            })

        summary = None
        if self.summary is not None:
            s = self.summary
            summary = {
                "currency": s.currency.value,
                "model_count": s.model_count,
                "provider_count": s.provider_count,
                "total_cost": s.total_cost,
                "average_cost": s.average_cost,
                "potential_savings": s.potential_savings,
                "best_value": s.best_value.model.id,
                "cheapest": s.cheapest.model.id,
                "efficiency_scores": s.efficiency_scores,
                "comparison_percentages": s.comparison_percentages,
            }

        return {
            "params": params,
            "providers": [p.value for p in self.providers],
            "exchange_rate": self.exchange_rate,
            "rows": rows,
            "summary": summary,
            "failure_reason": self.failure_reason,
        }


# ---------------------------------------------------------------------------
# CORE CALCULATION
# ---------------------------------------------------------------------------


def resolve_models(
    catalog: PricingCatalog,
    providers: Iterable[Provider | str] | None = None,
):
    """Catalog models for the selected providers (provider order, then catalog order)."""
    if providers is None:
        return catalog.list_all()
    models = []
    for provider in providers:
        models.extend(catalog.list_by_provider(provider))
    return models


def calculate(
    params: CalculationParams,
    providers: Iterable[Provider | str] | None = None,
    model_ids: Iterable[str] | None = None,
    catalog: PricingCatalog | None = None,
    exchange_rate: float | None = None,
) -> CalculationReport:
    """
    Project costs for every model of the selected providers.

    Args:
        params: Workload parameters (already coerced by the input layer)
        providers: Providers to include. None means every provider.
        model_ids: Models to analyse in the summary. None means every row.
        catalog: Injectable catalog (configured source if None)
        exchange_rate: INR per USD (configured rate if None)

    Returns:
        CalculationReport with per-model rows and, when anything is
        selected, a CostSummary
    """
    config = get_config()
    if catalog is None:
        catalog = get_catalog_source(config.catalog_path).load()
    if exchange_rate is None:
        exchange_rate = config.usd_to_inr

    provider_list = _normalize_providers(catalog, providers)
    models = resolve_models(catalog, provider_list)
    costs = [
        ModelCost(model=m, result=compute_cost(params, m, exchange_rate))
        for m in models
    ]

    wanted = set(model_ids) if model_ids is not None else None
    analysed = [c for c in costs if wanted is None or c.model.id in wanted]
    selected_ids = {c.model.id for c in analysed}

    logger.debug(
        "Calculated %d models for providers %s (%d selected for analysis)",
        len(costs),
        [p.value for p in provider_list],
        len(analysed),
    )

    rows = _build_rows(costs, selected_ids, params.currency)

    if not analysed:
        logger.info("Empty selection, skipping aggregation")
        return CalculationReport(
            params=params,
            providers=provider_list,
            rows=rows,
            failure_reason=NO_SELECTION_REASON,
            exchange_rate=exchange_rate,
        )

    return CalculationReport(
        params=params,
        providers=provider_list,
        rows=rows,
        summary=summarize(analysed, params.currency),
        exchange_rate=exchange_rate,
        analysed=analysed,
    )


# ---------------------------------------------------------------------------
# HELPER FUNCTIONS
# ---------------------------------------------------------------------------


def _normalize_providers(
    catalog: PricingCatalog,
    providers: Iterable[Provider | str] | None,
) -> list[Provider]:
    """Known providers in the requested order, duplicates dropped."""
    if providers is None:
        return catalog.providers()
    result: list[Provider] = []
    for p in providers:
        try:
            provider = Provider(p)
        except ValueError:
            logger.debug("Ignoring unknown provider %r", p)
            continue
        if provider not in result:
            result.append(provider)
    return result


def _build_rows(
    costs: list[ModelCost],
    selected_ids: set[str],
    currency: Currency,
) -> list[CostRow]:
    """Table rows with each model's deviation from the table average."""
    if not costs:
        return []
    totals = [c.total(currency) for c in costs]
    average = average_cost(costs, currency)
    return [
        CostRow(
            cost=c,
            comparison_percentage=comparison_percentage(total, average),
            selected=c.model.id in selected_ids,
        )
        for c, total in zip(costs, totals)
    ]
