"""
Text tables - comparison table, cost summary, catalog listing, feature matrix.

Renderers return strings; the CLI decides where they go.
"""

from __future__ import annotations

from typing import Callable, Iterable, Literal, Sequence

from llm_cost_calculator.calculator import CalculationReport, CostRow
from llm_cost_calculator.catalog.models import ModelFeature, ModelPricing
from llm_cost_calculator.engine.params import Currency, TimeFrame
from llm_cost_calculator.engine.pricing import WORD_TO_TOKEN_RATIO, estimate_per_request
from llm_cost_calculator.report.formatting import (
    efficiency_tier,
    format_amount,
    format_currency,
    format_percentage,
    format_score,
    format_tokens,
)

SortField = Literal["name", "input_cost", "output_cost", "total_cost", "total_tokens"]
SORT_FIELDS: tuple[str, ...] = ("name", "input_cost", "output_cost", "total_cost", "total_tokens")

WIDTH = 96


# ---------------------------------------------------------------------------
# SORTING
# ---------------------------------------------------------------------------


def _sort_key(field: str, currency: Currency) -> Callable[[CostRow], object]:
    if field == "name":
        return lambda r: r.model.name
    if field == "input_cost":
        return lambda r: r.result.costs_for(currency).input
    if field == "output_cost":
        return lambda r: r.result.costs_for(currency).output
    if field == "total_cost":
        return lambda r: r.result.costs_for(currency).total
    if field == "total_tokens":
        return lambda r: r.result.tokens.total
    raise ValueError(f"Unknown sort field {field!r}; expected one of {SORT_FIELDS}")


def sort_rows(
    rows: Sequence[CostRow],
    field: SortField = "name",
    descending: bool = False,
    currency: Currency | str = Currency.USD,
) -> list[CostRow]:
    """Stable sort of table rows. Equal keys keep catalog order."""
    return sorted(rows, key=_sort_key(field, Currency(currency)), reverse=descending)


# ---------------------------------------------------------------------------
# FEATURE MATRIX
# ---------------------------------------------------------------------------


def feature_matrix(
    models: Iterable[ModelPricing],
) -> tuple[list[ModelFeature], list[tuple[ModelPricing, list[bool]]]]:
    """Features offered by any of `models` (sorted by name) and per-model flags."""
    models = list(models)
    features = sorted({f for m in models for f in m.features}, key=lambda f: f.value)
    rows = [(m, [f in m.features for f in features]) for m in models]
    return features, rows


def render_feature_matrix(models: Iterable[ModelPricing]) -> str:
    features, rows = feature_matrix(models)
    header = f"{'Model':<20} {'Context':>9} " + " ".join(f"{f.value:>16}" for f in features)
    lines = [header, "-" * len(header)]
    for model, flags in rows:
        cells = " ".join(f"{'yes' if flag else '-':>16}" for flag in flags)
        lines.append(f"{model.name:<20} {model.context_window:>9,} {cells}")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# CATALOG LISTING
# ---------------------------------------------------------------------------


def render_models(models: Iterable[ModelPricing]) -> str:
    """Catalog listing with rates per 1M tokens."""
    lines = [
        f"{'ID':<16} {'Model':<18} {'Provider':<10} {'Input/1M':>10} {'Output/1M':>10} {'Context':>9}",
        "-" * 78,
    ]
    for m in models:
        lines.append(
            f"{m.id:<16} {m.name:<18} {m.provider.value:<10} "
            f"{'$' + format(m.input_cost, '.4f'):>10} {'$' + format(m.output_cost, '.4f'):>10} "
            f"{m.context_window:>9,}"
        )
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# COST REPORT
# ---------------------------------------------------------------------------


def render_report(
    report: CalculationReport,
    sort_by: SortField = "name",
    descending: bool = False,
) -> str:
    """Comparison table followed by the cost analysis block."""
    currency = report.currency
    params = report.params
    unit = "tokens" if params.use_tokens else "words"

    lines = ["=" * WIDTH, "COST COMPARISON", "=" * WIDTH]
    if params.use_tokens:
        lines.append("Using direct token counts")
    else:
        lines.append(f"Converting words to tokens (1 word ≈ {WORD_TO_TOKEN_RATIO} tokens)")
    lines.append(
        f"{params.requests:,} requests with {unit}: "
        f"{params.input_size:,g} input, {params.output_size:,g} output"
    )
    lines.append("")

    if not report.rows:
        lines.append("No models available for the selected providers.")
    else:
        lines.append(
            f"{'':2}{'Model':<18} {'Provider':<10} {'Tokens':>12} "
            f"{'Input':>14} {'Output':>14} {'Total':>14} {'vs Avg':>8}"
        )
        lines.append("-" * WIDTH)
        for row in sort_rows(report.rows, sort_by, descending, currency):
            costs = row.result.costs_for(currency)
            mark = "* " if row.selected else "  "
            lines.append(
                f"{mark}{row.model.name:<18} {row.model.provider.value:<10} "
                f"{format_tokens(row.result.tokens.total):>12} "
                f"{format_amount(costs.input, currency):>14} "
                f"{format_amount(costs.output, currency):>14} "
                f"{format_amount(costs.total, currency):>14} "
                f"{format_percentage(row.comparison_percentage):>8}"
            )

    lines.append("")
    lines.append("-" * WIDTH)
    lines.append("COST ANALYSIS")
    lines.append("-" * WIDTH)

    summary = report.summary
    if summary is None:
        lines.append(report.failure_reason or "No models selected for analysis")
        return "\n".join(lines)

    plural = "s" if summary.model_count != 1 else ""
    lines.append(f"Analysis of {summary.model_count} selected model{plural}")
    lines.append(f"  Total {TimeFrame(params.timeframe).value} cost: {format_currency(summary.total_cost, currency)}")
    lines.append(f"  Avg. cost/model:    {format_currency(summary.average_cost, currency)}")
    lines.append(f"  Potential savings:  up to {format_currency(summary.potential_savings, currency)}")
    lines.append(f"  Cheapest model:     {summary.cheapest.model.name}")
    lines.append(f"  Best value model:   {summary.best_value.model.name}")
    lines.append(f"  Active providers:   {summary.provider_count}")
    lines.append("")
    lines.append(f"  {'Model':<18} {'Efficiency':>10} {'Tier':<6} {'Per request':>14}  Features")
    for cost in report.analysed:
        score = summary.efficiency_scores[cost.model.id]
        single = estimate_per_request(params, cost.model, report.exchange_rate)
        per_request = format_amount(single.costs_for(currency).total, currency, places=6)
        features = ", ".join(f.value for f in ModelFeature if f in cost.model.features)
        lines.append(
            f"  {cost.model.name:<18} {format_score(score):>10} "
            f"{efficiency_tier(score):<6} {per_request:>14}  {features}"
        )

    return "\n".join(lines)
