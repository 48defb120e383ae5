"""Plotly chart builders for cost comparisons."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import plotly.graph_objects as go

from llm_cost_calculator.analysis.aggregation import (
    CONTEXT_WINDOW_CEILING,
    MAX_FEATURES,
    ModelCost,
)
from llm_cost_calculator.calculator import CalculationReport
from llm_cost_calculator.engine.params import ChartType, Currency
from llm_cost_calculator.report.formatting import currency_symbol

logger = logging.getLogger(__name__)

PROVIDER_COLORS = {
    "OpenAI": "#10B981",
    "Anthropic": "#8B5CF6",
    "Groq": "#F59E0B",
}

INPUT_COLOR = "#3B82F6"
OUTPUT_COLOR = "#EC4899"

BAR_HEIGHT = 40  # pixels per model
MIN_HEIGHT = 300


def _layout(fig: go.Figure, title: str, height: int = 450) -> go.Figure:
    fig.update_layout(
        title=title,
        template="plotly_white",
        height=height,
        width=800,
        margin=dict(l=50, r=30, t=60, b=40),
        legend=dict(orientation="h", yanchor="top", y=-0.1, xanchor="center", x=0.5),
    )
    return fig


def cost_bar_chart(
    costs: Sequence[ModelCost],
    currency: Currency | str = Currency.USD,
    title: str | None = None,
) -> go.Figure:
    """Horizontal stacked bars of input and output cost, most expensive first."""
    currency = Currency(currency)
    symbol = currency_symbol(currency)
    ordered = sorted(costs, key=lambda c: c.total(currency), reverse=True)

    labels = [f"{c.model.name} ({c.model.provider.value})" for c in ordered]
    breakdowns = [c.result.costs_for(currency) for c in ordered]

    fig = go.Figure()
    fig.add_trace(go.Bar(
        y=labels,
        x=[b.input for b in breakdowns],
        orientation="h",
        name="Input Cost",
        marker_color=INPUT_COLOR,
        hovertemplate=f"%{{y}}: {symbol}%{{x:.4f}}<extra>Input</extra>",
    ))
    fig.add_trace(go.Bar(
        y=labels,
        x=[b.output for b in breakdowns],
        orientation="h",
        name="Output Cost",
        marker_color=OUTPUT_COLOR,
        hovertemplate=f"%{{y}}: {symbol}%{{x:.4f}}<extra>Output</extra>",
    ))

    fig.update_layout(barmode="stack", xaxis_title=f"Cost ({currency.value})")
    # Plotly draws the first category at the bottom
    fig.update_yaxes(autorange="reversed")

    height = max(MIN_HEIGHT, len(ordered) * BAR_HEIGHT)
    return _layout(fig, title or f"Cost Comparison ({currency.value})", height=height)


def efficiency_radar_chart(
    costs: Sequence[ModelCost],
    title: str = "Model Efficiency Profile",
) -> go.Figure:
    """Radar of the three normalized efficiency signals per model."""
    axes = ["Cost efficiency", "Features", "Context window"]
    cheapest_rate = min(
        (c.model.average_rate for c in costs if c.model.average_rate > 0),
        default=0,
    )

    fig = go.Figure()
    for c in costs:
        rate = c.model.average_rate
        # Relative to the cheapest paid model so values stay in [0, 1]
        cost_efficiency = 1.0 if rate == 0 else cheapest_rate / rate
        values = [
            cost_efficiency,
            len(c.model.features) / MAX_FEATURES,
            min(c.model.context_window / CONTEXT_WINDOW_CEILING, 1.0),
        ]
        fig.add_trace(go.Scatterpolar(
            r=values + values[:1],
            theta=axes + axes[:1],
            fill="toself",
            name=c.model.name,
            line=dict(color=PROVIDER_COLORS.get(c.model.provider.value)),
        ))

    fig.update_layout(polar=dict(radialaxis=dict(visible=True, range=[0, 1])))
    return _layout(fig, title)


def cost_scatter_chart(
    costs: Sequence[ModelCost],
    currency: Currency | str = Currency.USD,
    title: str | None = None,
) -> go.Figure:
    """Context window against total cost, one marker per model."""
    currency = Currency(currency)
    symbol = currency_symbol(currency)

    fig = go.Figure()
    for provider in dict.fromkeys(c.model.provider for c in costs):
        group = [c for c in costs if c.model.provider == provider]
        fig.add_trace(go.Scatter(
            x=[c.model.context_window for c in group],
            y=[c.total(currency) for c in group],
            mode="markers+text",
            text=[c.model.name for c in group],
            textposition="top center",
            name=provider.value,
            marker=dict(size=14, color=PROVIDER_COLORS.get(provider.value)),
            hovertemplate=f"%{{text}}<br>Context: %{{x:,}}<br>Total: {symbol}%{{y:.4f}}<extra></extra>",
        ))

    fig.update_layout(
        xaxis_title="Context window (tokens)",
        yaxis_title=f"Total cost ({currency.value})",
    )
    return _layout(fig, title or f"Cost vs Context Window ({currency.value})")


def build_chart(report: CalculationReport, chart_type: ChartType | str | None = None) -> go.Figure:
    """Chart for a report, using its analysed models."""
    chart_type = ChartType(chart_type or report.params.chart_type)
    costs = report.analysed
    match chart_type:
        case ChartType.BAR:
            return cost_bar_chart(costs, report.currency)
        case ChartType.RADAR:
            return efficiency_radar_chart(costs)
        case ChartType.SCATTER:
            return cost_scatter_chart(costs, report.currency)


def write_chart_html(fig: go.Figure, path: Path | str) -> Path:
    """Write a standalone HTML file (plotly.js loaded from CDN)."""
    path = Path(path)
    fig.write_html(path, include_plotlyjs="cdn", full_html=True)
    logger.info("Wrote chart to %s", path)
    return path
