"""
Presentation helpers - formatting, text tables, and Plotly charts.
"""

from llm_cost_calculator.report.formatting import (
    efficiency_tier,
    format_amount,
    format_currency,
    format_percentage,
)
from llm_cost_calculator.report.tables import (
    SORT_FIELDS,
    feature_matrix,
    render_feature_matrix,
    render_models,
    render_report,
    sort_rows,
)
from llm_cost_calculator.report.charts import (
    build_chart,
    cost_bar_chart,
    cost_scatter_chart,
    efficiency_radar_chart,
    write_chart_html,
)

__all__ = [
    # Formatting
    "efficiency_tier",
    "format_amount",
    "format_currency",
    "format_percentage",
    # Tables
    "SORT_FIELDS",
    "feature_matrix",
    "render_feature_matrix",
    "render_models",
    "render_report",
    "sort_rows",
    # Charts
    "build_chart",
    "cost_bar_chart",
    "cost_scatter_chart",
    "efficiency_radar_chart",
    "write_chart_html",
]
