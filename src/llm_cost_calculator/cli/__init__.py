"""
CLI module - command-line interface.

Provides entry points for:
- Listing the pricing catalog
- Estimating costs across models
- Writing comparison charts
"""

from llm_cost_calculator.cli.commands import (
    main,
    run_models_cli,
    run_estimate_cli,
    run_chart_cli,
)

__all__ = [
    "main",
    "run_models_cli",
    "run_estimate_cli",
    "run_chart_cli",
]
