"""
CLI commands - entry points for the cost calculator.

Each command follows a consistent pattern:
1. Parse arguments
2. Load environment and configuration
3. Run the calculation
4. Print results
5. Return exit code

Exit codes: 0 success, 1 nothing selected, 2 catalog/config error,
130 interrupted.

CLI commands are thin wrappers: argument values are passed through the
input layer as raw strings so bad entries coerce the same way they would
from any other front end.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from dotenv import load_dotenv

from llm_cost_calculator.config import CalculatorConfig, get_config, parse_exchange_rate
from llm_cost_calculator.exceptions import LLMCostError

EXIT_OK = 0
EXIT_NO_SELECTION = 1
EXIT_ERROR = 2
EXIT_INTERRUPTED = 130


def _load_env() -> None:
    """Load environment variables from .env file."""
    load_dotenv()


def _configure_logging(config: CalculatorConfig) -> None:
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _add_catalog_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--catalog",
        default=None,
        help="JSON pricing catalog (default: LLM_COST_CATALOG or built-in table)",
    )


def _add_workload_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--input", dest="input_size", default="20", help="Input size per request")
    parser.add_argument("--output", dest="output_size", default="200", help="Output size per request")
    parser.add_argument("--requests", default="100", help="Number of requests to project")
    parser.add_argument(
        "--tokens",
        dest="use_tokens",
        action="store_true",
        help="Sizes are token counts (default: word counts)",
    )
    parser.add_argument("--currency", default="USD", help="USD or INR")
    parser.add_argument("--timeframe", default="monthly", help="Label for the projection period")
    parser.add_argument(
        "--provider",
        dest="providers",
        action="append",
        default=None,
        help="Provider to include (repeatable, default: all)",
    )
    parser.add_argument(
        "--model",
        dest="model_ids",
        action="append",
        default=None,
        help="Model id to analyse (repeatable, default: every listed model)",
    )
    parser.add_argument("--rate", default=None, help="USD to INR exchange rate override")
    _add_catalog_args(parser)


def _load_catalog(path: str | None, config: CalculatorConfig):
    from llm_cost_calculator.catalog.sources import get_catalog_source

    return get_catalog_source(path or config.catalog_path).load()


def _run_calculation(args: argparse.Namespace, config: CalculatorConfig, chart_type: str | None = None):
    from llm_cost_calculator.calculator import calculate
    from llm_cost_calculator.inputs import CalculationRequest

    request = CalculationRequest(
        input_size=args.input_size,
        output_size=args.output_size,
        requests=args.requests,
        use_tokens=args.use_tokens,
        currency=args.currency,
        timeframe=args.timeframe,
        chart_type=chart_type or "bar",
    )
    return calculate(
        request.to_params(),
        providers=args.providers,
        model_ids=args.model_ids,
        catalog=_load_catalog(args.catalog, config),
        exchange_rate=(
            parse_exchange_rate(args.rate, source="--rate")
            if args.rate is not None
            else config.usd_to_inr
        ),
    )


def run_models_cli() -> int:
    """CLI entry point for listing the pricing catalog."""
    from llm_cost_calculator.report.tables import render_feature_matrix, render_models

    config = get_config()

    parser = argparse.ArgumentParser(description="List models in the pricing catalog")
    parser.add_argument("--provider", default=None, help="Only list this provider")
    parser.add_argument("--features", action="store_true", help="Show the feature matrix")
    parser.add_argument("--json", action="store_true", help="Output JSON")
    _add_catalog_args(parser)
    args = parser.parse_args()

    catalog = _load_catalog(args.catalog, config)
    models = catalog.list_by_provider(args.provider) if args.provider else catalog.list_all()

    if args.json:
        from llm_cost_calculator.catalog.sources import CatalogEntrySchema

        print(json.dumps(
            [CatalogEntrySchema.from_model(m).model_dump(mode="json") for m in models],
            indent=2,
        ))
        return EXIT_OK

    if not models:
        print(f"No models for provider {args.provider!r}")
        return EXIT_OK

    print(render_feature_matrix(models) if args.features else render_models(models))
    return EXIT_OK


def run_estimate_cli() -> int:
    """CLI entry point for cost estimation."""
    from llm_cost_calculator.report.tables import SORT_FIELDS, render_report

    config = get_config()

    parser = argparse.ArgumentParser(description="Estimate LLM API costs across models")
    _add_workload_args(parser)
    parser.add_argument("--sort", default="name", choices=SORT_FIELDS, help="Sort column")
    parser.add_argument("--desc", action="store_true", help="Sort descending")
    parser.add_argument("--json", action="store_true", help="Output JSON instead of formatted text")
    args = parser.parse_args()

    report = _run_calculation(args, config)

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(render_report(report, sort_by=args.sort, descending=args.desc))

    return EXIT_OK if report.has_selection else EXIT_NO_SELECTION


def run_chart_cli() -> int:
    """CLI entry point for writing a cost chart."""
    from llm_cost_calculator.report.charts import build_chart, write_chart_html

    config = get_config()

    parser = argparse.ArgumentParser(description="Write a cost comparison chart as HTML")
    _add_workload_args(parser)
    parser.add_argument(
        "--chart-type",
        default="bar",
        choices=["bar", "radar", "scatter"],
        help="Chart to draw",
    )
    parser.add_argument("--out", default="cost_chart.html", help="Output HTML path")
    args = parser.parse_args()

    report = _run_calculation(args, config, chart_type=args.chart_type)

    if not report.has_selection:
        print(report.failure_reason)
        return EXIT_NO_SELECTION

    path = write_chart_html(build_chart(report), args.out)
    print(f"Chart written to {path}")
    return EXIT_OK


def main() -> int:
    """
    Main CLI entry point with subcommands.

    Usage:
        llm-cost models     # List the pricing catalog
        llm-cost estimate   # Cost comparison table and analysis
        llm-cost chart      # Write a Plotly chart to HTML
    """
    _load_env()

    parser = argparse.ArgumentParser(
        description="LLM API cost calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  models      List models, rates, and features in the pricing catalog
  estimate    Compare projected costs across models
  chart       Write a bar/radar/scatter chart as standalone HTML

Examples:
  llm-cost estimate --input 20 --output 200 --requests 100
  llm-cost estimate --tokens --currency INR --provider Anthropic
  llm-cost chart --chart-type scatter --out costs.html
        """,
    )

    parser.add_argument(
        "command",
        choices=["models", "estimate", "chart"],
        help="Command to run",
    )

    # Parse just the command first
    args, remaining = parser.parse_known_args()

    commands = {
        "models": run_models_cli,
        "estimate": run_estimate_cli,
        "chart": run_chart_cli,
    }

    # Re-inject remaining args for the subcommand
    sys.argv = [sys.argv[0]] + remaining

    try:
        _configure_logging(get_config())
        return commands[args.command]()
    except LLMCostError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except KeyboardInterrupt:
        print("\nInterrupted")
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
