"""
LLM cost calculator - projects LLM API spend across models and providers.

ARCHITECTURE:
-------------
- catalog/: Pricing records, built-in table, file/in-memory sources
- engine/: compute_cost, the pure cost function, and its data models
- analysis/: Average, deviation, efficiency, best value, savings
- inputs.py: Coerces raw user input into CalculationParams
- calculator.py: Catalog -> engine -> aggregation for a selection
- report/: Formatting, text tables, Plotly charts
- cli/: `llm-cost` command

USAGE:
------
from llm_cost_calculator import CalculationParams, calculate, load_default_catalog

report = calculate(
    CalculationParams(input_size=20, output_size=200, requests=100),
    providers=["OpenAI", "Anthropic"],
    catalog=load_default_catalog(),
)
print(report.summary.best_value.model.name)
"""

from llm_cost_calculator.catalog import (
    DEFAULT_MODELS,
    ModelFeature,
    ModelPricing,
    PricingCatalog,
    Provider,
    get_catalog_source,
    load_default_catalog,
)
from llm_cost_calculator.engine import (
    CalculationParams,
    ChartType,
    CostBreakdown,
    CostResult,
    Currency,
    TimeFrame,
    TokenCounts,
    USD_TO_INR,
    WORD_TO_TOKEN_RATIO,
    compute_cost,
)
from llm_cost_calculator.analysis import (
    CostSummary,
    ModelCost,
    summarize,
)
from llm_cost_calculator.calculator import (
    CalculationReport,
    CostRow,
    calculate,
)
from llm_cost_calculator.exceptions import (
    CatalogError,
    ConfigError,
    EmptySelectionError,
    LLMCostError,
)
from llm_cost_calculator.inputs import CalculationRequest, parse_params

__version__ = "1.0.0"

__all__ = [
    # Catalog
    "DEFAULT_MODELS",
    "ModelFeature",
    "ModelPricing",
    "PricingCatalog",
    "Provider",
    "get_catalog_source",
    "load_default_catalog",
    # Engine
    "CalculationParams",
    "ChartType",
    "CostBreakdown",
    "CostResult",
    "Currency",
    "TimeFrame",
    "TokenCounts",
    "USD_TO_INR",
    "WORD_TO_TOKEN_RATIO",
    "compute_cost",
    # Analysis
    "CostSummary",
    "ModelCost",
    "summarize",
    # Calculator
    "CalculationReport",
    "CostRow",
    "calculate",
    # Inputs
    "CalculationRequest",
    "parse_params",
    # Errors
    "CatalogError",
    "ConfigError",
    "EmptySelectionError",
    "LLMCostError",
]
