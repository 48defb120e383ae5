"""
Cost estimation - the calculation engine.

compute_cost is a PURE FUNCTION: no side effects, no validation, no
rounding. Callers are expected to have coerced invalid input already; any
finite numbers produce a result, including zero sizes and zero requests.
"""

from dataclasses import replace

from llm_cost_calculator.catalog.models import ModelPricing
from llm_cost_calculator.config import DEFAULT_USD_TO_INR
from llm_cost_calculator.engine.metrics import CostBreakdown, CostResult, TokenCounts
from llm_cost_calculator.engine.params import CalculationParams

# ---------------------------------------------------------------------------
# CONSTANTS
# ---------------------------------------------------------------------------

# 1 word ≈ 1.333 tokens. Fixed approximation, not model-specific.
WORD_TO_TOKEN_RATIO = 1.333

# Rates in the catalog are per one million tokens
TOKENS_PER_RATE_UNIT = 1_000_000

USD_TO_INR = DEFAULT_USD_TO_INR


# ---------------------------------------------------------------------------
# COST ESTIMATION
# ---------------------------------------------------------------------------


def to_tokens(size: float, use_tokens: bool) -> float:
    """Convert an input/output size to tokens."""
    return size if use_tokens else size * WORD_TO_TOKEN_RATIO


def compute_cost(
    params: CalculationParams,
    model: ModelPricing,
    exchange_rate: float = USD_TO_INR,
) -> CostResult:
    """
    Project the cost of a workload on one model.

    Args:
        params: Workload parameters (sizes, request count, unit toggle)
        model: Catalog entry supplying the per-1M-token rates
        exchange_rate: INR per USD applied to every USD figure

    Returns:
        CostResult with token counts and USD/INR breakdowns

    Example:
        >>> params = CalculationParams(input_size=20, output_size=200,
        ...                            requests=100, use_tokens=True)
        >>> compute_cost(params, sonnet).usd.total
        0.306  # 2,000 tokens * $3/1M + 20,000 tokens * $15/1M
    """
    input_tokens = to_tokens(params.input_size, params.use_tokens)
    output_tokens = to_tokens(params.output_size, params.use_tokens)

    total_input = input_tokens * params.requests
    total_output = output_tokens * params.requests

    input_usd = (total_input / TOKENS_PER_RATE_UNIT) * model.input_cost
    output_usd = (total_output / TOKENS_PER_RATE_UNIT) * model.output_cost
    total_usd = input_usd + output_usd

    return CostResult(
        tokens=TokenCounts(
            input_per_request=input_tokens,
            output_per_request=output_tokens,
            total_input=total_input,
            total_output=total_output,
        ),
        usd=CostBreakdown(input=input_usd, output=output_usd, total=total_usd),
        inr=CostBreakdown(
            input=input_usd * exchange_rate,
            output=output_usd * exchange_rate,
            total=total_usd * exchange_rate,
        ),
        exchange_rate=exchange_rate,
    )


def estimate_per_request(
    params: CalculationParams,
    model: ModelPricing,
    exchange_rate: float = USD_TO_INR,
) -> CostResult:
    """Cost of a single request with the same sizes."""
    return compute_cost(replace(params, requests=1), model, exchange_rate)
