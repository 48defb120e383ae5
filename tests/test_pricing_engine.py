"""
Unit Tests for the Cost Calculation Engine

compute_cost is pure, so every test is a plain input/output check:
1. Worked scenarios in words and tokens mode
2. The closed-form formula holds for every catalog model
3. INR is always USD times the exchange rate
4. Zero and degenerate inputs never raise
"""

import pytest

from llm_cost_calculator.catalog import DEFAULT_MODELS
from llm_cost_calculator.engine import (
    USD_TO_INR,
    WORD_TO_TOKEN_RATIO,
    CalculationParams,
    Currency,
    compute_cost,
    estimate_per_request,
    to_tokens,
)

from conftest import make_model


# ---------------------------------------------------------------------------
# WORKED SCENARIOS
# ---------------------------------------------------------------------------


class TestScenarios:
    """Reference projections for a $3 / $15 model."""

    def test_words_mode(self, word_params, sonnet):
        """20/200 words x 100 requests converts at 1.333 tokens per word."""
        result = compute_cost(word_params, sonnet)

        assert result.tokens.input_per_request == pytest.approx(26.66)
        assert result.tokens.output_per_request == pytest.approx(266.6)
        assert result.tokens.total_input == pytest.approx(2_666)
        assert result.tokens.total_output == pytest.approx(26_660)
        assert result.usd.input == pytest.approx(0.007998)
        assert result.usd.output == pytest.approx(0.3999)
        assert result.usd.total == pytest.approx(0.408, abs=5e-4)

    def test_tokens_mode(self, token_params, sonnet):
        """Token counts are used as-is."""
        result = compute_cost(token_params, sonnet)

        assert result.tokens.total_input == 2_000
        assert result.tokens.total_output == 20_000
        assert result.usd.input == pytest.approx(0.006)
        assert result.usd.output == pytest.approx(0.300)
        assert result.usd.total == pytest.approx(0.306)

    def test_default_params_are_the_words_scenario(self, sonnet, word_params):
        """CalculationParams() starts from the calculator's initial form."""
        assert compute_cost(CalculationParams(), sonnet) == compute_cost(word_params, sonnet)


# ---------------------------------------------------------------------------
# FORMULA PROPERTIES
# ---------------------------------------------------------------------------


class TestFormula:
    """The closed-form cost formula, checked against every catalog model."""

    @pytest.mark.parametrize("model", DEFAULT_MODELS, ids=lambda m: m.id)
    def test_tokens_formula_exact(self, model):
        params = CalculationParams(input_size=1_234, output_size=567, requests=89, use_tokens=True)

        result = compute_cost(params, model)

        expected = (
            (params.requests * params.input_size / 1e6) * model.input_cost
            + (params.requests * params.output_size / 1e6) * model.output_cost
        )
        assert result.usd.total == expected

    @pytest.mark.parametrize("model", DEFAULT_MODELS, ids=lambda m: m.id)
    def test_words_formula_exact(self, model):
        params = CalculationParams(input_size=350, output_size=800, requests=42, use_tokens=False)

        result = compute_cost(params, model)

        input_tokens = params.input_size * WORD_TO_TOKEN_RATIO
        output_tokens = params.output_size * WORD_TO_TOKEN_RATIO
        expected = (
            (params.requests * input_tokens / 1e6) * model.input_cost
            + (params.requests * output_tokens / 1e6) * model.output_cost
        )
        assert result.usd.total == expected

    @pytest.mark.parametrize("model", DEFAULT_MODELS, ids=lambda m: m.id)
    def test_inr_is_usd_times_rate(self, model, word_params):
        result = compute_cost(word_params, model)

        assert result.inr.total == result.usd.total * USD_TO_INR
        assert result.inr.input == result.usd.input * USD_TO_INR
        assert result.inr.output == result.usd.output * USD_TO_INR
        assert result.exchange_rate == USD_TO_INR

    def test_custom_exchange_rate(self, word_params, sonnet):
        result = compute_cost(word_params, sonnet, exchange_rate=83)

        assert result.inr.total == result.usd.total * 83

    def test_default_rate_is_single_constant(self):
        assert USD_TO_INR == 86.65

    def test_no_internal_rounding(self, sonnet):
        """Tiny workloads keep full precision."""
        params = CalculationParams(input_size=1, output_size=0, requests=1, use_tokens=True)

        assert compute_cost(params, sonnet).usd.total == pytest.approx(3e-6)

    def test_costs_for_currency(self, word_params, sonnet):
        result = compute_cost(word_params, sonnet)

        assert result.costs_for(Currency.USD) is result.usd
        assert result.costs_for("INR") is result.inr


# ---------------------------------------------------------------------------
# EDGE CASES
# ---------------------------------------------------------------------------


class TestEdgeCases:
    """Degenerate inputs compute, they never raise."""

    @pytest.mark.parametrize("model", DEFAULT_MODELS, ids=lambda m: m.id)
    def test_zero_requests_is_all_zero(self, model):
        params = CalculationParams(input_size=500, output_size=500, requests=0)

        result = compute_cost(params, model)

        assert result.tokens.total_input == 0
        assert result.tokens.total_output == 0
        assert result.usd.total == 0
        assert result.inr.total == 0

    def test_zero_sizes(self, sonnet):
        params = CalculationParams(input_size=0, output_size=0, requests=1_000)

        result = compute_cost(params, sonnet)

        assert result.usd.input == 0
        assert result.usd.output == 0
        assert result.usd.total == 0

    def test_free_model(self, word_params):
        free = make_model("free", input_cost=0, output_cost=0)

        assert compute_cost(word_params, free).usd.total == 0

    def test_negative_input_is_not_clamped(self, sonnet):
        """Validation belongs to the input layer; the engine just computes."""
        params = CalculationParams(input_size=-10, output_size=0, requests=1, use_tokens=True)

        assert compute_cost(params, sonnet).usd.total < 0

    def test_idempotent(self, word_params, sonnet):
        assert compute_cost(word_params, sonnet) == compute_cost(word_params, sonnet)


# ---------------------------------------------------------------------------
# HELPERS
# ---------------------------------------------------------------------------


class TestHelpers:

    def test_to_tokens(self):
        assert to_tokens(100, use_tokens=True) == 100
        assert to_tokens(100, use_tokens=False) == pytest.approx(133.3)

    def test_estimate_per_request(self, word_params, sonnet):
        single = estimate_per_request(word_params, sonnet)
        full = compute_cost(word_params, sonnet)

        assert single.tokens.total_input == single.tokens.input_per_request
        assert single.usd.total * word_params.requests == pytest.approx(full.usd.total)
        # Original params untouched
        assert word_params.requests == 100
