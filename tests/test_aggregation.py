"""
Unit Tests for Aggregation and Ranking

Builds ModelCost lists from real engine output and checks:
1. Averages and percentage deviation (including the all-zero case)
2. Efficiency score arithmetic and best-value tie-breaking
3. Potential savings
4. Empty selections raise instead of producing NaN
"""

import math

import pytest

from llm_cost_calculator.analysis import (
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
from llm_cost_calculator.catalog import DEFAULT_MODELS, ModelFeature, Provider
from llm_cost_calculator.engine import CalculationParams, Currency, compute_cost
from llm_cost_calculator.exceptions import EmptySelectionError

from conftest import make_model


def costs_for(models, params=None):
    params = params or CalculationParams(input_size=1_000_000, output_size=0, requests=1, use_tokens=True)
    return [ModelCost(model=m, result=compute_cost(params, m)) for m in models]


# ---------------------------------------------------------------------------
# FIXTURES
# ---------------------------------------------------------------------------


@pytest.fixture
def default_costs(word_params):
    return costs_for(DEFAULT_MODELS, word_params)


@pytest.fixture
def priced_costs():
    """Three models whose USD totals are exactly 1, 2 and 3."""
    return costs_for([
        make_model("one", input_cost=1),
        make_model("two", input_cost=2),
        make_model("three", input_cost=3),
    ])


# ---------------------------------------------------------------------------
# AVERAGE / COMPARISON
# ---------------------------------------------------------------------------


class TestAverageCost:

    def test_mean(self, priced_costs):
        assert average_cost(priced_costs) == 2.0

    @pytest.mark.parametrize("rate", [0.1, 0.7, 3.0, 15.0])
    def test_identical_costs_average_exactly(self, rate):
        costs = costs_for(
            [make_model(f"m{i}", input_cost=rate, output_cost=rate) for i in range(7)],
            CalculationParams(input_size=333, output_size=77, requests=13),
        )

        avg = average_cost(costs)

        assert avg == costs[0].total()
        for c in costs:
            assert comparison_percentage(c.total(), avg) == 0

    def test_currency(self, priced_costs):
        assert average_cost(priced_costs, Currency.INR) == pytest.approx(2.0 * 86.65)

    def test_empty_raises(self):
        with pytest.raises(EmptySelectionError):
            average_cost([])


class TestComparisonPercentage:

    def test_above_and_below(self):
        assert comparison_percentage(3.0, 2.0) == 50.0
        assert comparison_percentage(1.0, 2.0) == -50.0

    def test_zero_average_is_undefined(self):
        assert comparison_percentage(0.0, 0.0) is None


# ---------------------------------------------------------------------------
# EFFICIENCY / BEST VALUE
# ---------------------------------------------------------------------------


class TestEfficiencyScore:

    def test_formula(self):
        model = make_model(
            "m",
            input_cost=1,
            output_cost=3,
            context_window=100_000,
            features=frozenset({ModelFeature.VISION, ModelFeature.STREAMING, ModelFeature.JSON_MODE}),
        )
        # avg rate 2 -> 0.5 * 0.4; 3/6 features * 0.3; 0.5 context * 0.3
        expected = (0.5 * 0.4 + 0.5 * 0.3 + 0.5 * 0.3) * 100

        assert efficiency_score(model) == pytest.approx(expected)

    def test_default_catalog_scores(self, catalog):
        scores = {m.id: round(efficiency_score(m), 1) for m in catalog}

        assert scores == {
            "gpt4-turbo": 51.2,
            "gpt35-turbo": 67.4,
            "claude3-opus": 50.9,
            "claude3-sonnet": 54.4,
            "mixtral-8x7b": 17.4,
        }

    def test_free_model_scores_infinity(self):
        assert efficiency_score(make_model("free", input_cost=0, output_cost=0)) == math.inf

    def test_deterministic(self, catalog):
        assert [efficiency_score(m) for m in catalog] == [efficiency_score(m) for m in catalog]


class TestBestValue:

    def test_default_catalog(self, default_costs):
        assert best_value(default_costs).model.id == "gpt35-turbo"

    def test_anthropic_only(self, word_params, catalog):
        costs = costs_for(catalog.list_by_provider(Provider.ANTHROPIC), word_params)
        assert best_value(costs).model.id == "claude3-sonnet"

    def test_tie_goes_to_first(self):
        costs = costs_for([make_model("first"), make_model("second"), make_model("third")])

        assert best_value(costs).model.id == "first"
        assert best_value(list(reversed(costs))).model.id == "third"

    def test_scores_compared_unrounded(self):
        # 55.0 vs 55.0015: equal at one decimal, the higher score still wins
        costs = costs_for([
            make_model("first", context_window=100_000),
            make_model("second", context_window=100_010),
        ])

        assert round(efficiency_score(costs[0].model), 1) == round(efficiency_score(costs[1].model), 1)
        assert best_value(costs).model.id == "second"

    def test_repeatable(self, default_costs):
        assert best_value(default_costs) is best_value(default_costs)

    def test_empty_raises(self):
        with pytest.raises(EmptySelectionError):
            best_value([])


class TestCheapest:

    def test_cheapest(self, priced_costs):
        assert cheapest(priced_costs).model.id == "one"

    def test_tie_goes_to_first(self):
        costs = costs_for([make_model("a"), make_model("b")])
        assert cheapest(costs).model.id == "a"


# ---------------------------------------------------------------------------
# SAVINGS
# ---------------------------------------------------------------------------


class TestPotentialSavings:

    def test_savings(self, priced_costs):
        # 1 + 2 + 3 - 1 * 3
        assert potential_savings(priced_costs) == 3.0

    def test_single_model_saves_nothing(self, priced_costs):
        assert potential_savings(priced_costs[:1]) == 0

    def test_empty_raises(self):
        with pytest.raises(EmptySelectionError):
            potential_savings([])


# ---------------------------------------------------------------------------
# SUMMARY
# ---------------------------------------------------------------------------


class TestSummarize:

    def test_summary_fields(self, priced_costs):
        summary = summarize(priced_costs)

        assert isinstance(summary, CostSummary)
        assert summary.currency is Currency.USD
        assert summary.model_count == 3
        assert summary.provider_count == 1
        assert summary.total_cost == 6.0
        assert summary.average_cost == 2.0
        assert summary.potential_savings == 3.0
        assert summary.cheapest.model.id == "one"
        assert summary.comparison_percentages == {"one": -50.0, "two": 0.0, "three": 50.0}
        assert set(summary.efficiency_scores) == {"one", "two", "three"}

    def test_inr_summary(self, priced_costs):
        summary = summarize(priced_costs, "INR")

        assert summary.currency is Currency.INR
        assert summary.total_cost == pytest.approx(6.0 * 86.65)

    def test_all_zero_costs(self, catalog):
        costs = costs_for(catalog, CalculationParams(requests=0))

        summary = summarize(costs)

        assert summary.average_cost == 0
        assert summary.potential_savings == 0
        assert all(p is None for p in summary.comparison_percentages.values())
        assert summary.best_value.model.id == "gpt35-turbo"

    def test_provider_count(self, default_costs):
        assert summarize(default_costs).provider_count == 3

    def test_empty_raises(self):
        with pytest.raises(EmptySelectionError, match="summarize"):
            summarize([])
