"""
Shared fixtures for calculator tests.

Every test starts from a clean configuration: LLM_COST_* variables are
removed and the config singleton is reset, so a developer's .env never
leaks into assertions.
"""

import pytest

from llm_cost_calculator.catalog import (
    DEFAULT_MODELS,
    ModelFeature,
    ModelPricing,
    PricingCatalog,
    Provider,
)
from llm_cost_calculator.config import reset_config
from llm_cost_calculator.engine import CalculationParams


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    for name in ("LLM_COST_USD_TO_INR", "LLM_COST_CATALOG", "LLM_COST_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def catalog():
    """The built-in pricing table."""
    return PricingCatalog(DEFAULT_MODELS)


@pytest.fixture
def sonnet():
    """A $3 / $15 per 1M token model."""
    return ModelPricing(
        id="claude3-sonnet",
        name="Claude 3 Sonnet",
        provider=Provider.ANTHROPIC,
        input_cost=3.0,
        output_cost=15.0,
        context_window=200_000,
        features=frozenset({ModelFeature.JSON_MODE, ModelFeature.VISION}),
    )


@pytest.fixture
def word_params():
    """20 words in, 200 words out, 100 requests."""
    return CalculationParams(input_size=20, output_size=200, requests=100, use_tokens=False)


@pytest.fixture
def token_params():
    """20 tokens in, 200 tokens out, 100 requests."""
    return CalculationParams(input_size=20, output_size=200, requests=100, use_tokens=True)


def make_model(
    model_id: str,
    input_cost: float = 1.0,
    output_cost: float = 1.0,
    provider: Provider = Provider.OPENAI,
    context_window: int = 100_000,
    features: frozenset = frozenset(),
) -> ModelPricing:
    """Build a catalog entry with only the fields a test cares about."""
    return ModelPricing(
        id=model_id,
        name=model_id.upper(),
        provider=provider,
        input_cost=input_cost,
        output_cost=output_cost,
        context_window=context_window,
        features=features,
    )
