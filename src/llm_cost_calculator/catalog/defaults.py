"""
Built-in pricing table.

Rates are per 1M tokens (USD), taken from the providers' public pricing
pages at the time the table was assembled. Load a catalog file to override.
"""

from llm_cost_calculator.catalog.models import ModelFeature, ModelPricing, Provider

F = ModelFeature

DEFAULT_MODELS: tuple[ModelPricing, ...] = (
    ModelPricing(
        id="gpt4-turbo",
        name="GPT-4 Turbo",
        provider=Provider.OPENAI,
        input_cost=10.0,
        output_cost=30.0,
        context_window=128_000,
        features=frozenset({
            F.JSON_MODE, F.FUNCTION_CALLING, F.VISION,
            F.STREAMING, F.FINE_TUNING, F.RAG_OPTIMIZED,
        }),
        description="Latest GPT-4 model optimized for better performance and lower latency",
    ),
    ModelPricing(
        id="gpt35-turbo",
        name="GPT-3.5 Turbo",
        provider=Provider.OPENAI,
        input_cost=0.5,
        output_cost=1.5,
        context_window=16_000,
        features=frozenset({
            F.JSON_MODE, F.FUNCTION_CALLING, F.STREAMING,
            F.FINE_TUNING, F.RAG_OPTIMIZED,
        }),
        description="Fast and cost-effective model for most use cases",
    ),
    ModelPricing(
        id="claude3-opus",
        name="Claude 3 Opus",
        provider=Provider.ANTHROPIC,
        input_cost=15.0,
        output_cost=75.0,
        context_window=200_000,
        features=frozenset({F.JSON_MODE, F.VISION, F.STREAMING, F.RAG_OPTIMIZED}),
        description="Most capable Claude model with superior reasoning and analysis",
    ),
    ModelPricing(
        id="claude3-sonnet",
        name="Claude 3 Sonnet",
        provider=Provider.ANTHROPIC,
        input_cost=3.0,
        output_cost=15.0,
        context_window=200_000,
        features=frozenset({F.JSON_MODE, F.VISION, F.STREAMING, F.RAG_OPTIMIZED}),
        description="Balanced model offering high performance at lower cost",
    ),
    ModelPricing(
        id="mixtral-8x7b",
        name="Mixtral 8x7B",
        provider=Provider.GROQ,
        input_cost=7.0,
        output_cost=24.0,
        context_window=32_000,
        features=frozenset({F.STREAMING, F.RAG_OPTIMIZED}),
        description="High-performance open model with extremely low latency",
    ),
)
