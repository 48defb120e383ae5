"""
Pricing data model - catalog entries and their closed vocabularies.

A ModelPricing is a frozen record. Rates are USD per one million tokens;
the context window is informational and never enters the cost math.
"""

from dataclasses import dataclass, field
from enum import Enum


class Provider(str, Enum):
    OPENAI = "OpenAI"
    ANTHROPIC = "Anthropic"
    GROQ = "Groq"

    @classmethod
    def _missing_(cls, value):
        # Case-insensitive lookup: "openai" -> OPENAI
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        return None


class ModelFeature(str, Enum):
    JSON_MODE = "JSON Mode"
    FUNCTION_CALLING = "Function Calling"
    VISION = "Vision"
    STREAMING = "Streaming"
    FINE_TUNING = "Fine-tuning"
    RAG_OPTIMIZED = "RAG Optimized"


@dataclass(frozen=True)
class ModelPricing:
    """One model's pricing and capabilities."""

    id: str
    name: str
    provider: Provider
    input_cost: float  # USD per 1M tokens
    output_cost: float  # USD per 1M tokens
    context_window: int
    features: frozenset[ModelFeature] = field(default_factory=frozenset)
    description: str = ""

    @property
    def average_rate(self) -> float:
        """Mean of the input and output rates, per 1M tokens."""
        return (self.input_cost + self.output_cost) / 2
