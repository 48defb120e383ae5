"""
Exception hierarchy for the cost calculator.

Expected "no result" states (an empty selection reaching the calculator, a
zero average cost) are reported through result objects, not exceptions.
These exceptions cover precondition violations and bad configuration.
"""


class LLMCostError(Exception):
    """Base class for all calculator errors."""


class CatalogError(LLMCostError):
    """A catalog violates its invariants or a catalog file is malformed."""


class ConfigError(LLMCostError):
    """An environment setting could not be parsed."""


class EmptySelectionError(LLMCostError):
    """An aggregation was invoked over zero models."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} requires at least one selected model")
