"""
Catalog sources - Protocol and implementations for loading pricing catalogs.

Structured like a pluggable store:
1. Protocol defines the interface
2. FileCatalogSource reads/writes a JSON catalog (editable without code changes)
3. InMemoryCatalogSource wraps a list of entries (built-in table, tests)
4. Factory function picks one

FILE FORMAT:
------------
{
  "models": [
    {"id": "gpt4-turbo", "name": "GPT-4 Turbo", "provider": "OpenAI",
     "inputCost": 10, "outputCost": 30, "contextWindow": 128000,
     "features": ["JSON Mode", "Vision"], "description": "..."}
  ]
}

Keys may be camelCase (as above) or snake_case (input_cost, ...).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from llm_cost_calculator.catalog.catalog import PricingCatalog
from llm_cost_calculator.catalog.defaults import DEFAULT_MODELS
from llm_cost_calculator.catalog.models import ModelFeature, ModelPricing, Provider
from llm_cost_calculator.exceptions import CatalogError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# FILE SCHEMA
# ---------------------------------------------------------------------------


class CatalogEntrySchema(BaseModel):
    """One model entry as stored in a catalog file."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    provider: Provider
    input_cost: float = Field(ge=0, alias="inputCost", description="USD per 1M input tokens")
    output_cost: float = Field(ge=0, alias="outputCost", description="USD per 1M output tokens")
    context_window: int = Field(gt=0, alias="contextWindow")
    features: list[ModelFeature] = Field(default_factory=list)
    description: str = ""

    def to_model(self) -> ModelPricing:
        return ModelPricing(
            id=self.id,
            name=self.name,
            provider=self.provider,
            input_cost=self.input_cost,
            output_cost=self.output_cost,
            context_window=self.context_window,
            features=frozenset(self.features),
            description=self.description,
        )

    @classmethod
    def from_model(cls, model: ModelPricing) -> CatalogEntrySchema:
        return cls(
            id=model.id,
            name=model.name,
            provider=model.provider,
            input_cost=model.input_cost,
            output_cost=model.output_cost,
            context_window=model.context_window,
            # Enum declaration order keeps saved files diff-friendly
            features=[f for f in ModelFeature if f in model.features],
            description=model.description,
        )


class CatalogFileSchema(BaseModel):
    """Top-level catalog file document."""

    models: list[CatalogEntrySchema]


# ---------------------------------------------------------------------------
# CATALOG SOURCE PROTOCOL
# ---------------------------------------------------------------------------


@runtime_checkable
class CatalogSource(Protocol):
    """Protocol for catalog source implementations."""

    def load(self) -> PricingCatalog:
        """Build a catalog. Raises CatalogError on invalid data."""
        ...


# ---------------------------------------------------------------------------
# FILE-BASED IMPLEMENTATION
# ---------------------------------------------------------------------------


class FileCatalogSource:
    """Catalog stored as a JSON file.

    Lets operators add models or change rates without touching the engine.
    """

    def __init__(self, file_path: Path | str):
        self._path = Path(file_path)

    @property
    def path(self) -> Path:
        """Get the catalog file path."""
        return self._path

    def load(self) -> PricingCatalog:
        """Load and validate the catalog file."""
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise CatalogError(f"Catalog file not found: {self._path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogError(f"Catalog file could not be read: {self._path}: {e}") from e
        except json.JSONDecodeError as e:
            raise CatalogError(f"Catalog file is not valid JSON: {self._path}: {e}") from e

        try:
            document = CatalogFileSchema.model_validate(data)
        except ValidationError as e:
            raise CatalogError(f"Invalid catalog file {self._path}:\n{e}") from e

        catalog = PricingCatalog(entry.to_model() for entry in document.models)
        logger.info("Loaded %d models from %s", len(catalog), self._path)
        return catalog

    def save(self, catalog: PricingCatalog) -> None:
        """Write the catalog to the JSON file (snake_case keys)."""
        document = CatalogFileSchema(
            models=[CatalogEntrySchema.from_model(m) for m in catalog]
        )
        with open(self._path, "w", encoding="utf-8") as f:
            json.dump(document.model_dump(mode="json"), f, indent=2)
            f.write("\n")
        logger.info("Saved %d models to %s", len(catalog), self._path)


# ---------------------------------------------------------------------------
# IN-MEMORY IMPLEMENTATION
# ---------------------------------------------------------------------------


class InMemoryCatalogSource:
    """Catalog built from in-process entries, the built-in table by default."""

    def __init__(self, models: Iterable[ModelPricing] | None = None):
        self._models = tuple(models) if models is not None else DEFAULT_MODELS

    def load(self) -> PricingCatalog:
        return PricingCatalog(self._models)


# ---------------------------------------------------------------------------
# FACTORY FUNCTION
# ---------------------------------------------------------------------------


def get_catalog_source(
    file_path: Path | str | None = None,
    models: Iterable[ModelPricing] | None = None,
) -> CatalogSource:
    """
    Factory function for catalog sources.

    Args:
        file_path: JSON catalog path. Takes precedence when given.
        models: Entries for an in-memory catalog (built-in table if None).

    Returns:
        CatalogSource implementation.

    Example:
        # Built-in table
        catalog = get_catalog_source().load()

        # Operator-maintained file
        catalog = get_catalog_source("pricing.json").load()
    """
    if file_path is not None:
        return FileCatalogSource(file_path)
    return InMemoryCatalogSource(models)


def load_default_catalog() -> PricingCatalog:
    """The built-in pricing table as a catalog."""
    return InMemoryCatalogSource().load()
