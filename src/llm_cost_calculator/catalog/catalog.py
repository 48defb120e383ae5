"""
Pricing catalog - read-only lookup over ModelPricing entries.

The catalog is an injected object: the engine never imports it, and callers
pass whichever catalog they built (built-in table, file, test fixture).
Updating a rate or adding a model produces a new catalog via with_model();
existing catalogs are never mutated.
"""

from __future__ import annotations

from typing import Iterable

from llm_cost_calculator.catalog.models import ModelPricing, Provider
from llm_cost_calculator.exceptions import CatalogError


class PricingCatalog:
    """Ordered, immutable collection of model pricing entries.

    Declaration order is preserved so downstream sorting stays stable.
    """

    def __init__(self, models: Iterable[ModelPricing]):
        self._models: tuple[ModelPricing, ...] = tuple(models)
        _validate(self._models)
        self._by_id = {m.id: m for m in self._models}

    def __len__(self) -> int:
        return len(self._models)

    def __iter__(self):
        return iter(self._models)

    def __contains__(self, model_id: object) -> bool:
        return model_id in self._by_id

    def __repr__(self) -> str:
        return f"PricingCatalog({len(self._models)} models)"

    def list_all(self) -> list[ModelPricing]:
        """All entries, in declaration order."""
        return list(self._models)

    def list_by_provider(self, provider: Provider | str) -> list[ModelPricing]:
        """Entries for one provider, in declaration order.

        Names match case-insensitively. Unknown providers yield an empty list.
        """
        try:
            provider = Provider(provider)
        except ValueError:
            return []
        return [m for m in self._models if m.provider is provider]

    def get(self, model_id: str) -> ModelPricing | None:
        """Look up an entry by id, None if absent."""
        return self._by_id.get(model_id)

    def providers(self) -> list[Provider]:
        """Providers present in the catalog, in first-seen order."""
        seen: list[Provider] = []
        for m in self._models:
            if m.provider not in seen:
                seen.append(m.provider)
        return seen

    def with_model(self, model: ModelPricing) -> PricingCatalog:
        """Return a new catalog with `model` added or replacing the same id."""
        if model.id in self._by_id:
            models = [model if m.id == model.id else m for m in self._models]
        else:
            models = [*self._models, model]
        return PricingCatalog(models)


def _validate(models: tuple[ModelPricing, ...]) -> None:
    seen: set[str] = set()
    for m in models:
        if m.id in seen:
            raise CatalogError(f"Duplicate model id: {m.id}")
        seen.add(m.id)
        if not isinstance(m.provider, Provider):
            raise CatalogError(f"{m.id}: unsupported provider {m.provider!r}")
        if m.input_cost < 0 or m.output_cost < 0:
            raise CatalogError(f"{m.id}: rates must be non-negative")
        if m.context_window <= 0:
            raise CatalogError(f"{m.id}: context window must be positive")
