"""
Pricing catalog module - model pricing records and where they come from.

- models.py: ModelPricing record, Provider and ModelFeature vocabularies
- defaults.py: Built-in pricing table
- catalog.py: Read-only PricingCatalog lookup
- sources.py: CatalogSource protocol + file/in-memory implementations
"""

from llm_cost_calculator.catalog.models import (
    ModelFeature,
    ModelPricing,
    Provider,
)
from llm_cost_calculator.catalog.defaults import DEFAULT_MODELS
from llm_cost_calculator.catalog.catalog import PricingCatalog
from llm_cost_calculator.catalog.sources import (
    CatalogSource,
    FileCatalogSource,
    InMemoryCatalogSource,
    get_catalog_source,
    load_default_catalog,
)

__all__ = [
    # Models
    "ModelFeature",
    "ModelPricing",
    "Provider",
    "DEFAULT_MODELS",
    # Catalog
    "PricingCatalog",
    # Sources
    "CatalogSource",
    "FileCatalogSource",
    "InMemoryCatalogSource",
    "get_catalog_source",
    "load_default_catalog",
]
