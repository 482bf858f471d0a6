"""Pydantic 모델"""
from app.models.catalog import (
    CatalogCategory,
    CatalogProduct,
    CatalogVariant,
    Metafield,
    OptionValue,
)
from app.models.bundle import (
    BundleComponent,
    BundleStockInfo,
    BundleStockResponse,
    LinkedComponentRef,
    compute_max_bundles,
)

__all__ = [
    "CatalogCategory",
    "CatalogProduct",
    "CatalogVariant",
    "Metafield",
    "OptionValue",
    "BundleComponent",
    "BundleStockInfo",
    "BundleStockResponse",
    "LinkedComponentRef",
    "compute_max_bundles",
]
