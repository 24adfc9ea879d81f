"""Catalog domain - read models and the Catalog Store port"""

from .models import CatalogCategory, CatalogProduct, VectorIndex, VectorMatch
from .ports import CatalogStorePort

__all__ = [
    "CatalogCategory",
    "CatalogProduct",
    "VectorIndex",
    "VectorMatch",
    "CatalogStorePort",
]
