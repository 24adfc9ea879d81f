"""Product similarity search - text and image queries over dual embeddings."""

from .ports import (
    ImageNotFoundError,
    InvalidSearchQuery,
    ProductSearchPort,
    SearchFilters,
    SearchMode,
    SearchResult,
)
from .engine import ProductSearchEngine
from .image_resolver import ImageResolver

__all__ = [
    "ImageNotFoundError",
    "InvalidSearchQuery",
    "ProductSearchPort",
    "SearchFilters",
    "SearchMode",
    "SearchResult",
    "ProductSearchEngine",
    "ImageResolver",
]
