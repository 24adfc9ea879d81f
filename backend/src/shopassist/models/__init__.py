"""SQLAlchemy models for the product catalog"""

from .base import Base
from .category import Category
from .product import Product
from .product_embedding import ProductEmbedding, EmbeddingDimensionError

__all__ = [
    "Base",
    "Category",
    "Product",
    "ProductEmbedding",
    "EmbeddingDimensionError",
]
