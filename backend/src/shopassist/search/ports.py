"""Search ports, value objects and errors.

The engine raises; the tool adapter and HTTP routers translate. An empty list is
always a successful search with zero matches, never an error.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional
from uuid import UUID

from ..domain.catalog import CatalogCategory, CatalogProduct


class SearchMode(str, Enum):
    """Which query path produced the vector."""
    TEXT = "text"
    IMAGE = "image"


@dataclass(frozen=True)
class SearchFilters:
    """Deterministic post-filters.

    Attributes:
        min_price: Inclusive lower bound (None = unbounded)
        max_price: Inclusive upper bound (None = unbounded)
        category_id: Required category (None = any)
    """
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    category_id: Optional[UUID] = None


@dataclass(frozen=True)
class SearchResult:
    """Ranked product returned to callers.

    Attributes:
        product_id: Product UUID
        name: Product name
        brand: Brand name
        price: Price in dollars
        category: Category name
        description: Product description
        image_url: Product image URL
        score: Raw similarity reported by the vector index
    """
    product_id: UUID
    name: str
    brand: str
    price: float
    category: str
    description: str
    image_url: str
    score: float

    @classmethod
    def from_product(cls, product: CatalogProduct, score: float) -> "SearchResult":
        return cls(
            product_id=product.id,
            name=product.name,
            brand=product.brand,
            price=product.price,
            category=product.category_name,
            description=product.description,
            image_url=product.image_url,
            score=score,
        )

    def to_dict(self) -> dict:
        return {
            "product_id": str(self.product_id),
            "name": self.name,
            "brand": self.brand,
            "price": self.price,
            "category": self.category,
            "description": self.description,
            "image_url": self.image_url,
            "score": self.score,
        }


class ProductSearchPort(ABC):
    """Port interface for product search.

    Implementations:
    - ProductSearchEngine: embedding provider + catalog store pipeline
    """

    @abstractmethod
    async def search_by_text(
        self,
        query: str,
        filters: Optional[SearchFilters] = None,
    ) -> List[SearchResult]:
        """Search products by free-text description.

        Raises:
            InvalidSearchQuery: If query is blank
            ProviderFailure: If the query could not be embedded
        """
        pass

    @abstractmethod
    async def search_by_image(
        self,
        image_ref: str,
        filters: Optional[SearchFilters] = None,
    ) -> List[SearchResult]:
        """Search products visually similar to an image URL or stored image key.

        Raises:
            ImageNotFoundError: If image_ref does not resolve to a fetchable URL
            ProviderFailure: If captioning or embedding failed
        """
        pass

    @abstractmethod
    async def list_categories(self) -> List[CatalogCategory]:
        """List catalog categories (used to resolve category ids)."""
        pass


class InvalidSearchQuery(ValueError):
    """Search input is unusable (e.g. blank text query)."""
    pass


class ImageNotFoundError(Exception):
    """Image reference could not be resolved to a fetchable URL."""

    def __init__(self, image_ref: str, reason: str = "image could not be resolved"):
        self.image_ref = image_ref
        super().__init__(f"Image not found: {image_ref} ({reason})")
