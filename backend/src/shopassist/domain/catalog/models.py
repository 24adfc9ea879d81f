"""Read models returned by the Catalog Store."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID


class VectorIndex(str, Enum):
    """Nearest-neighbour indexes over product embeddings."""
    TEXT = "text"    # by_text_embedding
    IMAGE = "image"  # by_image_embedding


@dataclass(frozen=True)
class VectorMatch:
    """Single nearest-neighbour candidate.

    Attributes:
        embedding_id: ProductEmbedding UUID
        score: Similarity reported by the index (higher is better)
    """
    embedding_id: UUID
    score: float


@dataclass(frozen=True)
class CatalogCategory:
    """Category as exposed to search and tools."""
    id: UUID
    name: str
    slug: str
    description: str

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "slug": self.slug,
            "description": self.description,
        }


@dataclass(frozen=True)
class CatalogProduct:
    """Hydrated product with its category name resolved."""
    id: UUID
    name: str
    brand: str
    description: str
    price: float
    category_id: UUID
    category_name: str
    image_url: str
    embedding_id: UUID
    created_at: Optional[datetime] = None
