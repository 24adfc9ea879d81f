"""Catalog Store Port - read access to categories, products and vector indexes.

Hexagonal Architecture: the search engine depends on this port; the pgvector
adapter lives in infrastructure.catalog.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from .models import CatalogCategory, CatalogProduct, VectorIndex, VectorMatch


class CatalogStorePort(ABC):
    """Port interface for catalog reads.

    Implementations:
    - PgVectorCatalogStore: PostgreSQL + pgvector HNSW indexes
    """

    @abstractmethod
    async def vector_search(
        self,
        index: VectorIndex,
        query_vector: List[float],
        limit: int,
        category_id: Optional[UUID] = None,
    ) -> List[VectorMatch]:
        """Nearest-neighbour search over one embedding index.

        Args:
            index: Which vector field to search (text or image)
            query_vector: Query embedding
            limit: Maximum number of candidates
            category_id: Optional category restriction applied inside the index query

        Returns:
            Candidates sorted by similarity descending (best matches first)
        """
        pass

    @abstractmethod
    async def get_products_by_embedding_ids(
        self,
        embedding_ids: Sequence[UUID],
    ) -> List[CatalogProduct]:
        """Batch-resolve embedding ids to their owning products.

        Ids without an owning product are simply absent from the result.
        """
        pass

    @abstractmethod
    async def get_all_categories(self) -> List[CatalogCategory]:
        """List every category in the catalog."""
        pass
