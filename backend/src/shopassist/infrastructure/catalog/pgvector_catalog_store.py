"""PgVector Catalog Store - CatalogStorePort over PostgreSQL + pgvector.

Cosine similarity search over the two HNSW indexes of product_embedding.
"""

from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ...domain.catalog import (
    CatalogCategory,
    CatalogProduct,
    CatalogStorePort,
    VectorIndex,
    VectorMatch,
)
from ...models import Category, Product, ProductEmbedding


class PgVectorCatalogStore(CatalogStorePort):
    """Catalog reads backed by an AsyncSession.

    Notes:
        - pgvector <=> is cosine distance (0 = identical, 2 = opposite)
        - Similarity reported as 1 - distance, ordered by distance ascending
        - Category restriction joins product; price is never pushed down
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    def _vector_column(self, index: VectorIndex):
        if index == VectorIndex.TEXT:
            return ProductEmbedding.text_embedding
        return ProductEmbedding.image_embedding

    async def vector_search(
        self,
        index: VectorIndex,
        query_vector: List[float],
        limit: int,
        category_id: Optional[UUID] = None,
    ) -> List[VectorMatch]:
        column = self._vector_column(index)
        distance = column.cosine_distance(query_vector)

        query = (
            select(ProductEmbedding.id, (1 - distance).label("similarity"))
            .order_by(distance)
            .limit(limit)
        )

        if category_id is not None:
            query = query.join(Product, Product.embedding_id == ProductEmbedding.id).where(
                Product.category_id == category_id
            )

        rows = (await self.db.execute(query)).all()
        return [VectorMatch(embedding_id=row.id, score=float(row.similarity)) for row in rows]

    async def get_products_by_embedding_ids(
        self,
        embedding_ids: Sequence[UUID],
    ) -> List[CatalogProduct]:
        if not embedding_ids:
            return []

        query = (
            select(Product, Category.name.label("category_name"))
            .join(Category, Category.id == Product.category_id)
            .where(Product.embedding_id.in_(list(embedding_ids)))
        )
        rows = (await self.db.execute(query)).all()

        return [
            CatalogProduct(
                id=row.Product.id,
                name=row.Product.name,
                brand=row.Product.brand,
                description=row.Product.description,
                price=float(row.Product.price),
                category_id=row.Product.category_id,
                category_name=row.category_name,
                image_url=row.Product.image_url,
                embedding_id=row.Product.embedding_id,
                created_at=row.Product.created_at,
            )
            for row in rows
        ]

    async def get_all_categories(self) -> List[CatalogCategory]:
        rows = (await self.db.execute(select(Category).order_by(Category.name))).scalars().all()
        return [
            CatalogCategory(
                id=category.id,
                name=category.name,
                slug=category.slug,
                description=category.description,
            )
            for category in rows
        ]
