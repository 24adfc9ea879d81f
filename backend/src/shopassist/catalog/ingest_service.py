"""Catalog ingest: create products together with their text and image embeddings.

Each product is written with its ProductEmbedding in the caller's
transaction: the embedding row first, then the product referencing it.
Committing is left to the session owner (see database.get_db_session).
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..domain.ai import EmbeddingProviderPort
from ..models import Category, Product, ProductEmbedding
from ..search.image_resolver import ImageResolver

logger = logging.getLogger(__name__)


def slugify(name: str) -> str:
    """'Home & Kitchen' -> 'home-kitchen'"""
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


def product_embedding_text(name: str, brand: str, description: str) -> str:
    """Canonical text embedded into the text index."""
    return ". ".join(part.strip() for part in (name, brand, description) if part and part.strip())


@dataclass(frozen=True)
class ProductDraft:
    """Product data before embeddings are generated."""
    name: str
    brand: str
    description: str
    price: float
    category: str
    image_url: str


class CatalogIngestService:
    """Seeds the catalog.

    Example:
        async with get_db_session() as db:
            service = CatalogIngestService(db, OpenAIEmbeddingAdapter())
            product = await service.ingest_product(draft)
    """

    def __init__(
        self,
        db: AsyncSession,
        provider: EmbeddingProviderPort,
        image_resolver: Optional[ImageResolver] = None,
    ):
        self.db = db
        self.provider = provider
        self.image_resolver = image_resolver or ImageResolver()

    async def ensure_category(self, name: str, description: str = "") -> Category:
        """Return the category with this name's slug, creating it if missing."""
        slug = slugify(name)
        result = await self.db.execute(select(Category).where(Category.slug == slug))
        category = result.scalar_one_or_none()
        if category is not None:
            return category

        category = Category(name=name, slug=slug, description=description)
        self.db.add(category)
        await self.db.flush()
        logger.info(f"Created category {name} ({slug})")
        return category

    async def ingest_product(self, draft: ProductDraft) -> Product:
        """Embed and insert one product.

        Raises:
            ValueError: If the price is negative
            ProviderFailure: If captioning or embedding fails (nothing is written)
            ImageNotFoundError: If the product image reference does not resolve
            EmbeddingDimensionError: If the provider returns wrong-length vectors
        """
        if draft.price < 0:
            raise ValueError(f"Price must be non-negative, got {draft.price}")

        text_result = await self.provider.embed_text(
            product_embedding_text(draft.name, draft.brand, draft.description)
        )
        image_url = await self.image_resolver.resolve(draft.image_url)
        caption = await self.provider.describe_image(image_url)
        image_result = await self.provider.embed_text(caption.description)

        category = await self.ensure_category(draft.category)

        embedding = ProductEmbedding(
            text_embedding=text_result.embedding,
            image_embedding=image_result.embedding,
        )
        self.db.add(embedding)
        await self.db.flush()

        product = Product(
            name=draft.name,
            brand=draft.brand,
            description=draft.description,
            price=draft.price,
            category_id=category.id,
            image_url=draft.image_url,
            embedding_id=embedding.id,
        )
        self.db.add(product)
        await self.db.flush()

        logger.info(f"Ingested product {draft.name} into {category.slug}")
        return product
