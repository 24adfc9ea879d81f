"""Unit tests for CatalogIngestService

The AsyncSession is mocked; flush assigns primary keys the way the database would.
"""

from unittest.mock import AsyncMock, MagicMock, Mock
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from conftest import FakeEmbeddingProvider
from shopassist.catalog import CatalogIngestService, ProductDraft, slugify
from shopassist.catalog.ingest_service import product_embedding_text
from shopassist.domain.ai import ProviderServiceError
from shopassist.models import Category, Product, ProductEmbedding
from shopassist.search import ImageNotFoundError


@pytest.fixture
def db():
    session = MagicMock(spec=AsyncSession)
    session.added = []

    def add(obj):
        session.added.append(obj)

    async def flush():
        for obj in session.added:
            if obj.id is None:
                obj.id = uuid4()

    session.add = Mock(side_effect=add)
    session.flush = AsyncMock(side_effect=flush)
    session.execute = AsyncMock(return_value=MagicMock(scalar_one_or_none=Mock(return_value=None)))
    return session


@pytest.fixture
def draft():
    return ProductDraft(
        name="Classic Red Canvas Sneakers",
        brand="StreetStep",
        description="Low-top canvas sneakers in bright red.",
        price=49.99,
        category="Footwear",
        image_url="https://cdn.example.com/red-sneakers.png",
    )


class TestSlugify:
    @pytest.mark.parametrize(
        "name,slug",
        [("Electronics", "electronics"), ("Home & Kitchen", "home-kitchen"), ("  Toys  ", "toys")],
    )
    def test_slugify(self, name, slug):
        assert slugify(name) == slug


class TestIngestProduct:
    @pytest.mark.asyncio
    async def test_embedding_written_before_product(self, db, draft):
        provider = FakeEmbeddingProvider(caption="bright red low-top sneaker")

        product = await CatalogIngestService(db, provider).ingest_product(draft)

        category, embedding, stored = db.added
        assert isinstance(category, Category) and category.slug == "footwear"
        assert isinstance(embedding, ProductEmbedding)
        assert isinstance(stored, Product) and stored is product
        assert product.embedding_id == embedding.id
        assert product.category_id == category.id
        assert product.image_url == draft.image_url

    @pytest.mark.asyncio
    async def test_text_and_caption_embedded(self, db, draft):
        provider = FakeEmbeddingProvider(caption="bright red low-top sneaker")

        await CatalogIngestService(db, provider).ingest_product(draft)

        assert provider.embedded == [
            "Classic Red Canvas Sneakers. StreetStep. Low-top canvas sneakers in bright red.",
            "bright red low-top sneaker",
        ]
        assert provider.described == [draft.image_url]

    @pytest.mark.asyncio
    async def test_existing_category_reused(self, db, draft):
        existing = Category(id=uuid4(), name="Footwear", slug="footwear", description="")
        db.execute.return_value = MagicMock(scalar_one_or_none=Mock(return_value=existing))

        product = await CatalogIngestService(db, FakeEmbeddingProvider()).ingest_product(draft)

        assert product.category_id == existing.id
        assert not any(isinstance(obj, Category) for obj in db.added)

    @pytest.mark.asyncio
    async def test_negative_price_rejected(self, db, draft):
        provider = FakeEmbeddingProvider()
        bad = ProductDraft(**{**draft.__dict__, "price": -1.0})

        with pytest.raises(ValueError):
            await CatalogIngestService(db, provider).ingest_product(bad)
        assert provider.embedded == []

    @pytest.mark.asyncio
    async def test_provider_failure_writes_nothing(self, db, draft):
        provider = FakeEmbeddingProvider()
        provider.error = ProviderServiceError("503")

        with pytest.raises(ProviderServiceError):
            await CatalogIngestService(db, provider).ingest_product(draft)
        assert db.added == []

    @pytest.mark.asyncio
    async def test_unresolvable_image_writes_nothing(self, db, draft):
        bad = ProductDraft(**{**draft.__dict__, "image_url": "products/missing.png"})

        with pytest.raises(ImageNotFoundError):
            await CatalogIngestService(db, FakeEmbeddingProvider()).ingest_product(bad)
        assert db.added == []


def test_embedding_text_skips_blank_parts():
    assert product_embedding_text("Mug", "", "Ceramic") == "Mug. Ceramic"
