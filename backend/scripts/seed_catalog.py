#!/usr/bin/env python
"""Seed the product catalog with embedded products.

Reads a JSON list of products, generates text and image embeddings for each
through the configured provider, and inserts them with their categories.
Stops on the first failure; products already committed stay in place.

Usage:
    python backend/scripts/seed_catalog.py [path/to/products.json]

Each product entry:
    {"name": ..., "brand": ..., "description": ..., "price": 19.99,
     "category": "Electronics", "image_url": "https://... or storage key"}

Environment Variables:
    DATABASE_URL: Async PostgreSQL connection string (pgvector required)
    OPENAI_API_KEY: OpenAI API key (required)
    S3_*: Object storage settings, when image_url values are storage keys
"""

import asyncio
import json
import sys
from pathlib import Path

from shopassist.catalog import CatalogIngestService, ProductDraft
from shopassist.config import settings
from shopassist.database import get_db_session, init_db
from shopassist.infrastructure.ai import OpenAIEmbeddingAdapter
from shopassist.infrastructure.storage import build_storage_from_settings
from shopassist.observability import configure_logging, get_logger
from shopassist.search.image_resolver import ImageResolver

DEFAULT_PRODUCTS_FILE = Path(__file__).parent / "data" / "products.json"

logger = get_logger("seed_catalog")


async def seed(products_file: Path) -> int:
    drafts = [ProductDraft(**entry) for entry in json.loads(products_file.read_text())]
    logger.info(f"Seeding {len(drafts)} products from {products_file}")

    await init_db()
    provider = OpenAIEmbeddingAdapter()
    resolver = ImageResolver(
        storage=build_storage_from_settings(settings),
        url_ttl_seconds=settings.S3_PRESIGNED_URL_TTL_SECONDS,
    )

    for i, draft in enumerate(drafts, start=1):
        logger.info(f"[{i}/{len(drafts)}] Processing: {draft.name}")
        # One transaction per product
        async with get_db_session() as db:
            await CatalogIngestService(db, provider, resolver).ingest_product(draft)

    return len(drafts)


def main():
    configure_logging(level=settings.LOG_LEVEL, json_format=False)
    products_file = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_PRODUCTS_FILE
    if not products_file.exists():
        print(f"ERROR: products file not found: {products_file}")
        sys.exit(1)

    count = asyncio.run(seed(products_file))
    print(f"Successfully seeded {count} products")


if __name__ == "__main__":
    main()
