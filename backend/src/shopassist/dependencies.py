"""FastAPI dependency providers.

Long-lived adapters (provider client, object storage, token client) are
built once per process; the catalog store and search engine are built per
request around the request's database session.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from .config import settings
from .database import get_db
from .domain.ai import EmbeddingProviderPort
from .infrastructure.ai import OpenAIEmbeddingAdapter
from .infrastructure.catalog import PgVectorCatalogStore
from .infrastructure.storage import build_storage_from_settings
from .search.engine import ProductSearchEngine
from .search.image_resolver import ImageResolver
from .search.ports import ProductSearchPort
from .tools.adapter import ShoppingToolAdapter
from .voice.agent_config import AgentConfig
from .voice.ephemeral_token import EphemeralTokenClient


@lru_cache()
def get_embedding_provider() -> EmbeddingProviderPort:
    return OpenAIEmbeddingAdapter()


@lru_cache()
def get_image_resolver() -> ImageResolver:
    return ImageResolver(
        storage=build_storage_from_settings(settings),
        url_ttl_seconds=settings.S3_PRESIGNED_URL_TTL_SECONDS,
    )


@lru_cache()
def get_ephemeral_token_client() -> EphemeralTokenClient:
    return EphemeralTokenClient(
        api_key=settings.OPENAI_API_KEY,
        model=settings.REALTIME_MODEL,
        base_url=settings.OPENAI_API_BASE_URL,
        timeout=settings.REALTIME_TOKEN_TIMEOUT_SECONDS,
    )


@lru_cache()
def get_agent_config() -> AgentConfig:
    return AgentConfig.from_settings(settings)


def get_catalog_store(db: AsyncSession = Depends(get_db)) -> PgVectorCatalogStore:
    return PgVectorCatalogStore(db)


def get_search_engine(
    catalog: PgVectorCatalogStore = Depends(get_catalog_store),
    provider: EmbeddingProviderPort = Depends(get_embedding_provider),
    image_resolver: ImageResolver = Depends(get_image_resolver),
) -> ProductSearchPort:
    return ProductSearchEngine(provider, catalog, image_resolver, settings)


def get_tool_adapter(engine: ProductSearchPort = Depends(get_search_engine)) -> ShoppingToolAdapter:
    return ShoppingToolAdapter(engine)
