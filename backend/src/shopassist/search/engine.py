"""Product similarity search engine.

Pipeline (shared by text and image search):
1. Derive a query vector (text: embed query; image: resolve -> caption -> embed caption)
2. Nearest-neighbour search with an over-fetched candidate pool
3. Similarity threshold gate (per mode)
4. Batched hydration of embedding ids into products (orphans dropped)
5. Price and category post-filters
6. Index order preserved, truncated to the result limit
"""

import asyncio
import logging
import time
from typing import Awaitable, List, Optional, TypeVar

from ..config import Settings, settings as default_settings
from ..domain.ai import EmbeddingProviderPort, ProviderFailure, ProviderTimeoutError
from ..domain.catalog import CatalogCategory, CatalogStorePort, VectorIndex, VectorMatch
from ..observability.metrics import search_duration_seconds, search_requests_total, search_result_count
from .filters import matches_category, matches_price, passes_threshold
from .image_resolver import ImageResolver
from .ports import (
    ImageNotFoundError,
    InvalidSearchQuery,
    ProductSearchPort,
    SearchFilters,
    SearchMode,
    SearchResult,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ProductSearchEngine(ProductSearchPort):
    """Stateless search over the catalog's text and image embedding indexes.

    One instance may serve concurrent searches; nothing is cached between calls.

    Example:
        engine = ProductSearchEngine(provider, catalog, ImageResolver(storage))
        results = await engine.search_by_text("red sneakers", SearchFilters(max_price=50))
    """

    def __init__(
        self,
        provider: EmbeddingProviderPort,
        catalog: CatalogStorePort,
        image_resolver: Optional[ImageResolver] = None,
        settings: Optional[Settings] = None,
    ):
        self.provider = provider
        self.catalog = catalog
        self.image_resolver = image_resolver or ImageResolver()
        self.settings = settings or default_settings

    async def search_by_text(
        self,
        query: str,
        filters: Optional[SearchFilters] = None,
    ) -> List[SearchResult]:
        if not query or not query.strip():
            raise InvalidSearchQuery("Search query cannot be empty")

        return await self._run(SearchMode.TEXT, query.strip(), filters or SearchFilters())

    async def search_by_image(
        self,
        image_ref: str,
        filters: Optional[SearchFilters] = None,
    ) -> List[SearchResult]:
        return await self._run(SearchMode.IMAGE, image_ref, filters or SearchFilters())

    async def list_categories(self) -> List[CatalogCategory]:
        return await self.catalog.get_all_categories()

    async def _run(self, mode: SearchMode, query: str, filters: SearchFilters) -> List[SearchResult]:
        start_time = time.time()
        try:
            if mode == SearchMode.TEXT:
                vector = await self._embed(query)
                index = VectorIndex.TEXT
                threshold = self.settings.TEXT_SIMILARITY_THRESHOLD
            else:
                image_url = await self.image_resolver.resolve(query)
                description = await self._call_provider(self.provider.describe_image(image_url))
                logger.info(f"Image caption for search: {description.description[:120]}")
                vector = await self._embed(description.description)
                index = VectorIndex.IMAGE
                threshold = self.settings.IMAGE_SIMILARITY_THRESHOLD

            if not self.settings.SIMILARITY_GATE_ENABLED:
                threshold = None

            results = await self._rank(index, vector, threshold, filters)

        except ProviderFailure as e:
            search_requests_total.labels(mode=mode.value, outcome="provider_failure").inc()
            logger.warning(f"{mode.value} search aborted, provider failure: {e}", extra={"search_mode": mode.value})
            raise
        except ImageNotFoundError:
            search_requests_total.labels(mode=mode.value, outcome="not_found").inc()
            raise

        search_requests_total.labels(mode=mode.value, outcome="success" if results else "empty").inc()
        search_duration_seconds.labels(mode=mode.value).observe(time.time() - start_time)
        search_result_count.labels(mode=mode.value).observe(len(results))
        logger.info(
            f"{mode.value} search returned {len(results)} results",
            extra={"search_mode": mode.value, "result_count": len(results)},
        )
        return results

    async def _rank(
        self,
        index: VectorIndex,
        vector: List[float],
        threshold: Optional[float],
        filters: SearchFilters,
    ) -> List[SearchResult]:
        pushdown = filters.category_id if self.settings.CATEGORY_FILTER_PUSHDOWN else None
        candidates = await self.catalog.vector_search(
            index,
            vector,
            limit=self.settings.search_pool_size,
            category_id=pushdown,
        )

        gated = [c for c in candidates if passes_threshold(c.score, threshold)]
        if not gated:
            return []

        products = await self.catalog.get_products_by_embedding_ids([c.embedding_id for c in gated])
        product_map = {p.embedding_id: p for p in products}

        results: List[SearchResult] = []
        for candidate in gated:
            product = product_map.get(candidate.embedding_id)
            if product is None:
                logger.debug(f"Dropping orphaned embedding {candidate.embedding_id}")
                continue
            if not matches_price(product.price, filters.min_price, filters.max_price):
                continue
            if not matches_category(product.category_id, filters.category_id):
                continue

            results.append(SearchResult.from_product(product, candidate.score))
            if len(results) >= self.settings.SEARCH_RESULT_LIMIT:
                break

        return results

    async def _embed(self, text: str) -> List[float]:
        result = await self._call_provider(self.provider.embed_text(text))
        return result.embedding

    async def _call_provider(self, call: Awaitable[T]) -> T:
        """Await a provider call under the configured deadline."""
        timeout = self.settings.PROVIDER_TIMEOUT_SECONDS
        try:
            return await asyncio.wait_for(call, timeout=timeout)
        except asyncio.TimeoutError as e:
            raise ProviderTimeoutError(f"Provider call exceeded {timeout}s deadline") from e
