"""Search API endpoints.

Provider failures, unresolved images and blank queries are translated to
HTTP errors by the application exception handlers.
"""

from typing import List

from fastapi import APIRouter, Depends

from ..dependencies import get_search_engine
from .ports import ProductSearchPort, SearchFilters
from .schemas import (
    CategorySchema,
    ImageSearchRequest,
    SearchResponse,
    SearchResultSchema,
    TextSearchRequest,
)

router = APIRouter(prefix="/api/v1", tags=["search"])


def _to_response(results) -> SearchResponse:
    return SearchResponse(
        results=[SearchResultSchema.model_validate(r) for r in results],
        total=len(results),
    )


@router.post("/search/text", response_model=SearchResponse)
async def search_by_text(
    request: TextSearchRequest,
    engine: ProductSearchPort = Depends(get_search_engine),
):
    """Search products by free-text description (up to 10, most similar first)."""
    results = await engine.search_by_text(
        request.query,
        SearchFilters(
            min_price=request.min_price,
            max_price=request.max_price,
            category_id=request.category_id,
        ),
    )
    return _to_response(results)


@router.post("/search/image", response_model=SearchResponse)
async def search_by_image(
    request: ImageSearchRequest,
    engine: ProductSearchPort = Depends(get_search_engine),
):
    """Search products similar to an image URL or stored image key."""
    results = await engine.search_by_image(
        request.image_url,
        SearchFilters(
            min_price=request.min_price,
            max_price=request.max_price,
            category_id=request.category_id,
        ),
    )
    return _to_response(results)


@router.get("/categories", response_model=List[CategorySchema])
async def list_categories(engine: ProductSearchPort = Depends(get_search_engine)):
    """List catalog categories."""
    categories = await engine.list_categories()
    return [CategorySchema.model_validate(c) for c in categories]
