"""Pydantic schemas for search endpoints."""

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class TextSearchRequest(BaseModel):
    """Text search request."""
    query: str = Field(..., min_length=1, description="Free-text product description, e.g. 'red sneakers'")
    min_price: Optional[float] = Field(None, ge=0, description="Inclusive minimum price")
    max_price: Optional[float] = Field(None, ge=0, description="Inclusive maximum price")
    category_id: Optional[UUID] = None


class ImageSearchRequest(BaseModel):
    """Image search request."""
    image_url: str = Field(..., min_length=1, description="Image URL or stored image key")
    min_price: Optional[float] = Field(None, ge=0)
    max_price: Optional[float] = Field(None, ge=0)
    category_id: Optional[UUID] = None


class SearchResultSchema(BaseModel):
    """Ranked product in a search response."""
    model_config = ConfigDict(from_attributes=True)

    product_id: UUID
    name: str
    brand: str
    price: float
    category: str
    description: str
    image_url: str
    score: float


class SearchResponse(BaseModel):
    """Search response, most similar first."""
    results: List[SearchResultSchema]
    total: int


class CategorySchema(BaseModel):
    """Catalog category."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    slug: str
    description: str
