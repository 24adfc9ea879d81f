"""Argument schemas for the voice-agent tools.

Field aliases are the camelCase names the realtime agent sends; the JSON
schemas advertised to the agent are generated from these models.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _ToolArguments(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", allow_inf_nan=False)


class _PriceCategoryArguments(_ToolArguments):
    min_price: Optional[float] = Field(
        None,
        alias="minPrice",
        ge=0,
        description="Optional minimum price filter in dollars (inclusive)",
    )
    max_price: Optional[float] = Field(
        None,
        alias="maxPrice",
        ge=0,
        description="Optional maximum price filter in dollars (inclusive)",
    )
    category_id: Optional[UUID] = Field(
        None,
        alias="categoryId",
        description="Optional category id from listCategories",
    )

    @field_validator("category_id", mode="before")
    @classmethod
    def blank_category_is_none(cls, v):
        """Agents send "" for 'no category'."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class SearchProductsByTextArgs(_PriceCategoryArguments):
    """Arguments for searchProductsByText."""
    text_query: str = Field(
        ...,
        alias="textQuery",
        min_length=1,
        description="The search query (e.g., 'wireless headphones', 'red sneakers')",
    )


class SearchProductsByImageArgs(_PriceCategoryArguments):
    """Arguments for searchProductsByImage."""
    image_url: str = Field(
        ...,
        alias="imageUrl",
        min_length=1,
        description="URL (or stored image key) of the image uploaded by the user",
    )


class ListCategoriesArgs(_ToolArguments):
    """listCategories takes no arguments."""
    pass
