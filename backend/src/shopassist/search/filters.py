"""Deterministic filtering policy applied after retrieval.

Similarity indexes cannot evaluate price ranges, so price is always checked
here. Category is re-checked even when the index applied it.
"""

from typing import Optional
from uuid import UUID


def matches_price(price: float, min_price: Optional[float] = None, max_price: Optional[float] = None) -> bool:
    """Check if price falls within [min_price, max_price] (inclusive, missing bound = unbounded).

    An inverted range (min_price > max_price) matches nothing.

    Example:
        >>> matches_price(40.0, max_price=30.0)
        False
        >>> matches_price(40.0, min_price=40.0, max_price=40.0)
        True
    """
    if min_price is not None and price < min_price:
        return False
    if max_price is not None and price > max_price:
        return False
    return True


def matches_category(category_id: UUID, required: Optional[UUID] = None) -> bool:
    """Check product category against an optional required category."""
    return required is None or category_id == required


def passes_threshold(score: float, threshold: Optional[float]) -> bool:
    """Similarity gate; a threshold of None disables gating."""
    return threshold is None or score >= threshold
