"""Unit tests for the post-retrieval filter policy"""

from uuid import uuid4

import pytest

from shopassist.search.filters import matches_category, matches_price, passes_threshold


class TestMatchesPrice:
    @pytest.mark.parametrize(
        "price,min_price,max_price,expected",
        [
            (25.0, None, None, True),
            (25.0, 25.0, None, True),
            (25.0, None, 25.0, True),
            (24.99, 25.0, None, False),
            (25.01, None, 25.0, False),
            (0.0, 0.0, 10.0, True),
            (5.0, 10.0, 1.0, False),  # inverted range
        ],
    )
    def test_bounds(self, price, min_price, max_price, expected):
        assert matches_price(price, min_price, max_price) is expected


class TestMatchesCategory:
    def test_no_requirement_matches_any(self):
        assert matches_category(uuid4(), None)

    def test_requires_same_category(self):
        category = uuid4()
        assert matches_category(category, category)
        assert not matches_category(uuid4(), category)


class TestPassesThreshold:
    def test_none_disables_gate(self):
        assert passes_threshold(-0.5, None)

    def test_inclusive(self):
        assert passes_threshold(0.5, 0.5)
        assert not passes_threshold(0.4999, 0.5)
