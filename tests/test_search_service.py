# tests/test_search_service.py

"""Tests for the ProductSearchService pipeline."""

import unittest
from typing import Any
from unittest.mock import MagicMock

from src.models.search_query import SearchQuery
from src.services.errors import (
    MissingQueryError,
    UpstreamRateLimitError,
    UpstreamUnreachableError,
)
from src.services.search_service import ProductSearchService, SearchResult


def _raw(asin: str, price: str, rating: str = "4.0") -> dict[str, Any]:
    """Build a raw upstream record."""
    return {
        "asin": asin,
        "product_title": f"Item {asin}",
        "product_price": price,
        "product_star_rating": rating,
        "product_url": f"https://shop/{asin}",
    }


RAW_RECORDS = [
    _raw("A", "$12.00", "3.5"),
    _raw("B", "", "4.9"),
    _raw("C", "$1,050.00", "4.2"),
    _raw("D", "$45.50", "2.0"),
]


class TestProductSearchService(unittest.TestCase):
    """Integration of client, normalizer, filters and sorter."""

    def setUp(self) -> None:
        self.client = MagicMock()
        self.client.search.return_value = list(RAW_RECORDS)
        self.service = ProductSearchService(client=self.client)

    def test_missing_term_never_calls_upstream(self) -> None:
        """A blank term raises before any HTTP call."""
        with self.assertRaises(MissingQueryError) as ctx:
            self.service.search(SearchQuery.from_params(q="  "))
        self.assertEqual(ctx.exception.status_code, 400)
        self.client.search.assert_not_called()

    def test_forwards_term_page_and_upstream_sort(self) -> None:
        self.service.search(
            SearchQuery.from_params(q="lamp", sort="rating-asc", page="3")
        )
        self.client.search.assert_called_once_with(
            "lamp", 3, "AVERAGE_CUSTOMER_REVIEWS"
        )

    def test_envelope_count_matches_products(self) -> None:
        """count always equals the post-filter product list length."""
        for params in (
            {},
            {"min_price": "10"},
            {"max_price": "50"},
            {"min_rating": "4"},
            {"min_price": "5000"},
        ):
            with self.subTest(params=params):
                result = self.service.search(
                    SearchQuery.from_params(q="lamp", **params)
                )
                envelope = result.to_envelope()
                self.assertEqual(envelope["count"], len(envelope["products"]))

    def test_min_price_excludes_unpriced(self) -> None:
        result = self.service.search(
            SearchQuery.from_params(q="lamp", min_price="0")
        )
        self.assertEqual([p.id for p in result.products], ["A", "C", "D"])
        self.assertEqual(result.total_before_filter, 4)
        self.assertEqual(result.excluded_count, 1)

    def test_rating_desc_resorted_locally(self) -> None:
        result = self.service.search(
            SearchQuery.from_params(q="lamp", sort="rating-desc")
        )
        self.assertEqual([p.id for p in result.products], ["B", "C", "A", "D"])

    def test_price_sort_keeps_upstream_order(self) -> None:
        result = self.service.search(
            SearchQuery.from_params(q="lamp", sort="price-asc")
        )
        self.assertEqual([p.id for p in result.products], ["A", "B", "C", "D"])

    def test_envelope_shape(self) -> None:
        result = self.service.search(SearchQuery.from_params(q="lamp", page="2"))
        envelope = result.to_envelope()
        self.assertEqual(envelope["serverName"], "test-node")
        self.assertEqual(envelope["query"], "lamp")
        self.assertEqual(envelope["page"], 2)
        self.assertEqual(envelope["products"][2]["price"], 1050.0)

    def test_upstream_errors_propagate(self) -> None:
        """Upstream failures reach the caller unchanged."""
        for error in (UpstreamRateLimitError(), UpstreamUnreachableError()):
            with self.subTest(error=type(error).__name__):
                self.client.search.side_effect = error
                with self.assertRaises(type(error)):
                    self.service.search(SearchQuery.from_params(q="lamp"))

    def test_empty_upstream(self) -> None:
        self.client.search.return_value = []
        result = self.service.search(SearchQuery.from_params(q="lamp"))
        self.assertIsInstance(result, SearchResult)
        self.assertEqual(result.count, 0)


if __name__ == "__main__":
    unittest.main()
