# src/filters/product_filter.py

"""Local price and rating filters applied after normalization."""

import logging

from src.models.product import Product
from src.models.search_query import SearchQuery

logger = logging.getLogger("smartshop.filters")


def parse_bound(text: str) -> float | None:
    """Interpret a user-typed bound.

    Empty means "no bound" (``None``). A value that is not a number
    becomes NaN, which no comparison satisfies, so the filter keeps
    nothing.
    """
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        logger.warning("Non-numeric filter bound %r matches nothing", text)
        return float("nan")


class ProductFilter:
    """Filter normalized products by price and rating bounds."""

    @staticmethod
    def filter_by_min_price(
        products: list[Product], bound: float | None
    ) -> list[Product]:
        """Keep priced items at or above *bound*.

        A price of 0 means the price was unknown, so those items never
        satisfy a minimum-price filter.
        """
        if bound is None:
            return products
        return [p for p in products if p.price != 0 and p.price >= bound]

    @staticmethod
    def filter_by_max_price(
        products: list[Product], bound: float | None
    ) -> list[Product]:
        """Keep priced items at or below *bound* (zero-price excluded)."""
        if bound is None:
            return products
        return [p for p in products if p.price != 0 and p.price <= bound]

    @staticmethod
    def filter_by_min_rating(
        products: list[Product], bound: float | None
    ) -> list[Product]:
        """Keep items rated at or above *bound*."""
        if bound is None:
            return products
        return [p for p in products if p.rating >= bound]

    @classmethod
    def apply(
        cls, products: list[Product], query: SearchQuery
    ) -> tuple[list[Product], int]:
        """Apply min price, max price and min rating in that order.

        Returns the kept list and the number of products removed.
        """
        kept = cls.filter_by_min_price(products, parse_bound(query.min_price))
        kept = cls.filter_by_max_price(kept, parse_bound(query.max_price))
        kept = cls.filter_by_min_rating(kept, parse_bound(query.min_rating))

        excluded = len(products) - len(kept)
        if excluded:
            logger.info(
                "Filtered out %d of %d products for '%s'",
                excluded,
                len(products),
                query.term,
            )
        return kept, excluded
