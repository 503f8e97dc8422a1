# src/filters/product_sorter.py

"""Ordering helpers shared by the proxy and the frontend."""

from src.models.product import Product
from src.models.search_query import SortKey


class ProductSorter:
    """Sort products by price or rating without mutating the input."""

    @staticmethod
    def sort(products: list[Product], key: SortKey) -> list[Product]:
        """Return a sorted copy; relevance keeps the incoming order.

        ``sorted`` is stable, so ties keep their server order and sorting
        an already sorted list is a no-op.
        """
        if key is SortKey.PRICE_ASC:
            return sorted(products, key=lambda p: p.price or 0)
        if key is SortKey.PRICE_DESC:
            return sorted(products, key=lambda p: p.price or 0, reverse=True)
        if key is SortKey.RATING_DESC:
            return sorted(products, key=lambda p: p.rating or 0, reverse=True)
        if key is SortKey.RATING_ASC:
            return sorted(products, key=lambda p: p.rating or 0)
        return list(products)

    @classmethod
    def resort_by_rating(
        cls, products: list[Product], key: SortKey
    ) -> list[Product]:
        """Proxy-side re-sort: only rating keys are applied locally.

        Price order comes from the external API and is left alone.
        """
        if not key.is_rating:
            return products
        return cls.sort(products, key)
