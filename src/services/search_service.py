# src/services/search_service.py

"""Runs one product search: upstream call, normalization, local filters."""

import logging
from dataclasses import dataclass, field
from typing import Any

from src.clients.product_api_client import ProductApiClient
from src.config.settings import Settings
from src.filters.product_filter import ProductFilter
from src.filters.product_normalizer import ProductNormalizer
from src.filters.product_sorter import ProductSorter
from src.models.product import Product
from src.models.search_query import SearchQuery
from src.services.errors import MissingQueryError

logger = logging.getLogger("smartshop.search")


@dataclass
class SearchResult:
    """Response envelope for a completed search."""

    server_name: str
    query: str
    page: int
    products: list[Product] = field(
        default_factory=lambda: list[Product]()
    )
    total_before_filter: int = 0
    excluded_count: int = 0

    @property
    def count(self) -> int:
        return len(self.products)

    def to_envelope(self) -> dict[str, Any]:
        """Serialise to the JSON envelope returned by ``/api/products``."""
        return {
            "serverName": self.server_name,
            "query": self.query,
            "count": self.count,
            "page": self.page,
            "products": [p.to_dict() for p in self.products],
        }


class ProductSearchService:
    """Stateless search pipeline; safe to share across requests."""

    def __init__(
        self,
        client: ProductApiClient | None = None,
        server_name: str | None = None,
    ) -> None:
        self.client = client or ProductApiClient()
        self.server_name = server_name or Settings.SERVER_NAME

    def search(self, query: SearchQuery) -> SearchResult:
        """Search the external API and apply local filters and sorting.

        Raises:
            MissingQueryError: the term is blank; upstream is not called.
            ProductSearchError: any upstream failure, unchanged.
        """
        if not query.term:
            raise MissingQueryError()

        sort_key = query.sort_key
        records = self.client.search(
            query.term, query.page, sort_key.upstream_sort
        )
        products = ProductNormalizer.normalize_all(records)

        result = SearchResult(
            server_name=self.server_name,
            query=query.term,
            page=query.page,
            total_before_filter=len(products),
        )
        products, result.excluded_count = ProductFilter.apply(
            products, query
        )
        result.products = ProductSorter.resort_by_rating(
            products, sort_key
        )

        logger.info(
            "Search '%s' page %d: %d of %d products kept",
            query.term,
            query.page,
            result.count,
            result.total_before_filter,
        )
        return result
