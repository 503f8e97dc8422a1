# src/clients/product_api_client.py

"""Client for the external product-search API (RapidAPI Amazon data)."""

import json
import logging
from typing import Any

from curl_cffi import requests as curl_requests
from curl_cffi.requests.errors import RequestsError

from src.config.settings import Settings
from src.services.errors import (
    UpstreamUnreachableError,
    classify_upstream_status,
)


class ProductApiClient:
    """Single-shot GET against the external search endpoint.

    No retries: a failed call raises one of the ``ProductSearchError``
    subclasses and the caller reports it as-is.
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
    ) -> None:
        self.settings = Settings()
        self.base_url = base_url or self.settings.EXTERNAL_API_URL
        self.api_key = (
            api_key if api_key is not None else self.settings.EXTERNAL_API_KEY
        )
        self.logger = logging.getLogger("smartshop.upstream")
        self.session = curl_requests.Session()
        self._request_timeout: int = self.settings.REQUEST_TIMEOUT

    def _headers(self) -> dict[str, str]:
        return {
            "x-rapidapi-key": self.api_key,
            "x-rapidapi-host": self.settings.EXTERNAL_API_HOST,
        }

    def _params(self, term: str, page: int, sort_by: str) -> dict[str, str]:
        return {
            "query": term,
            "page": str(page),
            "country": self.settings.UPSTREAM_COUNTRY,
            "sort_by": sort_by,
            **self.settings.UPSTREAM_FIXED_PARAMS,
        }

    @staticmethod
    def extract_records(payload: Any) -> list[Any]:
        """Return the list at ``data.products``, or [] if absent."""
        if not isinstance(payload, dict):
            return []
        data = payload.get("data")
        if not isinstance(data, dict):
            return []
        products = data.get("products")
        return products if isinstance(products, list) else []

    def search(self, term: str, page: int, sort_by: str) -> list[Any]:
        """Fetch raw product records for *term*.

        Raises:
            UpstreamUnreachableError: timeout, DNS or connection failure.
            UpstreamError: the API answered with a non-2xx status.
        """
        self.logger.info(
            "[upstream] GET query='%s' page=%d sort_by=%s",
            term,
            page,
            sort_by,
        )
        try:
            resp = self.session.get(
                self.base_url,
                params=self._params(term, page, sort_by),
                headers=self._headers(),
                timeout=self._request_timeout,
            )
        except (RequestsError, OSError) as exc:
            self.logger.error(
                "[upstream] Request failed for '%s': %s",
                term,
                exc,
                exc_info=True,
            )
            raise UpstreamUnreachableError() from exc

        if not 200 <= resp.status_code < 300:
            self.logger.error(
                "[upstream] HTTP %d for '%s': %s",
                resp.status_code,
                term,
                resp.text[:500],
            )
            raise classify_upstream_status(resp.status_code)

        try:
            payload = resp.json()
        except (json.JSONDecodeError, ValueError):
            self.logger.warning(
                "[upstream] Non-JSON body for '%s' (%d bytes)",
                term,
                len(resp.text),
            )
            return []

        records = self.extract_records(payload)
        self.logger.debug(
            "[upstream] %d raw records for '%s'", len(records), term
        )
        return records
