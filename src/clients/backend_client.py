# src/clients/backend_client.py

"""HTTP client used by the TUI and CLI to reach the search proxy."""

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from curl_cffi import requests as curl_requests
from curl_cffi.requests.errors import RequestsError

from src.config.settings import Settings
from src.models.search_query import SearchQuery

logger = logging.getLogger("smartshop.backend_client")


class BackendUnreachableError(Exception):
    """The proxy could not be reached or did not answer with JSON."""


@dataclass
class BackendResponse:
    """Status code and decoded JSON body from the proxy."""

    status_code: int
    payload: dict[str, Any] = field(
        default_factory=lambda: dict[str, Any]()
    )

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class BackendClient:
    """Thin wrapper around ``GET /api/products`` on the proxy."""

    # Slightly above the proxy's own upstream timeout so its 503 arrives
    # before this side gives up.
    TIMEOUT: int = Settings.REQUEST_TIMEOUT + 5

    def __init__(self, base_url: str | None = None) -> None:
        self.base_url = (base_url or Settings.BACKEND_URL).rstrip("/")
        self.session = curl_requests.Session()

    def fetch_products(self, query: SearchQuery) -> BackendResponse:
        """Run one search against the proxy.

        Raises:
            BackendUnreachableError: network failure or non-JSON body.
        """
        url = f"{self.base_url}/api/products"
        try:
            resp = self.session.get(
                url,
                params=query.to_params(),
                timeout=self.TIMEOUT,
            )
        except (RequestsError, OSError) as exc:
            logger.error(
                "Backend call to %s failed: %s", url, exc, exc_info=True
            )
            raise BackendUnreachableError(str(exc)) from exc

        try:
            payload = resp.json()
        except (json.JSONDecodeError, ValueError) as exc:
            logger.error(
                "Backend returned non-JSON body (HTTP %d)", resp.status_code
            )
            raise BackendUnreachableError(
                f"HTTP {resp.status_code} with non-JSON body"
            ) from exc

        if not isinstance(payload, dict):
            payload = {}
        return BackendResponse(resp.status_code, payload)
