# src/ui/controller.py

"""Search/display cycle for the frontend, independent of any widget."""

import asyncio
import logging
from collections.abc import Callable

from src.clients.backend_client import (
    BackendClient,
    BackendResponse,
    BackendUnreachableError,
)
from src.config.settings import Settings
from src.models.product import Product
from src.models.search_query import SearchQuery, SortKey
from src.ui.view_state import ViewState

logger = logging.getLogger("smartshop.ui.controller")

EMPTY_QUERY_MESSAGE = "Please enter a product name or keyword."
SEARCHING_MESSAGE = "Searching products..."
UNKNOWN_ERROR_MESSAGE = "Unknown error while fetching products."
UNREACHABLE_MESSAGE = (
    "Could not reach the server. Please check your connection and try again."
)
COMPARE_LIMIT_MESSAGE = (
    f"You can compare up to {Settings.MAX_COMPARE} products at a time."
)
COMPARE_MINIMUM_MESSAGE = (
    "Select at least two products to compare (up to three)."
)


class SearchController:
    """Drives searches against the proxy and updates a :class:`ViewState`."""

    def __init__(
        self,
        client: BackendClient | None = None,
        state: ViewState | None = None,
    ) -> None:
        self.client = client or BackendClient()
        self.state = state or ViewState()
        # Called once the state shows the loading indicator
        self.on_update: Callable[[], None] | None = None

    async def submit(self, query: SearchQuery) -> bool:
        """Run one search; returns True if its response was applied.

        An empty term is rejected locally without touching the network.
        A response that arrives after a newer submission is dropped.
        """
        state = self.state
        if not query.term:
            state.set_status(EMPTY_QUERY_MESSAGE, "error")
            return False

        state.current_page = 1
        state.set_sort(query.sort_key)
        state.clear_compare()
        state.replace_results([])
        state.count_label = ""
        state.server_label = ""
        state.loading = True
        state.set_status(SEARCHING_MESSAGE, "info")
        seq = state.begin_request()
        if self.on_update is not None:
            self.on_update()

        try:
            response = await asyncio.to_thread(
                self.client.fetch_products, query
            )
        except BackendUnreachableError as exc:
            if not state.is_current(seq):
                return False
            logger.error("Search '%s' could not reach backend: %s", query.term, exc)
            state.loading = False
            state.set_status(UNREACHABLE_MESSAGE, "error")
            state.replace_results([])
            return True

        if not state.is_current(seq):
            logger.info(
                "Dropping stale response #%d for '%s' (latest is #%d)",
                seq,
                query.term,
                state.request_seq,
            )
            return False

        self.apply_response(response)
        return True

    def apply_response(self, response: BackendResponse) -> None:
        """Copy a proxy response into the view state."""
        state = self.state
        payload = response.payload
        state.loading = False

        server_name = payload.get("serverName")
        state.server_label = f"Server: {server_name}" if server_name else ""

        if not response.ok:
            message = payload.get("error") or UNKNOWN_ERROR_MESSAGE
            logger.warning(
                "Backend answered HTTP %d: %s", response.status_code, message
            )
            state.set_status(str(message), "error")
            state.replace_results([])
            state.count_label = "0 results"
            return

        items = payload.get("products") or []
        if not items:
            state.set_status(
                f"No products found for “{payload.get('query', '')}”. "
                "Try another search.",
                "info",
            )
            state.replace_results([])
            state.count_label = "0 results"
            return

        state.replace_results([Product.from_dict(item) for item in items])
        state.set_status(
            f"Showing results for “{payload.get('query', '')}”.", "success"
        )
        state.count_label = f"{payload.get('count', len(items))} result(s)"

    # ── Client-side interactions ─────────────────────────

    def change_sort(self, value: str) -> None:
        self.state.set_sort(SortKey.parse(value))

    def toggle_compare(self, product_id: str, checked: bool) -> bool:
        """Toggle a product; reports the cap as a status message."""
        accepted = self.state.toggle_compare(product_id, checked)
        if not accepted:
            self.state.set_status(COMPARE_LIMIT_MESSAGE, "error")
        return accepted

    def comparison(self) -> list[Product] | None:
        """Products for the comparison view, or None if too few."""
        if len(self.state.selected_ids) < Settings.MIN_COMPARE:
            self.state.set_status(COMPARE_MINIMUM_MESSAGE, "info")
            return None
        products = self.state.compared_products()
        if len(products) < Settings.MIN_COMPARE:
            return None
        return products

    def clear_compare(self) -> None:
        self.state.clear_compare()
