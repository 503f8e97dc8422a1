# src/ui/view_state.py

"""Client-side presentation state for the search frontend.

Everything the UI shows is derived from one :class:`ViewState`: the
canonical result list as the server ordered it, the active sort, the
current page and the comparison selection. Widgets never hold state of
their own, so a re-render always reflects the selection exactly.
"""

import math
from dataclasses import dataclass, field

from src.config.settings import Settings
from src.filters.product_sorter import ProductSorter
from src.models.product import Product
from src.models.search_query import SortKey


@dataclass
class PageSlice:
    """One page of results plus navigation flags."""

    items: list[Product]
    page: int
    total_pages: int
    total: int

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.total > 0 and self.page < self.total_pages

    @property
    def label(self) -> str:
        return f"Page {self.page} of {self.total_pages}"


def page_count(total: int, page_size: int) -> int:
    """Number of pages for *total* items, never less than 1."""
    return max(1, math.ceil(total / page_size))


def paginate(products: list[Product], page: int, page_size: int) -> PageSlice:
    """Slice *products* for *page*, clamping the page into range."""
    total_pages = page_count(len(products), page_size)
    page = min(max(page, 1), total_pages)
    start = (page - 1) * page_size
    return PageSlice(
        items=products[start:start + page_size],
        page=page,
        total_pages=total_pages,
        total=len(products),
    )


@dataclass
class ViewState:
    """Single owner of the frontend's mutable state."""

    results: list[Product] = field(default_factory=lambda: list[Product]())
    current_page: int = 1
    sort_key: SortKey = SortKey.RELEVANCE
    selected_ids: list[str] = field(default_factory=lambda: list[str]())
    request_seq: int = 0
    status_message: str = ""
    status_kind: str = ""
    server_label: str = ""
    count_label: str = ""
    loading: bool = False
    page_size: int = Settings.PAGE_SIZE
    max_compare: int = Settings.MAX_COMPARE

    # ── Results, sorting, pagination ─────────────────────

    def replace_results(self, products: list[Product]) -> None:
        """Store a new canonical list (server order is kept as-is)."""
        self.results = list(products)
        self.current_page = min(
            self.current_page, page_count(len(self.results), self.page_size)
        )

    def sorted_results(self) -> list[Product]:
        """A sorted copy; ``results`` itself is never reordered."""
        return ProductSorter.sort(self.results, self.sort_key)

    def visible_page(self) -> PageSlice:
        """Page to render; also clamps ``current_page``."""
        page = paginate(self.sorted_results(), self.current_page, self.page_size)
        self.current_page = page.page
        return page

    def set_sort(self, key: SortKey) -> None:
        self.sort_key = key

    def next_page(self) -> bool:
        if self.current_page < page_count(len(self.results), self.page_size):
            self.current_page += 1
            return True
        return False

    def prev_page(self) -> bool:
        if self.current_page > 1:
            self.current_page -= 1
            return True
        return False

    # ── Comparison selection ─────────────────────────────

    def is_selected(self, product_id: str) -> bool:
        return product_id in self.selected_ids

    def toggle_compare(self, product_id: str, checked: bool) -> bool:
        """Add or remove *product_id*.

        Returns False (and leaves the selection untouched) when adding
        would exceed ``max_compare``.
        """
        if not checked:
            if product_id in self.selected_ids:
                self.selected_ids.remove(product_id)
            return True
        if product_id in self.selected_ids:
            return True
        if len(self.selected_ids) >= self.max_compare:
            return False
        self.selected_ids.append(product_id)
        return True

    def clear_compare(self) -> None:
        self.selected_ids.clear()

    def compared_products(self) -> list[Product]:
        """Selected products in canonical result order, one per id."""
        picked: dict[str, Product] = {}
        for p in self.results:
            if p.id in self.selected_ids and p.id not in picked:
                picked[p.id] = p
        return list(picked.values())

    # ── Request sequencing ───────────────────────────────

    def begin_request(self) -> int:
        """Issue the next sequence number; older responses become stale."""
        self.request_seq += 1
        return self.request_seq

    def is_current(self, seq: int) -> bool:
        return seq == self.request_seq

    # ── Status line ──────────────────────────────────────

    def set_status(self, message: str, kind: str = "") -> None:
        self.status_message = message
        self.status_kind = kind
