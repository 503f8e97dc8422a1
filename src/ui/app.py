# src/ui/app.py

"""Terminal frontend for the smartshop search proxy."""

import logging
import webbrowser

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    Input,
    LoadingIndicator,
    Select,
    Static,
)

from src.clients.backend_client import BackendClient
from src.config.settings import Settings
from src.models.product import Product
from src.models.search_query import SearchQuery
from src.ui.controller import SearchController
from src.ui.render import RESULT_COLUMNS, compare_table, product_cells
from src.ui.view_state import ViewState

logger = logging.getLogger("smartshop.ui")


class ResultsTable(DataTable[str]):
    """Results grid; its keys act on the row under the cursor."""

    BINDINGS = [
        Binding("space", "app.toggle_compare", "Toggle compare"),
        Binding("n", "app.next_page", "Next page"),
        Binding("b", "app.prev_page", "Prev page"),
    ]


class CompareScreen(ModalScreen[bool]):
    """Side-by-side view of the selected products.

    Dismisses with True when the user clears the selection.
    """

    BINDINGS = [Binding("escape", "close", "Close")]

    def __init__(self, products: list[Product]) -> None:
        super().__init__()
        self.products = products

    def compose(self) -> ComposeResult:
        yield Container(
            Static(compare_table(self.products), id="compare_body"),
            Horizontal(
                Button("Close", id="close_compare"),
                Button("Clear comparison", variant="warning", id="clear_compare"),
                id="compare_actions",
            ),
            id="compare_dialog",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "clear_compare":
            self.dismiss(True)
        elif event.button.id == "close_compare":
            self.dismiss(False)

    def action_close(self) -> None:
        self.dismiss(False)


class SmartShopApp(App[object]):
    """Search form, paginated results and product comparison."""

    CSS_PATH = "styles.css"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("ctrl+o", "open_compare", "Compare"),
    ]

    def __init__(self, client: BackendClient | None = None) -> None:
        super().__init__()
        self.settings = Settings()
        self.controller = SearchController(client=client)
        self.controller.on_update = self.render_state
        self._row_products: list[Product] = []

    @property
    def state(self) -> ViewState:
        return self.controller.state

    def compose(self) -> ComposeResult:
        """Build the widget tree for the TUI."""
        yield Header()
        yield Container(
            Static("🛒 SmartShop product search", id="title"),
            Horizontal(
                Input(placeholder="Search products...", id="query"),
                Button("Search", variant="primary", id="search_btn"),
                id="search_bar",
            ),
            Horizontal(
                Input(placeholder="Min price", type="number", id="min_price"),
                Input(placeholder="Max price", type="number", id="max_price"),
                Input(placeholder="Min rating", type="number", id="min_rating"),
                Select(
                    self.settings.SORT_OPTIONS,
                    value="",
                    allow_blank=False,
                    id="sort",
                ),
                id="filters",
            ),
            Horizontal(
                Static("", id="status"),
                Static("", id="results_count"),
                Static("", id="server_label"),
                id="status_bar",
            ),
            LoadingIndicator(id="loading"),
            ResultsTable(id="results_table", zebra_stripes=True, cursor_type="row"),
            Horizontal(
                Button("◀ Prev", id="prev_page", disabled=True),
                Static("Page 1 of 1", id="page_info"),
                Button("Next ▶", id="next_page", disabled=True),
                Button("Compare (0)", id="compare_btn"),
                Button("Clear compare", id="clear_compare_btn"),
                id="pager",
            ),
            id="main_container",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Configure the results table columns on startup."""
        self._table().add_columns(*RESULT_COLUMNS)
        self.render_state()

    def _table(self) -> ResultsTable:
        return self.query_one("#results_table", ResultsTable)

    # ── Rendering ────────────────────────────────────────

    def render_state(self) -> None:
        """Redraw every widget from the controller's view state."""
        state = self.state

        status = self.query_one("#status", Static)
        status.update(escape(state.status_message))
        for kind in ("info", "success", "error"):
            status.set_class(state.status_kind == kind, kind)

        self.query_one("#results_count", Static).update(state.count_label)
        self.query_one("#server_label", Static).update(
            escape(state.server_label)
        )
        self.query_one("#loading", LoadingIndicator).display = state.loading

        page = state.visible_page()
        table = self._table()
        cursor_row = table.cursor_row
        table.clear()
        self._row_products = list(page.items)
        for product in page.items:
            table.add_row(*product_cells(product, state.is_selected(product.id)))
        if self._row_products:
            table.move_cursor(row=min(cursor_row, len(self._row_products) - 1))

        self.query_one("#page_info", Static).update(page.label)
        self.query_one("#prev_page", Button).disabled = not page.has_prev
        self.query_one("#next_page", Button).disabled = not page.has_next
        self.query_one("#compare_btn", Button).label = (
            f"Compare ({len(state.selected_ids)})"
        )

    # ── Search ───────────────────────────────────────────

    def _read_form(self) -> SearchQuery:
        sort_value = self.query_one("#sort", Select).value
        return SearchQuery.from_params(
            q=self.query_one("#query", Input).value,
            min_price=self.query_one("#min_price", Input).value,
            max_price=self.query_one("#max_price", Input).value,
            min_rating=self.query_one("#min_rating", Input).value,
            sort=sort_value if isinstance(sort_value, str) else "",
        )

    def submit_search(self) -> None:
        """Start a search in a worker; earlier searches are not cancelled."""
        query = self._read_form()
        if not query.term:
            self.notify("Please enter a search term", severity="warning")
        self.run_worker(self._search(query), group="search")

    async def _search(self, query: SearchQuery) -> None:
        await self.controller.submit(query)
        self.render_state()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button click events."""
        button_id = event.button.id
        if button_id == "search_btn":
            self.submit_search()
        elif button_id == "prev_page":
            self.action_prev_page()
        elif button_id == "next_page":
            self.action_next_page()
        elif button_id == "compare_btn":
            self.action_open_compare()
        elif button_id == "clear_compare_btn":
            self.controller.clear_compare()
            self.render_state()

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter in any form field submits the search."""
        self.submit_search()

    def on_select_changed(self, event: Select.Changed) -> None:
        """Re-sort the cached results without refetching."""
        if event.select.id == "sort":
            value = event.value if isinstance(event.value, str) else ""
            self.controller.change_sort(value)
            self.render_state()

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Open the selected product's page in the default browser."""
        if 0 <= event.cursor_row < len(self._row_products):
            webbrowser.open(self._row_products[event.cursor_row].url)

    # ── Actions ──────────────────────────────────────────

    def action_next_page(self) -> None:
        if self.state.next_page():
            self.render_state()

    def action_prev_page(self) -> None:
        if self.state.prev_page():
            self.render_state()

    def action_toggle_compare(self) -> None:
        """Toggle the row under the cursor in the comparison selection."""
        row = self._table().cursor_row
        if not 0 <= row < len(self._row_products):
            return
        product = self._row_products[row]
        checked = not self.state.is_selected(product.id)
        if not self.controller.toggle_compare(product.id, checked):
            self.notify(self.state.status_message, severity="error")
        self.render_state()

    def action_open_compare(self) -> None:
        products = self.controller.comparison()
        if products is None:
            self.render_state()
            return
        self.push_screen(CompareScreen(products), self._on_compare_closed)

    def _on_compare_closed(self, cleared: bool | None) -> None:
        if cleared:
            self.controller.clear_compare()
            self.render_state()

