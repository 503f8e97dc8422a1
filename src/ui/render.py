# src/ui/render.py

"""Turn products into display cells for the TUI and CLI.

Titles and descriptions come from a third party and are escaped before
they reach Rich markup. URLs are attached as link styles on plain
:class:`~rich.text.Text`, so they are never parsed as markup.
"""

from rich.markup import escape
from rich.style import Style
from rich.table import Table
from rich.text import Text

from src.config.settings import Settings
from src.models.product import Product

RESULT_COLUMNS: tuple[str, ...] = (
    "Compare", "Title", "Price", "Rating", "Description",
)

_TITLE_CHARS = 60


def truncate(text: str, limit: int) -> str:
    return f"{text[:limit]}..."


def format_price(price: float) -> str:
    return f"${float(price or 0):.2f}"


def format_rating(rating: float) -> str:
    return f"{float(rating or 0):.1f} ★"


def link_text(label: str, url: str) -> Text:
    """*label* linking to *url*; an empty URL gives plain text."""
    return Text(label, style=Style(link=url or None))


def compare_marker(selected: bool) -> str:
    return "☑" if selected else "☐"


def product_cells(product: Product, selected: bool) -> tuple[str, ...]:
    """Row cells for one result; column order matches RESULT_COLUMNS."""
    return (
        compare_marker(selected),
        escape(product.title[:_TITLE_CHARS]),
        format_price(product.price),
        format_rating(product.rating),
        escape(
            truncate(product.description, Settings.CARD_DESCRIPTION_CHARS)
        ),
    )


def compare_table(products: list[Product]) -> Table:
    """Side-by-side comparison: title + link, image, price, rating, text."""
    table = Table(
        title="Compare products",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("", style="bold")
    for _ in products:
        table.add_column(max_width=40, overflow="fold")

    table.add_row(
        "Product",
        *(
            Text.assemble(
                (p.title, "bold"), "\n", link_text("View →", p.url)
            )
            for p in products
        ),
    )
    table.add_row(
        "Image", *(link_text("image", p.image) for p in products)
    )
    table.add_row("Price", *(format_price(p.price) for p in products))
    table.add_row("Rating", *(format_rating(p.rating) for p in products))
    table.add_row(
        "Description",
        *(
            escape(
                truncate(
                    p.description or "",
                    Settings.COMPARE_DESCRIPTION_CHARS,
                )
            )
            for p in products
        ),
    )
    return table
