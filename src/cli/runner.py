# src/cli/runner.py

"""Headless CLI search and health probe against a running proxy."""

import asyncio
import json
import logging
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from src.clients.backend_client import (
    BackendClient,
    BackendUnreachableError,
)
from src.models.product import Product
from src.models.search_query import SearchQuery
from src.services.health_checker import HealthChecker
from src.ui.controller import UNREACHABLE_MESSAGE
from src.ui.render import format_price, format_rating

logger = logging.getLogger("smartshop.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _print_table(products: list[Product]) -> None:
    """Render a Rich table of products to stdout."""
    table = Table(
        title="Search Results",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Title", max_width=60)
    table.add_column("Price", justify="right", style="green")
    table.add_column("Rating", justify="center")
    table.add_column("ID", style="magenta")
    table.add_column("URL", overflow="fold", style="dim")

    for idx, p in enumerate(products, 1):
        table.add_row(
            str(idx),
            escape(p.title[:60]),
            format_price(p.price) if p.price > 0 else "N/A",
            format_rating(p.rating),
            p.id,
            p.url,
        )

    Console().print(table)


async def cli_search(
    query: SearchQuery,
    output_format: str,
    backend_url: str | None = None,
) -> int:
    """Run one search through the proxy; exit code 0=results, 1=none/fail."""
    if not query.term:
        _err.print("[red]Please enter a product name or keyword.[/red]")
        return 1

    client = BackendClient(backend_url)
    _err.print(
        f"[bold]Searching:[/bold] {escape(query.term)}  "
        f"[dim]backend={client.base_url}[/dim]"
    )

    try:
        response = await asyncio.to_thread(client.fetch_products, query)
    except BackendUnreachableError as exc:
        logger.error("CLI search failed: %s", exc)
        _err.print(f"[red]{UNREACHABLE_MESSAGE}[/red]")
        return 1

    payload = response.payload
    server = payload.get("serverName")
    if server:
        _err.print(f"[dim]Server: {escape(str(server))}[/dim]")

    if not response.ok:
        message = payload.get("error") or f"HTTP {response.status_code}"
        _err.print(f"[red]Error: {escape(str(message))}[/red]")
        return 1

    products = [Product.from_dict(item) for item in payload.get("products") or []]
    if not products:
        _err.print("[yellow]No products found.[/yellow]")
        return 1

    _err.print(
        f"[green]✓ {payload.get('count', len(products))} result(s)"
        f" on page {payload.get('page', query.page)}[/green]"
    )

    if output_format == "table":
        _print_table(products)
    else:
        json.dump(
            [p.to_dict() for p in products],
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")

    return 0


async def run_health_check(targets: list[str]) -> int:
    """Probe every backend's health endpoint; 1 if any is down."""
    _err.print("[bold]Running backend health check...[/bold]")
    checker = HealthChecker(targets)
    results = await checker.check_all()

    table = Table(
        title="Backend Health Check",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("Backend", style="bold")
    table.add_column("Server", style="magenta")
    table.add_column("Status", justify="center")
    table.add_column("Latency", justify="right")
    table.add_column("Notes", style="dim")

    any_down = False
    for r in results:
        if r.status == "ok":
            status = "[green]✅ OK[/green]"
        elif r.status == "slow":
            status = "[yellow]⚠️  SLOW[/yellow]"
        else:
            status = "[red]❌ DOWN[/red]"
            any_down = True

        latency = (
            f"{r.latency_ms:.0f}ms"
            if r.latency_ms > 0
            else "—"
        )
        table.add_row(
            r.target,
            escape(r.server_name) or "—",
            status,
            latency,
            escape(r.message),
        )

    Console().print(table)
    return 1 if any_down else 0
