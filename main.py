# main.py

"""Entry point for smartshop: proxy server, TUI, or headless CLI."""

import argparse
import asyncio
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("smartshop.main")

_SORT_CHOICES = [value for _, value in Settings.SORT_OPTIONS if value]


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="smartshop",
        description="Product search proxy with a terminal frontend.",
        epilog=f"Sort keys: {', '.join(_SORT_CHOICES)}",
    )
    parser.add_argument(
        "query",
        nargs="?",
        default=None,
        help="Search term. Omit to launch the interactive TUI.",
    )
    parser.add_argument("--min-price", default=None, dest="min_price")
    parser.add_argument("--max-price", default=None, dest="max_price")
    parser.add_argument("--min-rating", default=None, dest="min_rating")
    parser.add_argument("--sort", choices=_SORT_CHOICES, default=None)
    parser.add_argument("--page", default=None)
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "-b",
        "--backend",
        default=None,
        help=(
            "Proxy base URL(s), comma-separated for --health "
            f"(default: {Settings.BACKEND_URL})."
        ),
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        default=False,
        help="Run the search proxy HTTP server.",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=Settings.PORT,
        help=f"Port for --serve (default: {Settings.PORT}).",
    )
    parser.add_argument(
        "--health",
        action="store_true",
        default=False,
        help="Probe the proxy's /api/health endpoint.",
    )
    return parser


def _run_server(port: int) -> None:
    """Serve the FastAPI proxy with uvicorn."""
    import uvicorn

    logger.info(
        "Server (%s) running at http://localhost:%d",
        Settings.SERVER_NAME,
        port,
    )
    uvicorn.run(
        "src.api.app:create_app",
        factory=True,
        host="0.0.0.0",
        port=port,
        log_level="info",
    )


def _run_tui(backend_url: str | None) -> None:
    """Launch the interactive Textual TUI."""
    from src.clients.backend_client import BackendClient
    from src.ui.app import SmartShopApp

    try:
        app = SmartShopApp(client=BackendClient(backend_url))
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("smartshop TUI shutting down")


def _run_cli(args: argparse.Namespace) -> None:
    """Run headless CLI search and exit."""
    from src.cli.runner import cli_search
    from src.models.search_query import SearchQuery

    query = SearchQuery.from_params(
        q=args.query,
        min_price=args.min_price,
        max_price=args.max_price,
        min_rating=args.min_rating,
        sort=args.sort,
        page=args.page,
    )
    exit_code = asyncio.run(
        cli_search(query, args.output_format, args.backend)
    )
    sys.exit(exit_code)


def _run_health_check(backend_csv: str | None) -> None:
    """Run the backend health probe."""
    from src.cli.runner import run_health_check

    targets = [
        t.strip()
        for t in (backend_csv or Settings.BACKEND_URL).split(",")
        if t.strip()
    ]
    exit_code = asyncio.run(run_health_check(targets))
    sys.exit(exit_code)


def main() -> None:
    """Route to server, health probe, TUI (no args) or headless CLI."""
    parser = _build_parser()
    args = parser.parse_args()

    if args.serve:
        mode = "api"
    elif args.query is None and not args.health:
        mode = "tui"
    else:
        mode = "cli"
    log_file = setup_logging(mode)
    logger.info("smartshop starting (%s) - log file: %s", mode, log_file)

    if args.serve:
        _run_server(args.port)
    elif args.health:
        _run_health_check(args.backend)
    elif args.query is None:
        _run_tui(args.backend)
    else:
        _run_cli(args)


if __name__ == "__main__":
    main()
