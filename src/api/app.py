# src/api/app.py

"""FastAPI application factory for the search proxy."""

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.api.routes import frontend_router, router
from src.config.settings import Settings
from src.services.errors import ProductSearchError
from src.services.search_service import ProductSearchService

logger = logging.getLogger("smartshop.api")


def create_app(
    service: ProductSearchService | None = None,
    static_dir: Path | None = None,
) -> FastAPI:
    """Build the proxy app.

    Args:
        service: Search pipeline to use; a default one talking to the
            configured external API is created when omitted.
        static_dir: Directory holding ``index.html`` for the fallback.
    """
    app = FastAPI(title="SmartShop Search Proxy", version="1.0.0")
    app.state.search_service = service or ProductSearchService()
    app.state.static_dir = static_dir or Settings.STATIC_DIR

    @app.exception_handler(ProductSearchError)
    async def handle_search_error(
        request: Request, exc: ProductSearchError
    ) -> JSONResponse:
        logger.warning(
            "%s %s -> %d %s",
            request.method,
            request.url.path,
            exc.status_code,
            exc.message,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "serverName": app.state.search_service.server_name,
                "error": exc.message,
            },
        )

    app.include_router(router)
    # Registered last so /api/* routes win over the catch-all
    app.include_router(frontend_router)

    logger.info(
        "Proxy app created (server=%s, upstream=%s)",
        app.state.search_service.server_name,
        Settings.EXTERNAL_API_URL,
    )
    return app
