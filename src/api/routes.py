# src/api/routes.py

"""HTTP routes: product search, health check and frontend fallback."""

import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import FileResponse

from src.api.schemas import ErrorResponse, HealthResponse, ProductsResponse
from src.models.search_query import SearchQuery
from src.services.health_checker import build_health_payload
from src.services.search_service import ProductSearchService

logger = logging.getLogger("smartshop.api")

router = APIRouter(tags=["Products"])
frontend_router = APIRouter(include_in_schema=False)

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    status: {"model": ErrorResponse} for status in (400, 429, 500, 503)
}


def get_search_service(request: Request) -> ProductSearchService:
    service: ProductSearchService = request.app.state.search_service
    return service


# Sync handler: FastAPI runs it in its threadpool, so the blocking
# upstream call never stalls the event loop.
@router.get(
    "/api/products",
    response_model=ProductsResponse,
    responses=_ERROR_RESPONSES,
)
def search_products(
    q: str | None = Query(None, description="Search term"),
    min_price: str | None = Query(None, alias="minPrice"),
    max_price: str | None = Query(None, alias="maxPrice"),
    min_rating: str | None = Query(None, alias="minRating"),
    sort: str | None = Query(None),
    page: str | None = Query(None),
    service: ProductSearchService = Depends(get_search_service),
):
    """Search the external catalogue and return the normalized envelope."""
    query = SearchQuery.from_params(
        q=q,
        min_price=min_price,
        max_price=max_price,
        min_rating=min_rating,
        sort=sort,
        page=page,
    )
    result = service.search(query)
    return result.to_envelope()


@router.get("/api/health", response_model=HealthResponse)
def health(service: ProductSearchService = Depends(get_search_service)):
    return build_health_payload(service.server_name)


@frontend_router.get("/{full_path:path}")
def frontend(full_path: str, request: Request):
    """Serve the single-page entry point for every other path."""
    return FileResponse(request.app.state.static_dir / "index.html")
