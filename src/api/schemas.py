# src/api/schemas.py

"""Response bodies for the proxy's HTTP surface."""

from pydantic import BaseModel


class ProductOut(BaseModel):
    id: str
    title: str
    description: str
    price: float
    rating: float
    image: str
    url: str


class ProductsResponse(BaseModel):
    serverName: str
    query: str
    count: int
    page: int
    products: list[ProductOut]


class ErrorResponse(BaseModel):
    serverName: str
    error: str


class HealthResponse(BaseModel):
    serverName: str
    status: str
    time: str
