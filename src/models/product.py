# src/models/product.py

"""Normalized product record shared by the proxy and the frontend."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Product:
    """A single product in the uniform shape returned by the proxy."""

    id: str
    title: str
    description: str = ""
    price: float = 0.0
    rating: float = 0.0
    image: str = ""
    url: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the JSON keys used on the wire."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Product":
        """Rebuild a product from a proxy response item.

        Missing numeric fields fall back to 0 so the frontend can sort
        and format every item without extra checks.
        """
        return cls(
            id=str(data.get("id", "")),
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            price=float(data.get("price") or 0),
            rating=float(data.get("rating") or 0),
            image=str(data.get("image") or ""),
            url=str(data.get("url") or ""),
        )
