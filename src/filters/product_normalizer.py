# src/filters/product_normalizer.py

"""Turn raw external-API records into uniform Product objects."""

import hashlib
import logging
import math
import re
from dataclasses import replace
from typing import Any

from src.config.settings import Settings
from src.models.product import Product

logger = logging.getLogger("smartshop.normalizer")

_NON_PRICE_CHARS = re.compile(r"[^0-9.]")


class ProductNormalizer:
    """Normalize raw product records from the external API."""

    @staticmethod
    def parse_price(value: Any) -> float:
        """Extract a non-negative price from strings like '$1,234.56'.

        Everything but digits and dots is stripped; anything that still
        fails to parse (e.g. '1.2.3') becomes 0.
        """
        if value is None or value == "":
            return 0.0
        cleaned = _NON_PRICE_CHARS.sub("", str(value))
        try:
            price = float(cleaned)
        except ValueError:
            return 0.0
        if math.isnan(price) or math.isinf(price):
            return 0.0
        return price

    @staticmethod
    def coerce_rating(value: Any) -> float:
        """Coerce a star rating to a number, 0 when missing or invalid."""
        if value is None or value == "":
            return 0.0
        try:
            rating = float(value)
        except (TypeError, ValueError):
            return 0.0
        if math.isnan(rating) or math.isinf(rating):
            return 0.0
        return rating

    @staticmethod
    def derive_id(title: str, url: str) -> str:
        """Stable identifier for records without an ASIN."""
        digest = hashlib.sha1(
            f"{title}|{url}".encode("utf-8")
        ).hexdigest()
        return f"gen-{digest[:16]}"

    @classmethod
    def normalize(cls, raw: dict[str, Any]) -> Product:
        """Build a Product from one raw record, defaulting missing fields."""
        title = raw.get("product_title") or Settings.FALLBACK_TITLE
        url = raw.get("product_url") or Settings.FALLBACK_URL
        asin = raw.get("asin")
        return Product(
            id=str(asin) if asin else cls.derive_id(title, url),
            title=str(title),
            description=str(
                raw.get("product_description")
                or Settings.FALLBACK_DESCRIPTION
            ),
            price=cls.parse_price(raw.get("product_price")),
            rating=cls.coerce_rating(raw.get("product_star_rating")),
            image=str(
                raw.get("product_photo") or Settings.PLACEHOLDER_IMAGE
            ),
            url=str(url),
        )

    @classmethod
    def normalize_all(cls, records: list[Any]) -> list[Product]:
        """Normalize every dict record, skipping malformed entries.

        Ids are unique within the returned list: a repeated id (same
        ASIN twice, or two ASIN-less records with equal title and URL)
        gets its position appended, e.g. ``B0C1-3``.
        """
        products: list[Product] = []
        seen: set[str] = set()
        skipped = 0
        for index, raw in enumerate(records):
            if not isinstance(raw, dict):
                skipped += 1
                continue
            product = cls.normalize(raw)
            if product.id in seen:
                logger.debug(
                    "Duplicate id %s at position %d", product.id, index
                )
                product = replace(product, id=f"{product.id}-{index}")
            seen.add(product.id)
            products.append(product)
        if skipped:
            logger.warning(
                "Skipped %d non-object records in upstream payload",
                skipped,
            )
        return products
