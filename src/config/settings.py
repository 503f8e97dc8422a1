# src/config/settings.py

"""Central configuration for the smartshop search proxy and frontend."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the smartshop search proxy and frontend."""

    # --- Server ---
    PORT: int = int(os.getenv("PORT", "3000"))
    SERVER_NAME: str = os.getenv("SERVER_NAME", "LocalDev")

    # --- External product API ---
    EXTERNAL_API_URL: str = os.getenv(
        "EXTERNAL_API_URL",
        "https://real-time-amazon-data.p.rapidapi.com/search",
    )
    EXTERNAL_API_KEY: str = os.getenv("EXTERNAL_API_KEY", "")
    EXTERNAL_API_HOST: str = "real-time-amazon-data.p.rapidapi.com"
    REQUEST_TIMEOUT: int = 10           # Seconds before the upstream call times out
    UPSTREAM_COUNTRY: str = "US"
    UPSTREAM_FIXED_PARAMS: dict[str, str] = {
        "product_condition": "ALL",
        "is_prime": "false",
        "deals_and_discounts": "NONE",
    }

    # --- Normalization ---
    PLACEHOLDER_IMAGE: str = (
        "https://via.placeholder.com/400x300?text=No+Image"
    )
    FALLBACK_TITLE: str = "No title available"
    FALLBACK_DESCRIPTION: str = "No description available"
    FALLBACK_URL: str = "#"

    # --- Frontend ---
    BACKEND_URL: str = os.getenv(
        "BACKEND_URL", f"http://localhost:{PORT}"
    )
    PAGE_SIZE: int = 8
    MAX_COMPARE: int = 3
    MIN_COMPARE: int = 2
    CARD_DESCRIPTION_CHARS: int = 140
    COMPARE_DESCRIPTION_CHARS: int = 260
    SORT_OPTIONS: list[tuple[str, str]] = [
        ("Relevance", ""),
        ("Price: low to high", "price-asc"),
        ("Price: high to low", "price-desc"),
        ("Rating: high to low", "rating-desc"),
        ("Rating: low to high", "rating-asc"),
    ]

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    STATIC_DIR: Path = BASE_DIR / "src" / "api" / "static"
    LOGS_DIR: Path = BASE_DIR / "logs"
