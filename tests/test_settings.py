# tests/test_settings.py

"""Tests for the Settings configuration class."""

import unittest
from pathlib import Path

from src.config.settings import Settings


class TestSettings(unittest.TestCase):
    """Verify Settings constants."""

    def test_request_timeout_is_ten_seconds(self) -> None:
        """The upstream call is bounded at 10 seconds."""
        self.assertIsInstance(Settings.REQUEST_TIMEOUT, int)
        self.assertEqual(Settings.REQUEST_TIMEOUT, 10)

    def test_port_is_positive_int(self) -> None:
        """PORT must be a positive integer."""
        self.assertIsInstance(Settings.PORT, int)
        self.assertGreater(Settings.PORT, 0)

    def test_page_size_is_eight(self) -> None:
        """Client-side pagination shows 8 products per page."""
        self.assertEqual(Settings.PAGE_SIZE, 8)

    def test_compare_bounds(self) -> None:
        """Comparison needs 2 products and allows at most 3."""
        self.assertEqual(Settings.MIN_COMPARE, 2)
        self.assertEqual(Settings.MAX_COMPARE, 3)

    def test_upstream_fixed_params(self) -> None:
        """Fixed upstream filters are always sent."""
        self.assertEqual(
            Settings.UPSTREAM_FIXED_PARAMS,
            {
                "product_condition": "ALL",
                "is_prime": "false",
                "deals_and_discounts": "NONE",
            },
        )
        self.assertEqual(Settings.UPSTREAM_COUNTRY, "US")

    def test_sort_options_cover_all_keys(self) -> None:
        """Every sort key offered by the UI is a known value."""
        values = [value for _, value in Settings.SORT_OPTIONS]
        self.assertEqual(
            values,
            ["", "price-asc", "price-desc", "rating-desc", "rating-asc"],
        )

    def test_path_constants_are_paths(self) -> None:
        """Path-typed settings are Path instances."""
        self.assertIsInstance(Settings.BASE_DIR, Path)
        self.assertIsInstance(Settings.STATIC_DIR, Path)
        self.assertIsInstance(Settings.LOGS_DIR, Path)

    def test_index_html_exists(self) -> None:
        """The frontend entry point must exist on disk."""
        self.assertTrue((Settings.STATIC_DIR / "index.html").exists())

    def test_placeholder_image_is_url(self) -> None:
        """Missing photos fall back to an absolute URL."""
        self.assertTrue(Settings.PLACEHOLDER_IMAGE.startswith("https://"))


if __name__ == "__main__":
    unittest.main()
