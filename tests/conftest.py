# tests/conftest.py

"""Shared pytest fixtures for the proxy, client and TUI tests."""

from collections.abc import Generator
from unittest.mock import patch

import pytest

from src.config.settings import Settings


@pytest.fixture(autouse=True)
def fixed_server_name() -> Generator[None, None, None]:
    """Pin the deployment label so envelopes are deterministic."""
    with patch.object(Settings, "SERVER_NAME", "test-node"):
        yield


@pytest.fixture(autouse=True)
def no_browser() -> Generator[None, None, None]:
    """Never open a real browser from row-selection handlers."""
    with patch("webbrowser.open"):
        yield
