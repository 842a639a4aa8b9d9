"""Shared pytest fixtures for supplydb tests."""

import pytest

from supplydb.core.config import get_settings


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Reset settings cache so environment changes take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
