"""Shared fixtures for the test suite."""

import pytest

from translations.configuration import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset the cached Settings singleton around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
