"""Shared pytest configuration and fixtures.

This module provides global fixtures and configuration that are available
to all tests in the test suite.

Fixtures defined here are automatically available to all tests without explicit
import statements. Keep fixtures small, composable, and focused on setup/teardown.
Do NOT put business logic in fixtures.
"""

# pylint: disable=redefined-outer-name

import pytest

from httputils.api import get_default_client
from httputils.config import get_settings


@pytest.fixture(autouse=True)
def clear_cached_settings():
    """Drop the cached settings and default client around every test."""
    get_settings.cache_clear()
    get_default_client.cache_clear()
    yield
    get_settings.cache_clear()
    get_default_client.cache_clear()
