"""Shared fixtures for transport tests."""

# pylint: disable=redefined-outer-name

import pytest

from httputils.core.models import HttpMethod, PreparedRequest


@pytest.fixture
def prepared_get() -> PreparedRequest:
    """A GET with a query string and 1 s / 2 s timeouts."""
    return PreparedRequest(
        method=HttpMethod.GET,
        url="http://host:8080/path?q=1",
        headers={"Accept": "application/json", "User-Agent": "test"},
        body=None,
        connect_timeout_ms=1000,
        read_timeout_ms=2000,
    )


@pytest.fixture
def prepared_post() -> PreparedRequest:
    """A POST with a JSON body and 1 s / 2 s timeouts."""
    return PreparedRequest(
        method=HttpMethod.POST,
        url="https://host/items",
        headers={"Accept": "application/json", "Content-Type": "application/json"},
        body='{"value":42}',
        connect_timeout_ms=1000,
        read_timeout_ms=2000,
    )
