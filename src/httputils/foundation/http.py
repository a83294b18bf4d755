"""Shared HTTP utilities for session creation, timeouts and URL handling.

This module provides the small pieces every transport needs: a `requests`
session factory with adapter-level retries switched off (retries are owned by
the executor and only ever fire on timeouts), millisecond-to-seconds timeout
conversion, header merging and `{name}` URI variable expansion.
"""

import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

# Default pool configuration for a single-call session
DEFAULT_POOL_CONNECTIONS = 1
DEFAULT_POOL_MAXSIZE = 1

JSON_CONTENT_TYPE = "application/json"

_URI_VARIABLE = re.compile(r"\{([^{}/]+)\}")


def create_session(
    pool_connections: int = DEFAULT_POOL_CONNECTIONS,
    pool_maxsize: int = DEFAULT_POOL_MAXSIZE,
) -> requests.Session:
    """Create a requests session that never retries on its own.

    urllib3 would otherwise retry some connection failures silently, which
    would make the attempt count reported by the executor wrong.

    Args:
        pool_connections: Number of host pools to cache (default: 1).
        pool_maxsize: Maximum connections kept per host pool (default: 1).

    Returns:
        Configured requests.Session with retries disabled.

    Example:
        ```python
        from httputils.foundation.http import create_session

        with create_session() as session:
            resp = session.get("http://host/get", timeout=(1.0, 10.0))
        ```
    """
    session = requests.Session()
    retry_strategy = Retry(total=0, read=False)
    adapter = HTTPAdapter(
        pool_connections=pool_connections,
        pool_maxsize=pool_maxsize,
        max_retries=retry_strategy,
    )
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


def ms_to_seconds(value_ms: int) -> float:
    """Convert a millisecond timeout to the seconds float HTTP libraries expect."""
    return value_ms / 1000.0


def timeout_tuple(connect_timeout_ms: int, read_timeout_ms: int) -> tuple[float, float]:
    """Return a `(connect, read)` timeout tuple in seconds."""
    return ms_to_seconds(connect_timeout_ms), ms_to_seconds(read_timeout_ms)


def merge_headers(defaults: Mapping[str, str], overrides: Mapping[str, str] | None) -> dict[str, str]:
    """Merge caller headers on top of default headers.

    Header names are matched case-insensitively, and a caller header replaces
    the default with the same name. The caller's spelling of the name is kept.

    Args:
        defaults: Default headers.
        overrides: Caller-supplied headers, applied verbatim.

    Returns:
        New dict with the merged headers.
    """
    merged = dict(defaults)
    if not overrides:
        return merged
    for name, value in overrides.items():
        for existing in [k for k in merged if k.lower() == name.lower()]:
            del merged[existing]
        merged[name] = value
    return merged


def expand_uri(url: str, uri_variables: Mapping[str, Any] | None) -> str:
    """Expand `{name}` placeholders in a URL.

    Each value is converted with `str()` and percent-encoded. Without
    `uri_variables` the URL is returned unchanged, even if it contains braces.

    Args:
        url: URL template, e.g. `http://host/users/{id}?q={term}`.
        uri_variables: Values for the placeholders.

    Returns:
        Expanded URL.

    Raises:
        ValueError: If a placeholder has no matching variable.

    Example:
        ```python
        expand_uri("http://host/users/{id}", {"id": 7})
        # 'http://host/users/7'
        ```
    """
    if not uri_variables:
        return url

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in uri_variables:
            msg = f"No value given for URI variable '{name}'"
            raise ValueError(msg)
        return quote(str(uri_variables[name]), safe="")

    return _URI_VARIABLE.sub(_replace, url)
