"""Module-level helpers backed by a shared default client.

The default client is built once from `get_settings()`; call
`get_default_client.cache_clear()` after changing the environment.

```python
import httputils

resp = httputils.get("http://host/get", max_retries=2)
value = httputils.get_for_result("http://host/get", dict)
```
"""

from functools import lru_cache
from typing import Any, TypeVar

from httputils.config import get_settings
from httputils.core.client import HttpClient
from httputils.core.models import RequestOptions, Response

T = TypeVar("T")


@lru_cache(maxsize=1)
def get_default_client() -> HttpClient:
    """Return the process-wide client configured from the environment."""
    return HttpClient.from_config(get_settings())


def get(url: str, options: RequestOptions | None = None, **overrides: Any) -> Response:
    return get_default_client().get(url, options, **overrides)


def post(url: str, body: Any, options: RequestOptions | None = None, **overrides: Any) -> Response:
    return get_default_client().post(url, body, options, **overrides)


def put(url: str, body: Any, options: RequestOptions | None = None, **overrides: Any) -> Response:
    return get_default_client().put(url, body, options, **overrides)


def delete(url: str, body: Any = None, options: RequestOptions | None = None, **overrides: Any) -> Response:
    return get_default_client().delete(url, body, options, **overrides)


def get_for_result(
    url: str, result_type: type[T], options: RequestOptions | None = None, **overrides: Any
) -> T | None:
    return get_default_client().get_for_result(url, result_type, options, **overrides)


def post_for_result(
    url: str, body: Any, result_type: type[T], options: RequestOptions | None = None, **overrides: Any
) -> T | None:
    return get_default_client().post_for_result(url, body, result_type, options, **overrides)


def put_for_result(
    url: str, body: Any, result_type: type[T] | None = None, options: RequestOptions | None = None, **overrides: Any
) -> T | None:
    return get_default_client().put_for_result(url, body, result_type, options, **overrides)


def delete_for_result(
    url: str, result_type: type[T] | None = None, body: Any = None, options: RequestOptions | None = None, **overrides: Any
) -> T | None:
    return get_default_client().delete_for_result(url, result_type, body, options, **overrides)
