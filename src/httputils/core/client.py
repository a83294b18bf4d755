"""Caller-facing HTTP client.

`HttpClient` offers two families of helpers over one transport:

- `get/post/put/delete` return the `Response` (status code and body text)
  for every status.
- `get_for_result/post_for_result/put_for_result/delete_for_result` decode
  a 200 body into a caller-chosen type, return None for other success
  statuses and raise `HttpStatusError` for 4xx/5xx.

Every helper takes an optional `RequestOptions` plus keyword overrides for
any of its fields, so one call can change a single setting:

```python
from httputils.core.client import HttpClient

with HttpClient() as client:
    resp = client.get("http://host/get", headers={"X-Id": "1"}, max_retries=3)
    user = client.get_for_result("http://host/users/{id}", User, uri_variables={"id": 7})
```
"""

from typing import Any, TypeVar

import attrs

from httputils.config import ClientConfig
from httputils.core.executor import DEFAULT_USER_AGENT, RequestExecutor
from httputils.core.models import HttpMethod, Request, RequestOptions, Response
from httputils.transports import SessionTransport, Transport, create_transport

T = TypeVar("T")


@attrs.define(frozen=False, slots=True)
class HttpClient:
    """Synchronous HTTP helper client.

    Attributes:
        transport: Transport used for every attempt (default: requests).
        defaults: Options used when a call passes no `options`.
        user_agent: Default User-Agent header value.
    """

    transport: Transport = attrs.field(factory=SessionTransport)
    defaults: RequestOptions = attrs.field(factory=RequestOptions)
    user_agent: str = DEFAULT_USER_AGENT
    _executor: RequestExecutor = attrs.field(init=False)

    def __attrs_post_init__(self) -> None:
        self._executor = RequestExecutor(self.transport, user_agent=self.user_agent)

    @classmethod
    def from_config(cls, config: ClientConfig, **transport_kwargs: Any) -> "HttpClient":
        """Create HttpClient from ClientConfig.

        Args:
            config: Client configuration.
            **transport_kwargs: Passed to the transport (e.g. `session=`).

        Returns:
            Configured HttpClient instance.
        """
        defaults = RequestOptions(
            connect_timeout_ms=config.connect_timeout_ms,
            read_timeout_ms=config.read_timeout_ms,
            max_retries=config.max_retries,
        )
        return cls(
            transport=create_transport(config.transport, **transport_kwargs),
            defaults=defaults,
            user_agent=config.user_agent,
        )

    def options_for(self, options: RequestOptions | None = None, **overrides: Any) -> RequestOptions:
        """Resolve the options for one call.

        Starts from `options`, or the client defaults when None, then applies
        the keyword overrides.
        """
        base = options if options is not None else self.defaults
        return base.evolve(**overrides) if overrides else base

    def request(
        self, method: HttpMethod | str, url: str, options: RequestOptions | None = None, **overrides: Any
    ) -> Response:
        """Send a request and return its status code and body."""
        return self._executor.execute(Request(method, url, self.options_for(options, **overrides)))

    def request_for_result(
        self,
        method: HttpMethod | str,
        url: str,
        result_type: type[T] | None,
        options: RequestOptions | None = None,
        **overrides: Any,
    ) -> T | None:
        """Send a request and decode a 200 body into `result_type`."""
        request = Request(method, url, self.options_for(options, **overrides))
        return self._executor.execute_for_result(request, result_type)

    # Status/body helpers

    def get(self, url: str, options: RequestOptions | None = None, **overrides: Any) -> Response:
        return self.request(HttpMethod.GET, url, options, **overrides)

    def post(self, url: str, body: Any, options: RequestOptions | None = None, **overrides: Any) -> Response:
        return self.request(HttpMethod.POST, url, options, body=body, **overrides)

    def put(self, url: str, body: Any, options: RequestOptions | None = None, **overrides: Any) -> Response:
        return self.request(HttpMethod.PUT, url, options, body=body, **overrides)

    def delete(
        self, url: str, body: Any = None, options: RequestOptions | None = None, **overrides: Any
    ) -> Response:
        if body is not None:
            overrides["body"] = body
        return self.request(HttpMethod.DELETE, url, options, **overrides)

    # Typed-result helpers

    def get_for_result(
        self, url: str, result_type: type[T], options: RequestOptions | None = None, **overrides: Any
    ) -> T | None:
        return self.request_for_result(HttpMethod.GET, url, result_type, options, **overrides)

    def post_for_result(
        self, url: str, body: Any, result_type: type[T], options: RequestOptions | None = None, **overrides: Any
    ) -> T | None:
        return self.request_for_result(HttpMethod.POST, url, result_type, options, body=body, **overrides)

    def put_for_result(
        self,
        url: str,
        body: Any,
        result_type: type[T] | None = None,
        options: RequestOptions | None = None,
        **overrides: Any,
    ) -> T | None:
        return self.request_for_result(HttpMethod.PUT, url, result_type, options, body=body, **overrides)

    def delete_for_result(
        self,
        url: str,
        result_type: type[T] | None = None,
        body: Any = None,
        options: RequestOptions | None = None,
        **overrides: Any,
    ) -> T | None:
        if body is not None:
            overrides["body"] = body
        return self.request_for_result(HttpMethod.DELETE, url, result_type, options, **overrides)

    def close(self) -> None:
        """Close the session or client injected into the transport."""
        self.transport.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        self.close()
