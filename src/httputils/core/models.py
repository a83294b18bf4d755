"""Domain models for HTTP helper calls.

All classes use `attrs` for concise, correct class definitions. Everything
here is immutable: a `Request` describes one logical call, a
`PreparedRequest` is what each attempt of that call sends, and a `Response`
is what an attempt got back.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

import attrs

DEFAULT_CONNECT_TIMEOUT_MS = 10_000
DEFAULT_READ_TIMEOUT_MS = 60_000
DEFAULT_MAX_RETRIES = 0


class HttpMethod(str, Enum):
    """HTTP methods supported by the helpers."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


def _positive(instance: Any, attribute: attrs.Attribute, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        msg = f"{attribute.name} must be a positive integer (milliseconds), got {value!r}"
        raise ValueError(msg)


def _non_negative(instance: Any, attribute: attrs.Attribute, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        msg = f"{attribute.name} must be a non-negative integer, got {value!r}"
        raise ValueError(msg)


def _copy_mapping(value: Mapping[str, Any] | None) -> dict[str, Any]:
    return dict(value) if value else {}


def _to_method(value: "HttpMethod | str") -> HttpMethod:
    if isinstance(value, HttpMethod):
        return value
    return HttpMethod(value.upper())


@attrs.define(frozen=True, slots=True)
class RequestOptions:
    """Per-call settings for a helper request.

    One structure replaces the long list of overloads (with or without
    headers, timeouts, retries, URI variables). Callers set only what they
    need.

    Attributes:
        headers: Extra request headers. They win over default headers on a
            (case-insensitive) name collision.
        body: Optional payload, serialized to JSON before sending.
        connect_timeout_ms: Connect timeout in milliseconds (default: 10000).
        read_timeout_ms: Read timeout in milliseconds (default: 60000).
        max_retries: Retries allowed after a timeout (default: 0, no retry).
        uri_variables: Values for `{name}` placeholders in the URL.

    Example:
        ```python
        options = RequestOptions(headers={"X-Id": "1"}, max_retries=3)
        faster = options.evolve(read_timeout_ms=5_000)
        ```
    """

    headers: dict[str, str] = attrs.field(factory=dict, converter=_copy_mapping)
    body: Any = None
    connect_timeout_ms: int = attrs.field(default=DEFAULT_CONNECT_TIMEOUT_MS, validator=_positive)
    read_timeout_ms: int = attrs.field(default=DEFAULT_READ_TIMEOUT_MS, validator=_positive)
    max_retries: int = attrs.field(default=DEFAULT_MAX_RETRIES, validator=_non_negative)
    uri_variables: dict[str, Any] = attrs.field(factory=dict, converter=_copy_mapping)

    def evolve(self, **changes: Any) -> "RequestOptions":
        """Return a copy with the given fields replaced.

        Raises:
            TypeError: If a field name is unknown.
            ValueError: If a new value fails validation.
        """
        return attrs.evolve(self, **changes)


@attrs.define(frozen=True, slots=True)
class Request:
    """One logical HTTP call.

    Attributes:
        method: HTTP method.
        url: Absolute URL. May already contain query parameters and `{name}`
            placeholders filled from `options.uri_variables`.
        options: Headers, body, timeouts and retry settings.
    """

    method: HttpMethod = attrs.field(converter=_to_method)
    url: str
    options: RequestOptions = attrs.field(factory=RequestOptions)


@attrs.define(frozen=True, slots=True)
class PreparedRequest:
    """What a transport sends for a single attempt.

    Built once per logical call. The URL is expanded, the headers merged and
    the body already encoded as JSON text, so every retry sends the same
    bytes.
    """

    method: HttpMethod
    url: str
    headers: dict[str, str]
    body: str | None
    connect_timeout_ms: int
    read_timeout_ms: int

    @property
    def body_bytes(self) -> bytes | None:
        """Body encoded as UTF-8, or None when there is no body."""
        return None if self.body is None else self.body.encode("utf-8")


@attrs.define(frozen=True, slots=True)
class Response:
    """Status code and full body text of an HTTP response.

    Attributes:
        status_code: HTTP status code.
        body: Body text. Empty string when the server sent nothing.
    """

    status_code: int
    body: str = ""

    @property
    def is_success(self) -> bool:
        """True for any status below 400."""
        return self.status_code < 400

    @property
    def is_ok(self) -> bool:
        """True only for HTTP 200."""
        return self.status_code == 200

    def __str__(self) -> str:
        return f"Response(status_code={self.status_code}, body={self.body!r})"
