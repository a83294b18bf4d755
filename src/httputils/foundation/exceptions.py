"""Exception hierarchy for the httputils package.

Every error raised by a helper call derives from `HttpUtilsError` and carries
the originating URL and the number of attempts made, so callers can log a
failure without keeping their own bookkeeping.

## Exception Hierarchy

```
HttpUtilsError
├── TransportError          connection refused, DNS, malformed URL, I/O
│   └── RequestTimeoutError connect or read timeout (the only retried error)
├── SerializationError      body could not be encoded / response not decodable
└── HttpStatusError         status >= 400 on the typed-result API
```

## Usage

```python
from httputils.foundation.exceptions import RequestTimeoutError, TransportError

try:
    client.get("http://host/get", max_retries=3)
except RequestTimeoutError as e:
    logger.error("gave up", extra={"url": e.url, "attempts": e.attempts})
except TransportError:
    raise
```
"""


class HttpUtilsError(Exception):
    """Base exception class for all httputils errors.

    Attributes:
        url: The URL the request was sent to, if known.
        attempts: Number of attempts made before the error propagated.
            Zero when the failure happened before the first attempt.
    """

    def __init__(self, message: str, *, url: str | None = None, attempts: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.attempts = attempts

    def __str__(self) -> str:
        context = []
        if self.url is not None:
            context.append(f"url={self.url}")
        if self.attempts:
            context.append(f"attempts={self.attempts}")
        if not context:
            return self.message
        return f"{self.message} ({', '.join(context)})"


class TransportError(HttpUtilsError):
    """Raised when a request fails below the HTTP layer.

    Covers DNS failures, refused connections, malformed URLs and I/O errors
    mid-transfer. Never retried.
    """


class RequestTimeoutError(TransportError):
    """Raised when the connect or read timeout is exceeded.

    This is the only error class the retry loop acts on.
    """


class SerializationError(HttpUtilsError):
    """Raised when a request body cannot be encoded to JSON, or a response
    body cannot be decoded into the requested result shape."""


class HttpStatusError(HttpUtilsError):
    """Raised by the typed-result API when the server answers with status >= 400.

    The status/body API returns such responses instead of raising.

    Attributes:
        status_code: HTTP status code of the response.
        body: Response body text (from the error channel when the transport
            has one).
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        body: str = "",
        url: str | None = None,
        attempts: int = 0,
    ) -> None:
        super().__init__(message, url=url, attempts=attempts)
        self.status_code = status_code
        self.body = body
