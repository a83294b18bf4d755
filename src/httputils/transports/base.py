"""Base class for transports.

A transport adapts one HTTP library to a single operation: send one prepared
request, read the whole body, return a `Response`. It performs exactly one
attempt. Retries, header defaults and JSON handling live in the executor.

Library exceptions are translated at this boundary:
- the library's timeout exceptions become `RequestTimeoutError`
- its other failures become `TransportError`

No transport follows redirects: a 3xx answer is returned as the attempt's
`Response`, so every transport gives the same result for the same server.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import ClassVar

import attrs

from httputils.core.models import PreparedRequest, Response
from httputils.foundation.exceptions import HttpUtilsError, RequestTimeoutError, TransportError
from httputils.foundation.mixins import LoggerMixin


def decode_body(data: bytes | None) -> str:
    """Decode body bytes as UTF-8, replacing undecodable bytes."""
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


def read_body(
    status_code: int,
    primary: Callable[[], bytes | None],
    error: Callable[[], bytes | None] | None = None,
) -> str:
    """Read a full response body, choosing the channel by status code.

    Success statuses (< 400) are read from the primary channel. Error statuses
    are read from the error channel when the transport has one, otherwise from
    the primary channel.

    Args:
        status_code: HTTP status code of the response.
        primary: Reader for the normal response body.
        error: Reader for the error body, or None when the library exposes a
            single channel.

    Returns:
        The body text, empty when nothing was sent.
    """
    reader = primary if status_code < 400 or error is None else error
    return decode_body(reader())


@attrs.define(frozen=False, slots=True)
class Transport(LoggerMixin, ABC):
    """Base class for single-attempt HTTP transports.

    Subclasses set `transport_errors` to the library exceptions they expect
    and implement `_send()`. Override `_is_timeout()` when the library hides
    timeouts inside other exception types.
    """

    timeout_errors: ClassVar[tuple[type[BaseException], ...]] = ()
    transport_errors: ClassVar[tuple[type[BaseException], ...]] = ()

    def send(self, prepared: PreparedRequest) -> Response:
        """Send one attempt of a prepared request.

        Args:
            prepared: The request to send.

        Returns:
            Status code and full body text. Error statuses are returned, not
            raised.

        Raises:
            RequestTimeoutError: If the connect or read timeout expired.
            TransportError: For any other failure below the HTTP layer.
        """
        self._logger.debug(
            "Opening connection",
            extra={"request": {"method": prepared.method.value, "url": prepared.url}},
        )
        try:
            return self._send(prepared)
        except HttpUtilsError:
            raise
        except self.timeout_errors + self.transport_errors as e:
            if self._is_timeout(e):
                msg = f"{prepared.method.value} request timed out: {e}"
                raise RequestTimeoutError(msg, url=prepared.url) from e
            msg = f"{prepared.method.value} request failed: {e}"
            raise TransportError(msg, url=prepared.url) from e

    def _is_timeout(self, exc: BaseException) -> bool:
        return isinstance(exc, self.timeout_errors)

    @abstractmethod
    def _send(self, prepared: PreparedRequest) -> Response:
        """Library-specific single attempt.

        Must open its own connection (unless the caller injected one), read
        the complete body and release the connection before returning.
        """

    def close(self) -> None:
        """Release resources the caller handed to this transport."""
