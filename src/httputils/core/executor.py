"""Request execution with timeout-only retries.

`RequestExecutor` turns a `Request` into a `PreparedRequest` once, then hands
it to a transport for up to `max_retries + 1` attempts. Only
`RequestTimeoutError` consumes a retry; anything else propagates on the
attempt where it happened. There is no delay between attempts.

## Result policy

`execute()` returns the status/body pair for every status code.

`execute_for_result()` applies the typed-result policy on top:

| Status             | Outcome                                   |
|--------------------|-------------------------------------------|
| 200, non-blank     | body decoded into `result_type`           |
| 200 blank, 201-399 | `None` (no result)                        |
| >= 400             | `HttpStatusError`                         |

Treating 201/204 as "no result" matches the behaviour existing callers were
built against.
"""

import time
from typing import Any, TypeVar

import attrs

from httputils.core.models import PreparedRequest, Request, Response
from httputils.foundation.exceptions import HttpStatusError, HttpUtilsError
from httputils.foundation.http import JSON_CONTENT_TYPE, expand_uri, merge_headers
from httputils.foundation.mixins import LoggerMixin
from httputils.foundation.retry import ErrorClassifier, TimeoutClassifier, create_retrying
from httputils.foundation.serialization import from_json_text, to_json_text
from httputils.transports.base import Transport
from httputils.version import __version__

T = TypeVar("T")

DEFAULT_USER_AGENT = f"httputils/{__version__}"


@attrs.define(frozen=False, slots=True)
class RequestExecutor(LoggerMixin):
    """Executes requests through a transport with the retry and result policies.

    Attributes:
        transport: Performs single attempts.
        user_agent: Default User-Agent header value.
        classifier: Decides which errors are retried (default: timeouts only).

    Example:
        ```python
        executor = RequestExecutor(SessionTransport())
        request = Request("GET", "http://host/get", RequestOptions(max_retries=3))
        value = executor.execute_for_result(request, dict)
        ```
    """

    transport: Transport
    user_agent: str = DEFAULT_USER_AGENT
    classifier: ErrorClassifier = attrs.field(factory=TimeoutClassifier)

    def default_headers(self, has_body: bool) -> dict[str, str]:
        headers = {"Accept": JSON_CONTENT_TYPE, "User-Agent": self.user_agent}
        if has_body:
            headers["Content-Type"] = JSON_CONTENT_TYPE
        return headers

    def prepare(self, request: Request) -> PreparedRequest:
        """Expand the URL, encode the body and merge headers.

        Raises:
            ValueError: If a `{name}` placeholder has no URI variable.
            SerializationError: If the body cannot be encoded as JSON.
        """
        options = request.options
        url = expand_uri(request.url, options.uri_variables)
        body = None if options.body is None else to_json_text(options.body, url=url)
        return PreparedRequest(
            method=request.method,
            url=url,
            headers=merge_headers(self.default_headers(body is not None), options.headers),
            body=body,
            connect_timeout_ms=options.connect_timeout_ms,
            read_timeout_ms=options.read_timeout_ms,
        )

    def execute(self, request: Request) -> Response:
        """Send a request and return its status code and body.

        Args:
            request: The logical request.

        Returns:
            The response of the first attempt that did not time out. Error
            statuses are returned, not raised.

        Raises:
            RequestTimeoutError: If every allowed attempt timed out.
            TransportError: On the first non-timeout transport failure.
            SerializationError: If the body cannot be encoded.
        """
        response, _, _ = self._run(request)
        return response

    def execute_for_result(self, request: Request, result_type: type[T] | None = None) -> T | None:
        """Send a request and decode the body into `result_type`.

        Args:
            request: The logical request.
            result_type: Target shape, or None to discard the body.

        Returns:
            The decoded body for a 200 response with a non-blank body,
            otherwise None.

        Raises:
            HttpStatusError: If the final status is >= 400.
            SerializationError: If the body cannot be encoded or decoded.
            RequestTimeoutError, TransportError: As for `execute()`.
        """
        response, attempts, url = self._run(request)
        return self.result_from(response, result_type, url=url, attempts=attempts)

    @staticmethod
    def result_from(
        response: Response,
        result_type: type[T] | None,
        *,
        url: str | None = None,
        attempts: int = 0,
    ) -> T | None:
        """Apply the typed-result policy to a response."""
        if not response.is_success:
            msg = f"Server answered with status {response.status_code}"
            raise HttpStatusError(
                msg,
                status_code=response.status_code,
                body=response.body,
                url=url,
                attempts=attempts,
            )
        if result_type is None or not response.is_ok or not response.body.strip():
            return None
        return from_json_text(response.body, result_type, url=url, attempts=attempts)

    def _run(self, request: Request) -> tuple[Response, int, str]:
        prepared = self.prepare(request)
        max_retries = request.options.max_retries
        request_log: dict[str, Any] = {"method": prepared.method.value, "url": prepared.url}
        self._logger.info(
            "Sending request",
            extra={"request": request_log, "max_retries": max_retries, "has_body": prepared.body is not None},
        )

        start = time.monotonic()
        attempts = 0
        try:
            for attempt in create_retrying(max_retries, self.classifier, self._logger):
                with attempt:
                    attempts = attempt.retry_state.attempt_number
                    response = self._attempt(prepared, attempts)
        except HttpUtilsError as e:
            self._logger.error(
                "Request failed",
                extra={
                    "request": request_log,
                    "error": {"type": type(e).__name__, "message": e.message, "attempts": e.attempts},
                },
            )
            raise

        self._logger.info(
            "Received response",
            extra={
                "response": {
                    "url": prepared.url,
                    "status_code": response.status_code,
                    "elapsed_ms": round((time.monotonic() - start) * 1000, 1),
                },
                "attempts": attempts,
            },
        )
        return response, attempts, prepared.url

    def _attempt(self, prepared: PreparedRequest, attempt_number: int) -> Response:
        try:
            return self.transport.send(prepared)
        except HttpUtilsError as e:
            e.attempts = attempt_number
            raise
