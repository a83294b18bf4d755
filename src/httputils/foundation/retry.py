"""Retry utilities built on tenacity.

This module provides the retry loop used by the request executor. The policy
is intentionally narrow:

- only errors the classifier marks as retriable are retried (timeouts),
- the loop stops after `max_retries + 1` attempts,
- there is no wait between attempts.

## Components

### ErrorClassifier (Protocol)
Protocol for classifying errors as retriable vs non-retriable.

### TimeoutClassifier
Default classifier: `RequestTimeoutError` is retriable, everything else is
raised immediately.

### create_retry_logger
Factory for tenacity `before_sleep` callbacks with structured context.

### create_retrying
Builds the configured `tenacity.Retrying` controller.

## Usage

```python
from httputils.foundation.retry import TimeoutClassifier, create_retrying

retrying = create_retrying(max_retries=3, classifier=TimeoutClassifier(), logger=logger)
for attempt in retrying:
    with attempt:
        response = transport.send(prepared)
```
"""

import logging
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from tenacity import Retrying, retry_if_exception, stop_after_attempt, wait_none

from httputils.foundation.exceptions import HttpUtilsError, RequestTimeoutError


@runtime_checkable
class ErrorClassifier(Protocol):
    """Protocol for error classification in retry logic.

    Example:
        ```python
        class ConnectTimeoutOnly:
            def is_retriable(self, exc: BaseException) -> bool:
                return isinstance(exc, RequestTimeoutError) and "connect" in str(exc)

            def get_error_details(self, exc: BaseException) -> dict[str, Any]:
                return {}
        ```
    """

    def is_retriable(self, exc: BaseException) -> bool:
        """Determine if an exception should trigger a retry.

        Args:
            exc: The exception to classify.

        Returns:
            True if the error should be retried, False if it should propagate.
        """
        ...

    def get_error_details(self, exc: BaseException) -> dict[str, Any]:
        """Extract structured error details for logging.

        Args:
            exc: The exception to extract details from.

        Returns:
            Dictionary of details. Empty dict if none are available.
        """
        ...


class TimeoutClassifier:
    """Classifier that retries timeouts and nothing else."""

    def is_retriable(self, exc: BaseException) -> bool:
        return isinstance(exc, RequestTimeoutError)

    def get_error_details(self, exc: BaseException) -> dict[str, Any]:
        if isinstance(exc, HttpUtilsError):
            return {"url": exc.url, "error": exc.message}
        return {"error": str(exc)}


def create_retry_logger(
    logger: logging.Logger,
    get_error_details: Callable[[BaseException], dict[str, Any]] | None = None,
    message: str = "Request timed out, retrying",
    max_attempts: int | None = None,
) -> Callable[[Any], None]:
    """Create a retry logging callback for tenacity.

    The callback is meant for tenacity's `before_sleep` parameter and logs one
    warning per retried attempt.

    Args:
        logger: Logger instance to use for logging.
        get_error_details: Optional function returning extra fields for the
            failed attempt's exception.
        message: Log message.
        max_attempts: Total attempts allowed. When given, `retries_left` is
            added to the log record.

    Returns:
        Callback function for tenacity's before_sleep parameter.
    """

    def log_retry(retry_state: Any) -> None:
        if retry_state.outcome is None or not retry_state.outcome.failed:
            return

        exc = retry_state.outcome.exception()
        extra: dict[str, Any] = {
            "attempt": retry_state.attempt_number,
            "error_type": type(exc).__name__,
        }
        if max_attempts is not None:
            extra["retries_left"] = max_attempts - retry_state.attempt_number

        if get_error_details is not None:
            extra.update(get_error_details(exc))

        logger.warning(message, extra=extra)

    return log_retry


def create_retrying(
    max_retries: int,
    classifier: ErrorClassifier | None = None,
    logger: logging.Logger | None = None,
) -> Retrying:
    """Build the retry controller for one logical request.

    Args:
        max_retries: Retries allowed after the first attempt. Zero means a
            single attempt.
        classifier: Decides which errors are retried (default:
            `TimeoutClassifier`).
        logger: Logger for retry warnings (default: this module's logger).

    Returns:
        A `tenacity.Retrying` that re-raises the last error once exhausted.

    Raises:
        ValueError: If max_retries is negative.
    """
    if max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise ValueError(msg)

    classifier = classifier or TimeoutClassifier()
    max_attempts = max_retries + 1
    log_retry = create_retry_logger(
        logger or logging.getLogger(__name__),
        classifier.get_error_details,
        max_attempts=max_attempts,
    )

    return Retrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_none(),
        retry=retry_if_exception(classifier.is_retriable),
        before_sleep=log_retry,
        reraise=True,
    )
