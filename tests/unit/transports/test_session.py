"""Unit tests for transports.session module.

This file tests SessionTransport, the requests-backed transport.

# Test Coverage

The tests cover:
  - Request Building: method, URL, headers, body bytes and timeout tuple
  - Session Lifecycle: per-attempt session vs injected session
  - Error Translation: timeouts vs other request failures
  - Error Statuses: body read for 4xx/5xx

# Test Structure

Tests use pytest class-based organization with mocking for external dependencies.
The underlying requests.Session is mocked to isolate transport logic.

# Running Tests

Run with: pytest tests/unit/transports/test_session.py
"""

from unittest.mock import MagicMock, patch

import pytest
import requests
from urllib3.exceptions import ReadTimeoutError

from httputils.core.models import PreparedRequest, Response
from httputils.foundation.exceptions import RequestTimeoutError, TransportError
from httputils.transports.session import SessionTransport


def make_session(status: int = 200, content: bytes = b"") -> MagicMock:
    session = MagicMock(spec=requests.Session)
    resp = MagicMock()
    resp.status_code = status
    resp.content = content
    session.request.return_value = resp
    return session


# =============================================================================
# Request Building Tests
# =============================================================================


class TestSend:
    """Test suite for SessionTransport.send()."""

    def test_sends_prepared_request(self, prepared_post: PreparedRequest) -> None:
        """Test that every prepared field reaches requests.

        **Why this test is important:**
          - The transport is the only place the request touches the library

        **What it tests:**
          - Method, URL and headers are passed through
          - Body is sent as UTF-8 bytes
          - Timeout is a (connect, read) tuple in seconds
          - Redirects are not followed
          - Body and status come back in the Response
        """
        session = make_session(200, b'{"value":42}')
        transport = SessionTransport(session=session)

        response = transport.send(prepared_post)

        assert response == Response(200, '{"value":42}')
        session.request.assert_called_once_with(
            "POST",
            "https://host/items",
            headers=prepared_post.headers,
            data=b'{"value":42}',
            timeout=(1.0, 2.0),
            allow_redirects=False,
        )

    def test_error_status_body_is_returned(self, prepared_get: PreparedRequest) -> None:
        transport = SessionTransport(session=make_session(500, b"internal error"))

        assert transport.send(prepared_get) == Response(500, "internal error")

    def test_empty_body(self, prepared_get: PreparedRequest) -> None:
        transport = SessionTransport(session=make_session(204))

        assert transport.send(prepared_get) == Response(204, "")

    def test_fresh_session_per_attempt(self, prepared_get: PreparedRequest) -> None:
        """Test that without an injected session each attempt gets its own.

        **Why this test is important:**
          - A connection left over from a timed out attempt must not be reused

        **What it tests:**
          - create_session() is called once per send
          - Each session is closed via its context manager
        """
        sessions = [make_session(200), make_session(200)]
        for session in sessions:
            session.__enter__.return_value = session

        with patch("httputils.transports.session.create_session", side_effect=sessions) as mock_create:
            transport = SessionTransport()
            transport.send(prepared_get)
            transport.send(prepared_get)

        assert mock_create.call_count == 2
        for session in sessions:
            session.request.assert_called_once()
            session.__exit__.assert_called_once()


# =============================================================================
# Error Translation Tests
# =============================================================================


class TestErrorTranslation:
    """Test suite for mapping requests exceptions."""

    @pytest.mark.parametrize(
        "exc",
        [
            requests.ConnectTimeout("connect timed out"),
            requests.ReadTimeout("read timed out"),
            requests.ConnectionError(ReadTimeoutError(None, "/", "Read timed out.")),
        ],
    )
    def test_timeouts(self, prepared_get: PreparedRequest, exc: Exception) -> None:
        """Test that connect and read timeouts become RequestTimeoutError.

        **Why this test is important:**
          - Only RequestTimeoutError is retried by the executor
          - requests reports a body read timeout as a ConnectionError

        **What it tests:**
          - ConnectTimeout, ReadTimeout and a wrapped urllib3 ReadTimeoutError
          - The URL is attached and the library error chained
        """
        session = make_session()
        session.request.side_effect = exc
        transport = SessionTransport(session=session)

        with pytest.raises(RequestTimeoutError) as exc_info:
            transport.send(prepared_get)

        assert exc_info.value.url == prepared_get.url
        assert exc_info.value.__cause__ is exc

    @pytest.mark.parametrize(
        "exc",
        [
            requests.ConnectionError("connection refused"),
            requests.exceptions.InvalidURL("bad url"),
            requests.exceptions.ChunkedEncodingError("broken"),
        ],
    )
    def test_other_failures(self, prepared_get: PreparedRequest, exc: Exception) -> None:
        session = make_session()
        session.request.side_effect = exc
        transport = SessionTransport(session=session)

        with pytest.raises(TransportError) as exc_info:
            transport.send(prepared_get)

        assert not isinstance(exc_info.value, RequestTimeoutError)
        assert exc_info.value.__cause__ is exc

    def test_unrelated_exception_propagates(self, prepared_get: PreparedRequest) -> None:
        session = make_session()
        session.request.side_effect = KeyError("bug")
        transport = SessionTransport(session=session)

        with pytest.raises(KeyError):
            transport.send(prepared_get)


class TestClose:
    """Test suite for SessionTransport.close()."""

    def test_closes_injected_session(self) -> None:
        session = make_session()

        SessionTransport(session=session).close()

        session.close.assert_called_once()

    def test_close_without_session(self) -> None:
        SessionTransport().close()
