"""Unit tests for the transport registry in httputils.transports."""

from unittest.mock import MagicMock

import pytest
import requests

from httputils.transports import (
    TRANSPORTS,
    ConnectionTransport,
    HttpxTransport,
    SessionTransport,
    create_transport,
)
from httputils.transports.base import read_body


class TestRegistry:
    """Test suite for TRANSPORTS and create_transport."""

    def test_registered_names(self) -> None:
        assert TRANSPORTS == {
            "session": SessionTransport,
            "httpx": HttpxTransport,
            "connection": ConnectionTransport,
        }

    def test_create_transport_passes_kwargs(self) -> None:
        session = MagicMock(spec=requests.Session)

        transport = create_transport("session", session=session)
        transport.close()

        assert isinstance(transport, SessionTransport)
        session.close.assert_called_once()

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(ValueError, match="urlconnection"):
            create_transport("urlconnection")


class TestReadBody:
    """Test suite for the error-channel policy in read_body."""

    def test_success_reads_primary(self) -> None:
        assert read_body(200, lambda: b"primary", lambda: b"error") == "primary"

    def test_error_status_reads_error_channel(self) -> None:
        """Test that status >= 400 reads from the error channel when there is one.

        **Why this test is important:**
          - Some libraries only expose the error payload on a separate stream

        **What it tests:**
          - 400 and above use the error reader
          - Without an error reader the primary one is used
        """
        assert read_body(400, lambda: b"primary", lambda: b"error") == "error"
        assert read_body(503, lambda: b"primary") == "primary"

    def test_missing_body_is_empty(self) -> None:
        assert read_body(404, lambda: b"", lambda: None) == ""

    def test_invalid_utf8_is_replaced(self) -> None:
        assert read_body(200, lambda: b"ok\xff") == "ok\ufffd"
