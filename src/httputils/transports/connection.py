"""Transport over a raw `http.client` connection.

One `HTTPConnection` (or `HTTPSConnection`) per attempt, always closed. The
connect timeout is in force while the socket is opened, then the socket
timeout is switched to the read timeout for the exchange.
"""

import http.client
from urllib.parse import SplitResult, quote, urlsplit

import attrs

from httputils.core.models import PreparedRequest, Response
from httputils.foundation.exceptions import TransportError
from httputils.foundation.http import ms_to_seconds

from .base import Transport, read_body

# Characters left as-is when percent-encoding the request target
_PATH_SAFE = "/%:@!$&'()*+,;=~"
_QUERY_SAFE = _PATH_SAFE + "?"


@attrs.define(frozen=False, slots=True)
class ConnectionTransport(Transport):
    """Single-attempt transport using the standard library connection classes."""

    timeout_errors = (TimeoutError,)
    # http.client raises UnicodeError for hosts or headers it cannot encode
    transport_errors = (OSError, http.client.HTTPException, UnicodeError)

    def _send(self, prepared: PreparedRequest) -> Response:
        parsed = self._parse(prepared.url)
        conn = self._open(parsed, ms_to_seconds(prepared.connect_timeout_ms))
        try:
            conn.connect()
            if conn.sock is not None:
                conn.sock.settimeout(ms_to_seconds(prepared.read_timeout_ms))

            conn.request(
                prepared.method.value,
                self._target(parsed),
                body=prepared.body_bytes,
                headers=prepared.headers,
            )
            resp = conn.getresponse()
            return Response(status_code=resp.status, body=read_body(resp.status, resp.read))
        finally:
            conn.close()

    @staticmethod
    def _parse(url: str) -> SplitResult:
        """Validate and split the URL before any socket is opened."""
        parsed = urlsplit(url)
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            msg = f"Malformed URL, expected an absolute http(s) URL: {url!r}"
            raise TransportError(msg, url=url)
        try:
            parsed.port  # noqa: B018
        except ValueError as e:
            msg = f"Malformed URL: {e}"
            raise TransportError(msg, url=url) from e
        return parsed

    @staticmethod
    def _open(parsed: SplitResult, connect_timeout: float) -> http.client.HTTPConnection:
        if parsed.scheme == "https":
            return http.client.HTTPSConnection(parsed.hostname, parsed.port, timeout=connect_timeout)
        return http.client.HTTPConnection(parsed.hostname, parsed.port, timeout=connect_timeout)

    @staticmethod
    def _target(parsed: SplitResult) -> str:
        """Return the percent-encoded path and query to send.

        http.client only accepts ASCII, so non-ASCII characters are encoded as
        UTF-8 octets. Existing escapes are kept.
        """
        path = quote(parsed.path or "/", safe=_PATH_SAFE)
        if parsed.query:
            path += "?" + quote(parsed.query, safe=_QUERY_SAFE)
        return path
