"""Transport backed by `httpx`.

httpx has separate connect/read/write/pool timeouts, so the two millisecond
settings map onto it directly: connect and pool use the connect timeout,
read and write use the read timeout.
"""

from collections.abc import Callable

import attrs
import httpx

from httputils.core.models import PreparedRequest, Response
from httputils.foundation.http import ms_to_seconds

from .base import Transport, read_body


def default_client_factory(timeout: httpx.Timeout) -> httpx.Client:
    """Create a plain `httpx.Client` for one attempt."""
    return httpx.Client(timeout=timeout, follow_redirects=False)


def build_timeout(connect_timeout_ms: int, read_timeout_ms: int) -> httpx.Timeout:
    """Map connect/read milliseconds onto an `httpx.Timeout`."""
    connect = ms_to_seconds(connect_timeout_ms)
    read = ms_to_seconds(read_timeout_ms)
    return httpx.Timeout(connect=connect, read=read, write=read, pool=connect)


@attrs.define(frozen=False, slots=True)
class HttpxTransport(Transport):
    """Single-attempt transport using `httpx`.

    Attributes:
        client: Optional caller-managed client, used for every attempt.
        client_factory: Builds the per-attempt client when no client was
            injected. Tests pass a factory that mounts `httpx.MockTransport`.
    """

    _client: httpx.Client | None = attrs.field(default=None)
    client_factory: Callable[[httpx.Timeout], httpx.Client] = attrs.field(default=default_client_factory)

    timeout_errors = (httpx.TimeoutException,)
    transport_errors = (httpx.HTTPError, httpx.InvalidURL)

    def _send(self, prepared: PreparedRequest) -> Response:
        timeout = build_timeout(prepared.connect_timeout_ms, prepared.read_timeout_ms)
        if self._client is not None:
            return self._exchange(self._client, prepared, timeout)
        with self.client_factory(timeout) as client:
            return self._exchange(client, prepared, timeout)

    def _exchange(self, client: httpx.Client, prepared: PreparedRequest, timeout: httpx.Timeout) -> Response:
        resp = client.request(
            prepared.method.value,
            prepared.url,
            headers=prepared.headers,
            content=prepared.body_bytes,
            timeout=timeout,
            follow_redirects=False,
        )
        return Response(
            status_code=resp.status_code,
            body=read_body(resp.status_code, lambda: resp.content),
        )

    def close(self) -> None:
        """Close the injected client, if any."""
        if self._client is not None:
            self._client.close()
