"""Transport backed by a `requests` session.

## Usage

```python
from httputils.transports.session import SessionTransport

transport = SessionTransport()                  # fresh session per attempt
shared = SessionTransport(session=my_session)   # caller-managed session
```

## Design

Without an injected session, every attempt gets its own session from
`create_session()` and closes it afterwards, so no connection survives into
the next attempt. An injected session is used as-is: pooling and keep-alive
are then the caller's choice.
"""

import attrs
import requests
from urllib3.exceptions import ReadTimeoutError

from httputils.core.models import PreparedRequest, Response
from httputils.foundation.http import create_session, timeout_tuple

from .base import Transport, read_body


@attrs.define(frozen=False, slots=True)
class SessionTransport(Transport):
    """Single-attempt transport using `requests`.

    Attributes:
        session: Optional caller-managed session. When None, a new session is
            created and closed for every attempt.

    Example:
        ```python
        transport = SessionTransport()
        response = transport.send(prepared)
        # Response(status_code=200, body='{"value": 42}')
        ```
    """

    _session: requests.Session | None = attrs.field(default=None)

    timeout_errors = (requests.Timeout,)
    transport_errors = (requests.RequestException,)

    def _is_timeout(self, exc: BaseException) -> bool:
        if isinstance(exc, requests.Timeout):
            return True
        # requests reports a read timeout hit while loading the body as a
        # ConnectionError wrapping urllib3's ReadTimeoutError
        return (
            isinstance(exc, requests.ConnectionError)
            and bool(exc.args)
            and isinstance(exc.args[0], ReadTimeoutError)
        )

    def _send(self, prepared: PreparedRequest) -> Response:
        if self._session is not None:
            return self._exchange(self._session, prepared)
        with create_session() as session:
            return self._exchange(session, prepared)

    def _exchange(self, session: requests.Session, prepared: PreparedRequest) -> Response:
        resp = session.request(
            prepared.method.value,
            prepared.url,
            headers=prepared.headers,
            data=prepared.body_bytes,
            timeout=timeout_tuple(prepared.connect_timeout_ms, prepared.read_timeout_ms),
            allow_redirects=False,
        )
        with resp:
            return Response(
                status_code=resp.status_code,
                body=read_body(resp.status_code, lambda: resp.content),
            )

    def close(self) -> None:
        """Close the injected session, if any."""
        if self._session is not None:
            self._session.close()
