"""Transport registry."""

from typing import Any

from httputils.transports.base import Transport, decode_body, read_body
from httputils.transports.connection import ConnectionTransport
from httputils.transports.httpx_transport import HttpxTransport
from httputils.transports.session import SessionTransport

TRANSPORTS: dict[str, type[Transport]] = {
    "session": SessionTransport,
    "httpx": HttpxTransport,
    "connection": ConnectionTransport,
}


def create_transport(name: str, **kwargs: Any) -> Transport:
    """Instantiate a transport by registry name.

    Args:
        name: One of the `TRANSPORTS` keys.
        **kwargs: Passed to the transport constructor (e.g. `session=`).

    Raises:
        ValueError: If the name is not registered.
    """
    try:
        transport_cls = TRANSPORTS[name]
    except KeyError:
        msg = f"Unknown transport: {name!r}. Must be one of: {sorted(TRANSPORTS)}"
        raise ValueError(msg) from None
    return transport_cls(**kwargs)


__all__ = [
    "TRANSPORTS",
    "ConnectionTransport",
    "HttpxTransport",
    "SessionTransport",
    "Transport",
    "create_transport",
    "decode_body",
    "read_body",
]
