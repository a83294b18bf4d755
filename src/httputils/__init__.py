"""httputils: small synchronous HTTP helpers with JSON bodies and timeout retries."""

from httputils.api import (
    delete,
    delete_for_result,
    get,
    get_default_client,
    get_for_result,
    post,
    post_for_result,
    put,
    put_for_result,
)
from httputils.config import ClientConfig, get_settings
from httputils.core.client import HttpClient
from httputils.core.executor import RequestExecutor
from httputils.core.models import HttpMethod, PreparedRequest, Request, RequestOptions, Response
from httputils.foundation.exceptions import (
    HttpStatusError,
    HttpUtilsError,
    RequestTimeoutError,
    SerializationError,
    TransportError,
)
from httputils.foundation.logger import configure_logging
from httputils.transports import (
    TRANSPORTS,
    ConnectionTransport,
    HttpxTransport,
    SessionTransport,
    Transport,
    create_transport,
)
from httputils.version import __version__

__all__ = [
    "TRANSPORTS",
    "ClientConfig",
    "ConnectionTransport",
    "HttpClient",
    "HttpMethod",
    "HttpStatusError",
    "HttpUtilsError",
    "HttpxTransport",
    "PreparedRequest",
    "Request",
    "RequestExecutor",
    "RequestOptions",
    "RequestTimeoutError",
    "Response",
    "SerializationError",
    "SessionTransport",
    "Transport",
    "TransportError",
    "__version__",
    "configure_logging",
    "create_transport",
    "delete",
    "delete_for_result",
    "get",
    "get_default_client",
    "get_for_result",
    "get_settings",
    "post",
    "post_for_result",
    "put",
    "put_for_result",
]
