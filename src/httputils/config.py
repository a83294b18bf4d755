"""Configuration management for httputils.

Defaults for the module-level helpers (`httputils.api`) and for
`HttpClient.from_config()` are read from environment variables. The core
executor never reads the environment itself.

## Environment Variables

All optional:

- `HTTPUTILS_TRANSPORT`: `session` (requests), `httpx` or `connection`
  (http.client) (default: `session`)
- `HTTPUTILS_CONNECT_TIMEOUT_MS`: Connect timeout in milliseconds
  (default: `10000`)
- `HTTPUTILS_READ_TIMEOUT_MS`: Read timeout in milliseconds
  (default: `60000`)
- `HTTPUTILS_MAX_RETRIES`: Retries after a timeout (default: `0`)
- `HTTPUTILS_USER_AGENT`: User-Agent header (default: `httputils/<version>`)

## Usage

```python
from httputils.config import get_settings

settings = get_settings()
print(settings.read_timeout_ms)
```
"""

import os
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, NonNegativeInt, PositiveInt
from pydantic_settings import SettingsConfigDict

from httputils.core.models import DEFAULT_CONNECT_TIMEOUT_MS, DEFAULT_MAX_RETRIES, DEFAULT_READ_TIMEOUT_MS
from httputils.version import __version__

TransportName = Literal["session", "httpx", "connection"]


class ClientConfig(BaseModel):
    """Configuration for the default HTTP client.

    Attributes:
        transport: Registry name of the transport to use. Default: "session".
        connect_timeout_ms: Default connect timeout. Default: 10000.
        read_timeout_ms: Default read timeout. Default: 60000.
        max_retries: Default retries after a timeout. Default: 0.
        user_agent: Default User-Agent header.
    """

    transport: TransportName = "session"
    connect_timeout_ms: PositiveInt = DEFAULT_CONNECT_TIMEOUT_MS
    read_timeout_ms: PositiveInt = DEFAULT_READ_TIMEOUT_MS
    max_retries: NonNegativeInt = DEFAULT_MAX_RETRIES
    user_agent: str = f"httputils/{__version__}"

    model_config = SettingsConfigDict(frozen=True)

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Create ClientConfig from environment variables.

        Returns:
            Configured ClientConfig instance.

        Raises:
            ValueError: If a variable holds an invalid value.
        """
        return cls(
            transport=os.getenv("HTTPUTILS_TRANSPORT", "session").lower(),
            connect_timeout_ms=int(os.getenv("HTTPUTILS_CONNECT_TIMEOUT_MS", str(DEFAULT_CONNECT_TIMEOUT_MS))),
            read_timeout_ms=int(os.getenv("HTTPUTILS_READ_TIMEOUT_MS", str(DEFAULT_READ_TIMEOUT_MS))),
            max_retries=int(os.getenv("HTTPUTILS_MAX_RETRIES", str(DEFAULT_MAX_RETRIES))),
            user_agent=os.getenv("HTTPUTILS_USER_AGENT") or f"httputils/{__version__}",
        )


@lru_cache(maxsize=1)
def get_settings() -> ClientConfig:
    """Return the process-wide configuration, read once from the environment."""
    return ClientConfig.from_env()
