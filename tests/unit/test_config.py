"""Unit tests for config module.

This file tests ClientConfig and its from_env() method.

# Test Coverage

The tests cover:
  - Defaults: values used when no environment variables are set
  - Environment variable parsing
  - Validation: unknown transport names, non-positive timeouts
  - Immutability and caching of get_settings()

# Running Tests

Run with: pytest tests/unit/test_config.py
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from httputils.config import ClientConfig, get_settings
from httputils.version import __version__

# =============================================================================
# ClientConfig Tests
# =============================================================================


class TestClientConfigFromEnv:
    """Test suite for ClientConfig.from_env()."""

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self) -> None:
        """Test the configuration used when nothing is set.

        **Why this test is important:**
          - The helpers must work without any environment setup

        **What it tests:**
          - requests transport, 10 s / 60 s timeouts, no retries
          - User-Agent carries the package version
        """
        config = ClientConfig.from_env()

        assert config.transport == "session"
        assert config.connect_timeout_ms == 10_000
        assert config.read_timeout_ms == 60_000
        assert config.max_retries == 0
        assert config.user_agent == f"httputils/{__version__}"

    @patch.dict(
        os.environ,
        {
            "HTTPUTILS_TRANSPORT": "HTTPX",
            "HTTPUTILS_CONNECT_TIMEOUT_MS": "1000",
            "HTTPUTILS_READ_TIMEOUT_MS": "10000",
            "HTTPUTILS_MAX_RETRIES": "3",
            "HTTPUTILS_USER_AGENT": "svc/1.0",
        },
        clear=True,
    )
    def test_reads_environment(self) -> None:
        config = ClientConfig.from_env()

        assert config.transport == "httpx"
        assert config.connect_timeout_ms == 1000
        assert config.read_timeout_ms == 10000
        assert config.max_retries == 3
        assert config.user_agent == "svc/1.0"

    @patch.dict(os.environ, {"HTTPUTILS_TRANSPORT": "urlconnection"}, clear=True)
    def test_unknown_transport_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ClientConfig.from_env()

    @pytest.mark.parametrize(
        "env",
        [
            {"HTTPUTILS_CONNECT_TIMEOUT_MS": "0"},
            {"HTTPUTILS_READ_TIMEOUT_MS": "-5"},
            {"HTTPUTILS_MAX_RETRIES": "-1"},
            {"HTTPUTILS_MAX_RETRIES": "many"},
        ],
    )
    def test_invalid_numbers_rejected(self, env: dict[str, str]) -> None:
        """Test that invalid numeric settings fail fast.

        **Why this test is important:**
          - A bad timeout should fail at startup, not on the first request

        **What it tests:**
          - Zero/negative timeouts, negative retries and non-numbers raise
            ValueError (pydantic's ValidationError is a ValueError)
        """
        with patch.dict(os.environ, env, clear=True), pytest.raises(ValueError):
            ClientConfig.from_env()


class TestClientConfigModel:
    """Test suite for ClientConfig model behaviour."""

    def test_frozen(self) -> None:
        config = ClientConfig()

        with pytest.raises(ValidationError):
            config.max_retries = 3  # type: ignore[misc]

    def test_get_settings_is_cached(self) -> None:
        with patch.dict(os.environ, {"HTTPUTILS_MAX_RETRIES": "2"}, clear=True):
            first = get_settings()
        with patch.dict(os.environ, {"HTTPUTILS_MAX_RETRIES": "5"}, clear=True):
            second = get_settings()

        assert first is second
        assert second.max_retries == 2
