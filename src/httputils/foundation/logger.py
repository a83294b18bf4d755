"""Logging configuration with structured JSON formatter.

The library itself only creates loggers (`logging.getLogger(__name__)`) and
passes structured context through `extra`. Applications that want the JSON
output call `configure_logging()` once at startup.
"""

import json
import logging
from logging.config import dictConfig
from typing import Any


class CustomJSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging.

    This formatter converts log records to JSON format, including:
    - Standard log fields (time, level, message, etc.)
    - Request information (`extra={"request": {...}}`)
    - Response information (`extra={"response": {...}}`)
    - Error information (`extra={"error": {...}}`), with the trace when
      the record carries exc_info
    - All other extra attributes
    """

    def __init__(self, fmt: str) -> None:
        """Initialize the formatter.

        Args:
            fmt: Format string (used for asctime, but output is JSON).
        """
        logging.Formatter.__init__(self, fmt)

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON.

        Args:
            record: The log record to format.

        Returns:
            JSON string representation of the log record.
        """
        logging.Formatter.format(self, record)
        return json.dumps(self.get_log(record), indent=None, default=str)

    def get_log(self, record: logging.LogRecord) -> dict[str, Any]:
        """Extract log data from record into a dictionary.

        Args:
            record: The log record to extract data from.

        Returns:
            Dictionary containing log data.
        """
        d: dict[str, Any] = {
            "time": record.asctime,
            "process_id": record.process,
            "thread_name": record.threadName,
            "level": record.levelname,
            "logger_name": record.name,
            "line": record.lineno,
            "message": record.message,
        }

        # Outgoing request information
        request_data = getattr(record, "request", None)
        if isinstance(request_data, dict):
            for key in ("method", "url"):
                value = request_data.get(key)
                if value is not None:
                    d[key] = value

        # Received response information
        response_data = getattr(record, "response", None)
        if isinstance(response_data, dict):
            for key in ("url", "status_code", "elapsed_ms"):
                value = response_data.get(key)
                if value is not None:
                    d[key] = value

        error_data = getattr(record, "error", None)
        if error_data is not None:
            if isinstance(error_data, dict):
                error_dict: dict[str, Any] = error_data.copy()
                if record.exc_info:
                    error_dict["trace"] = self.formatException(record.exc_info)
                d["error"] = error_dict
            else:
                d["error"] = error_data

        # Standard LogRecord attributes to exclude (already handled above or internal)
        standard_attrs = {
            "name",
            "msg",
            "args",
            "created",
            "filename",
            "funcName",
            "levelname",
            "levelno",
            "lineno",
            "module",
            "msecs",
            "message",
            "pathname",
            "process",
            "processName",
            "relativeCreated",
            "thread",
            "threadName",
            "taskName",
            "exc_info",
            "exc_text",
            "stack_info",
            "asctime",
            "request",
            "response",
            "error",
        }
        for key, value in record.__dict__.items():
            if key not in standard_attrs:
                d[key] = value

        return d


LOGGING_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {"()": lambda: CustomJSONFormatter(fmt="%(asctime)s")},
    },
    "handlers": {
        "default": {
            "formatter": "standard",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        "httputils": {
            "handlers": ["default"],
            "level": "INFO",
            "propagate": False,
        },
    },
}


def configure_logging(level: str | None = None) -> None:
    """Apply `LOGGING_CONFIG`, optionally overriding the httputils log level.

    Args:
        level: Level name such as "DEBUG". Defaults to the configured INFO.
    """
    config = {**LOGGING_CONFIG, "loggers": {k: dict(v) for k, v in LOGGING_CONFIG["loggers"].items()}}
    if level is not None:
        config["loggers"]["httputils"]["level"] = level.upper()
    dictConfig(config)
