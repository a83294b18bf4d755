"""Foundation utilities for shared infrastructure components.

This package provides shared utilities including:
- Exception hierarchy carrying URL and attempt count
- HTTP session, timeout and URL helpers
- Structured JSON logging and the LoggerMixin
- Timeout-only retry loop
- JSON serialization of request and response bodies
"""
