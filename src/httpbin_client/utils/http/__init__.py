"""HTTP utilities public API (barrel module).

This package provides:
- Default HTTP client construction (timeouts, pool limits, TLS floor)
- A logging transport for debug tracing
- The response wrapper returned by the client

Recommended import pattern for consumers:
    from httpbin_client.utils.http import build_http_client, Response
"""

from .client_manager import (
    build_http_client,
    create_limits,
    create_ssl_context,
    create_timeout,
)
from .logging_transport import LoggingTransport
from .response import Response

__all__ = [
    "build_http_client",
    "create_limits",
    "create_ssl_context",
    "create_timeout",
    "LoggingTransport",
    "Response",
]
