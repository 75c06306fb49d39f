"""Transport wrapper that traces every request and response.

Used by the default client in debug mode. Authorization and other
credential headers are redacted before they reach the log.
"""

import logging
import time
from typing import Optional

import httpx

from ..security import sanitize_headers, sanitize_url

logger = logging.getLogger(__name__)


class LoggingTransport(httpx.AsyncBaseTransport):
    """Wrap another async transport and log its traffic at DEBUG.

    :param transport: Transport that actually performs the request
    :type transport: httpx.AsyncBaseTransport
    :param log: Logger to write to, this module's logger by default
    :type log: Optional[logging.Logger]
    """

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport,
        log: Optional[logging.Logger] = None,
    ):
        self.transport = transport
        self.log = log or logger

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        url = sanitize_url(str(request.url))
        self.log.debug("--> %s %s", request.method, url)
        self.log.debug("    Headers: %s", sanitize_headers(request.headers))

        start = time.monotonic()
        try:
            response = await self.transport.handle_async_request(request)
        except httpx.TransportError as e:
            self.log.debug(
                "<-- %s %s failed after %.3fs: %s",
                request.method,
                url,
                time.monotonic() - start,
                e,
            )
            raise

        self.log.debug(
            "<-- %d %s %s (%.3fs)",
            response.status_code,
            request.method,
            url,
            time.monotonic() - start,
        )
        self.log.debug("    Headers: %s", sanitize_headers(response.headers))
        return response

    async def aclose(self) -> None:
        await self.transport.aclose()
