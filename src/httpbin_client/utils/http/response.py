"""Response wrapper returned by :meth:`Client.do`.

This module wraps ``httpx.Response`` objects with convenient status
checks, the decoded payload and an opt-in mapping of non-success
statuses onto the structured errors in :mod:`httpbin_client.exceptions`.
"""

from typing import Any, Optional

import httpx

from ...exceptions import APIError, ClientError, RateLimitError, ServerError


class Response:
    """Wrapper for HTTP responses with convenient access methods.

    :param response: The underlying httpx.Response object
    :type response: httpx.Response
    :param data: Payload decoded from the body, if any
    :type data: Any
    """

    def __init__(self, response: httpx.Response, data: Any = None):
        self.response = response
        self.data = data

    @property
    def status_code(self) -> int:
        """Get the HTTP status code of the response.

        :return: HTTP status code
        :rtype: int
        """
        return self.response.status_code

    @property
    def headers(self) -> httpx.Headers:
        """Get the response headers.

        :return: Response headers
        :rtype: httpx.Headers
        """
        return self.response.headers

    @property
    def text(self) -> str:
        """Get the response body as text.

        Not available when the body was streamed into a writer.

        :return: Response body text
        :rtype: str
        """
        return self.response.text

    def is_success(self) -> bool:
        """Check if the response indicates success (2xx status code)."""
        return 200 <= self.status_code < 300

    def is_client_error(self) -> bool:
        """Check if the response indicates a client error (4xx status code)."""
        return 400 <= self.status_code < 500

    def is_server_error(self) -> bool:
        """Check if the response indicates a server error (5xx status code)."""
        return 500 <= self.status_code < 600

    def raise_for_status(self) -> "Response":
        """Raise the structured error matching a non-2xx status.

        The body must have been read.

        :return: This response when the status is not an error
        :rtype: Response
        :raises RateLimitError: For 429 responses
        :raises ClientError: For other 4xx responses
        :raises ServerError: For 5xx responses
        """
        status = self.status_code
        if status < 400:
            return self
        body = self.response.text or None
        message = f"{self.response.request.method} {self.response.url} returned {status}"
        if status == 429:
            raise RateLimitError(
                message,
                retry_after=_parse_retry_after(self.headers.get("Retry-After")),
                response_body=body,
            )
        if self.is_client_error():
            raise ClientError(message, status_code=status, response_body=body)
        if self.is_server_error():
            raise ServerError(message, status_code=status, response_body=body)
        raise APIError(message, status_code=status, response_body=body)

    def __repr__(self) -> str:
        return f"<Response [{self.status_code}]>"


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None
