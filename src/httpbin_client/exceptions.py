"""Structured exception classes for the httpbin client."""

import json
from typing import Any, Dict, Optional


class HttpBinError(Exception):
    """Base exception for all httpbin client errors.

    This exception serves as the parent class for all errors raised by
    the client itself. Transport, cancellation and decoding errors are
    never wrapped and propagate as raised by httpx, asyncio and pydantic.

    :param message: Human-readable error message
    :param code: Optional error code for programmatic handling
    :param details: Optional dictionary containing additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize the exception with message, code, and details."""
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format.

        :return: Dictionary containing error code, message, and details
        """
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self) -> str:
        """Convert exception to JSON string.

        :return: JSON-encoded string representation of the exception
        """
        return json.dumps(self.to_dict())


class EncodingError(HttpBinError):
    """Raised when a request body cannot be encoded as JSON.

    :param message: Description of the encoding failure
    :param body_type: Optional name of the type that failed to encode
    """

    def __init__(self, message: str, body_type: Optional[str] = None):
        """Initialize encoding error with message and optional body type."""
        details = {}
        if body_type:
            details["body_type"] = body_type
        super().__init__(message=message, code="ENCODING_ERROR", details=details)


class APIError(HttpBinError):
    """Raised for non-success API responses.

    Only raised when status classification is enabled on the client
    options; otherwise non-success responses are returned unclassified.

    :param message: Description of the API error
    :param status_code: Optional HTTP status code from the API response
    :param response_body: Optional response body from the failed request
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
    ):
        """Initialize API error with message and optional response details."""
        details: Dict[str, Any] = {}
        if status_code:
            details["status_code"] = status_code
        if response_body:
            details["response_body"] = response_body
        super().__init__(message=message, code="API_ERROR", details=details)
        self.status_code = status_code
        self.response_body = response_body


class ClientError(APIError):
    """Raised for 4xx responses."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
    ):
        super().__init__(message, status_code=status_code, response_body=response_body)
        self.code = "CLIENT_ERROR"


class RateLimitError(ClientError):
    """Raised for 429 responses.

    :param message: Description of the rate limit error
    :param retry_after: Optional seconds to wait, from the Retry-After header
    """

    def __init__(
        self,
        message: str,
        retry_after: Optional[int] = None,
        response_body: Optional[str] = None,
    ):
        """Initialize rate limit error with message and optional retry hint."""
        super().__init__(message, status_code=429, response_body=response_body)
        self.code = "RATE_LIMIT_ERROR"
        self.retry_after = retry_after
        if retry_after is not None:
            self.details["retry_after"] = retry_after


class ServerError(APIError):
    """Raised for 5xx responses."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
    ):
        super().__init__(message, status_code=status_code, response_body=response_body)
        self.code = "SERVER_ERROR"
