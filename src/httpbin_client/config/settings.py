"""Configuration settings for the httpbin client.

This module defines the environment-driven settings and the option models
a :class:`~httpbin_client.client.Client` is built from. Settings are loaded
from ``HTTPBIN_``-prefixed environment variables and ``.env`` files.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_AUTHORIZATION_TOKEN_PREFIX = "Bearer"
"""Default scheme for JWT style authentication, overridable per client."""


class Authorization(BaseModel):
    """Authorization token and scheme used to build the header.

    :param prefix: Token scheme, ``Bearer`` when left empty
    :type prefix: str
    :param token: The authentication token, usually a JWT
    :type token: str
    """

    prefix: str = DEFAULT_AUTHORIZATION_TOKEN_PREFIX
    token: str = ""

    @field_validator("prefix")
    @classmethod
    def default_prefix(cls, v: Optional[str]) -> str:
        """Fall back to the default scheme for an empty prefix."""
        return v or DEFAULT_AUTHORIZATION_TOKEN_PREFIX


class Opts(BaseModel):
    """Client options.

    :param host: Base URL for requests
    :type host: str
    :param debug: Log http calls and pretty-print response bodies
    :type debug: bool
    :param version: Optional path segment for versioned APIs, ex: ``v1``
    :type version: str
    :param authorization: Token and prefix for the Authorization header
    :type authorization: Authorization
    :param raise_for_status: Raise structured errors for non-2xx responses
    :type raise_for_status: bool
    """

    host: str
    debug: bool = False
    version: str = ""
    authorization: Authorization = Field(default_factory=Authorization)
    raise_for_status: bool = False
    http2: bool = False
    timeout: float = 10.0


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    :param host: Base URL of the httpbin service
    :type host: str
    :param version: Optional versioned path segment
    :type version: Optional[str]
    :param token: Optional bearer token
    :type token: Optional[str]
    :param auth_prefix: Optional override of the token scheme
    :type auth_prefix: Optional[str]
    :param debug: Enable request/response tracing
    :type debug: bool
    :param log_level: Logging level for the application
    :type log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    """

    model_config = SettingsConfigDict(
        env_prefix="HTTPBIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field("https://httpbin.org", description="httpbin base URL")
    version: Optional[str] = Field(None, description="Versioned path segment")
    token: Optional[str] = Field(None, description="Authorization token")
    auth_prefix: Optional[str] = Field(
        None, description="Authorization scheme (defaults to Bearer)"
    )
    debug: bool = Field(False, description="Log http calls")
    http2: bool = Field(False, description="Negotiate HTTP/2 when h2 is installed")
    timeout: float = Field(10.0, description="Request timeout in seconds")
    raise_for_status: bool = Field(
        False, description="Raise structured errors for non-2xx responses"
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Logging level"
    )

    @field_validator("host")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def to_opts(self) -> Opts:
        """Build client options from these settings.

        :return: Client options
        :rtype: Opts
        """
        return Opts(
            host=self.host,
            debug=self.debug,
            version=self.version or "",
            authorization=Authorization(
                prefix=self.auth_prefix or "",
                token=self.token or "",
            ),
            raise_for_status=self.raise_for_status,
            http2=self.http2,
            timeout=self.timeout,
        )
