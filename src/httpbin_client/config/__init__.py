"""Configuration for the httpbin client."""

from .settings import (
    DEFAULT_AUTHORIZATION_TOKEN_PREFIX,
    Authorization,
    Opts,
    Settings,
)

__all__ = [
    "DEFAULT_AUTHORIZATION_TOKEN_PREFIX",
    "Authorization",
    "Opts",
    "Settings",
]
