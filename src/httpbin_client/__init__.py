"""httpbin API client package.

This package provides a typed async client for an httpbin service,
with authorization header injection, API versioning and JSON
(de)serialization.

:var __version__: Current package version
:type __version__: str
"""

from .client import API_VERSION, UA_VERSION, Client
from .config import Authorization, Opts, Settings
from .models import Headers, HTTPBin, HTTPBinBody
from .services import HTTPMethodsService
from .utils.http import Response

__version__ = "1.0.0"

__all__ = [
    "API_VERSION",
    "UA_VERSION",
    "Authorization",
    "Client",
    "Headers",
    "HTTPBin",
    "HTTPBinBody",
    "HTTPMethodsService",
    "Opts",
    "Response",
    "Settings",
]
