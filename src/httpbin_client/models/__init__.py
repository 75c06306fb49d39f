"""httpbin client models package.

Pydantic models for the payloads exchanged with the httpbin service.
"""

from .httpbin import BaseHttpBinModel, Headers, HTTPBin, HTTPBinBody

__all__ = [
    "BaseHttpBinModel",
    "Headers",
    "HTTPBin",
    "HTTPBinBody",
]
