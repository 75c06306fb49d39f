"""Service groups of the httpbin API."""

from .http_methods import HTTPMethodsImpl, HTTPMethodsService

__all__ = ["HTTPMethodsImpl", "HTTPMethodsService"]
