"""httpbin "HTTP methods" endpoints.

Each operation issues a single request against a fixed path and decodes
the echoed response. Errors raised by the client propagate unchanged.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

from ..models import HTTPBin, HTTPBinBody

if TYPE_CHECKING:
    from ..client import Client


class HTTPMethodsService(ABC):
    """Manages the interactions for httpbin http-methods."""

    @abstractmethod
    async def get(self) -> HTTPBin:
        """Issue ``GET /get``.

        :return: Echoed request headers and URL
        :rtype: HTTPBin
        """

    @abstractmethod
    async def post(self, body: Any) -> HTTPBinBody:
        """Issue ``POST /post`` with a JSON body."""

    @abstractmethod
    async def put(self, body: Any) -> HTTPBinBody:
        """Issue ``PUT /put`` with a JSON body."""

    @abstractmethod
    async def patch(self, body: Any) -> HTTPBinBody:
        """Issue ``PATCH /patch`` with a JSON body."""

    @abstractmethod
    async def delete(self, body: Any = None) -> HTTPBinBody:
        """Issue ``DELETE /delete``, optionally with a JSON body."""


class HTTPMethodsImpl(HTTPMethodsService):
    """Implements :class:`HTTPMethodsService` on top of a :class:`Client`."""

    def __init__(self, client: "Client"):
        self.client = client

    async def get(self) -> HTTPBin:
        # httpbin has a very simple get path
        request = self.client.new_request("GET", "/get")
        response = await self.client.do(request, HTTPBin)
        return response.data if response.data is not None else HTTPBin()

    async def post(self, body: Any) -> HTTPBinBody:
        return await self._send_body("POST", "/post", body)

    async def put(self, body: Any) -> HTTPBinBody:
        return await self._send_body("PUT", "/put", body)

    async def patch(self, body: Any) -> HTTPBinBody:
        return await self._send_body("PATCH", "/patch", body)

    async def delete(self, body: Any = None) -> HTTPBinBody:
        return await self._send_body("DELETE", "/delete", body)

    async def _send_body(
        self, method: str, path: str, body: Optional[Any]
    ) -> HTTPBinBody:
        request = self.client.new_request(method, path, body)
        response = await self.client.do(request, HTTPBinBody)
        return response.data if response.data is not None else HTTPBinBody()
