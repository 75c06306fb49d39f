"""HTTP client for the httpbin API.

This module provides the :class:`Client` that manages communication with
an httpbin service. It builds authenticated, versioned requests, sends
them through an ``httpx.AsyncClient`` and decodes JSON responses into
caller-supplied destination types.

Examples:
    >>> opts = Opts(host="http://localhost:8085",
    ...             authorization=Authorization(token="some-secure-token"))
    >>> async with Client(opts) as client:
    ...     result = await client.http_methods.get()
"""

import asyncio
import json
import logging
import platform
import sys
from typing import Any, Optional

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic_core import PydanticSerializationError, to_json

from .config.settings import Opts, Settings
from .exceptions import EncodingError
from .services.http_methods import HTTPMethodsImpl, HTTPMethodsService
from .utils.http import Response, build_http_client

logger = logging.getLogger(__name__)

API_VERSION = "2.27"
"""API version in use by this client, sent as ``X-Api-Version``."""

UA_VERSION = "1.0.0"
"""Library version reported in the User-Agent so usage can be tracked."""

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


def default_user_agent() -> str:
    return (
        f"sgen/HttpBin {UA_VERSION}; Python ({platform.python_version()}) "
        f"[{platform.machine()}-{sys.platform}]"
    )


class Client:
    """Manages communication with the httpbin API.

    :param opts: Client options (host, version, authorization, debug)
    :type opts: Opts
    :param http_client: Optional HTTP client used to send requests. By
        default a client with bounded timeouts is built, with request
        logging in debug mode. An injected client is used as-is and is
        not closed by :meth:`aclose`.
    :type http_client: Optional[httpx.AsyncClient]
    """

    def __init__(self, opts: Opts, http_client: Optional[httpx.AsyncClient] = None):
        self.options = opts
        self.user_agent = default_user_agent()
        self._host = httpx.URL(opts.host)

        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = build_http_client(
                timeout=opts.timeout, debug=opts.debug, http2=opts.http2
            )
        self.http_client = http_client

        # Services used for talking with different parts of the API
        self.http_methods: HTTPMethodsService = HTTPMethodsImpl(self)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "Client":
        """Create a client from environment configuration.

        :param settings: Settings to use, loaded from the environment if None
        :type settings: Optional[Settings]
        :param http_client: Optional HTTP client to inject
        :type http_client: Optional[httpx.AsyncClient]
        :return: Configured client
        :rtype: Client
        """
        settings = settings or Settings()
        return cls(settings.to_opts(), http_client=http_client)

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client:
            await self.http_client.aclose()

    def _resolve_path(self, path: str) -> str:
        path = path.removeprefix("/")
        if self.options.version:
            return f"/{self.options.version}/{path}"
        return f"/{path}"

    def _encode_body(self, body: Any) -> bytes:
        try:
            if isinstance(body, BaseModel):
                return body.model_dump_json(by_alias=True, exclude_unset=True).encode(
                    "utf-8"
                )
            return to_json(body)
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise EncodingError(
                f"Unable to encode request body as JSON: {e}",
                body_type=type(body).__name__,
            ) from e

    def new_request(
        self, method: str, path: str, body: Any = None
    ) -> httpx.Request:
        """Create an authenticated API request that is ready to send.

        :param method: HTTP method
        :type method: str
        :param path: Request path relative to the host
        :type path: str
        :param body: Optional payload, serialized as JSON
        :type body: Any
        :return: Prepared request
        :rtype: httpx.Request
        :raises EncodingError: If the body cannot be encoded as JSON
        """
        url = self._host.copy_with(path=self._resolve_path(path))

        headers = {}
        # Only send Authorization when a token has been configured
        auth = self.options.authorization
        if auth.token:
            headers["Authorization"] = f"{auth.prefix} {auth.token}"
        headers["Accept"] = "application/json"
        headers["User-Agent"] = self.user_agent
        headers["X-Api-Version"] = API_VERSION

        content = None
        if body is not None:
            content = self._encode_body(body)
            headers["Content-Type"] = JSON_CONTENT_TYPE

        return self.http_client.build_request(
            method, url, headers=headers, content=content
        )

    async def do(self, request: httpx.Request, dest: Any = None) -> Response:
        """Send a prepared request and decode the response into ``dest``.

        ``dest`` may be a type understood by pydantic (a model class,
        ``dict``, ``list[...]``...) or a writable stream, in which case the
        raw body bytes are copied into it. With no destination the body
        is left undecoded.

        :param request: Request built by :meth:`new_request`
        :type request: httpx.Request
        :param dest: Destination type or writable stream
        :type dest: Any
        :return: Response wrapper; ``data`` holds the decoded payload
        :rtype: Response
        :raises asyncio.CancelledError: If the calling task was cancelled
            while the transport failed
        """
        try:
            resp = await self.http_client.send(request, stream=True)
        except httpx.RequestError as e:
            # A pending cancellation is more useful to the caller than the
            # transport error it caused.
            task = asyncio.current_task()
            if task is not None and task.cancelling():
                raise asyncio.CancelledError() from e
            raise

        try:
            response = Response(resp)
            if resp.status_code == httpx.codes.NO_CONTENT:
                return response

            if dest is not None and response.is_success():
                if _is_writer(dest):
                    async for chunk in resp.aiter_bytes():
                        dest.write(chunk)
                    response.data = dest
                    return response

                body = await resp.aread()
                if self.options.debug:
                    _log_pretty(body)
                if body.strip():
                    response.data = TypeAdapter(dest).validate_json(body)
                return response

            await resp.aread()
            if self.options.raise_for_status:
                response.raise_for_status()
            return response
        finally:
            await resp.aclose()


def _is_writer(dest: Any) -> bool:
    return not isinstance(dest, type) and callable(getattr(dest, "write", None))


def _log_pretty(body: bytes) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    try:
        pretty = json.dumps(json.loads(body), indent=4)
    except ValueError:
        logger.debug("Response body is not valid JSON: %r", body[:200])
        return
    logger.debug("Response body:\n%s", pretty)
