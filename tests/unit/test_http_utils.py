"""Unit tests for HTTP utilities.

This module tests default client construction, the logging
transport and the response wrapper.
"""

import asyncio
import logging
import ssl
from unittest.mock import patch

import httpx
import pytest

from httpbin_client.exceptions import (
    APIError,
    ClientError,
    RateLimitError,
    ServerError,
)
from httpbin_client.utils.http import (
    LoggingTransport,
    Response,
    build_http_client,
    create_limits,
    create_ssl_context,
    create_timeout,
)


def test_create_timeout_defaults():
    timeout = create_timeout()
    assert timeout.connect == 10.0
    assert timeout.read == 10.0
    assert timeout.write == 10.0
    assert timeout.pool == 10.0


def test_create_limits_defaults():
    limits = create_limits()
    assert limits.max_keepalive_connections == 100
    assert limits.max_connections is None
    assert limits.keepalive_expiry == 90.0


def test_ssl_context_requires_tls12():
    context = create_ssl_context()
    assert context.minimum_version == ssl.TLSVersion.TLSv1_2
    assert context.verify_mode == ssl.CERT_REQUIRED


def test_build_http_client_plain():
    client = build_http_client(timeout=3.0)
    assert client.timeout.read == 3.0
    assert not isinstance(client._transport, LoggingTransport)
    asyncio.run(client.aclose())


def test_build_http_client_debug_wraps_transport():
    client = build_http_client(debug=True)
    assert isinstance(client._transport, LoggingTransport)
    asyncio.run(client.aclose())


def test_build_http_client_debug_keeps_environment_proxies(monkeypatch):
    for key in (
        "ALL_PROXY", "all_proxy", "HTTP_PROXY", "http_proxy", "https_proxy", "no_proxy"
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("HTTPS_PROXY", "http://proxy.local:3128")
    monkeypatch.setenv("NO_PROXY", "localhost")

    client = build_http_client(debug=True)

    mounts = {pattern.pattern: transport for pattern, transport in client._mounts.items()}
    assert isinstance(mounts["https://"], LoggingTransport)
    assert isinstance(mounts["all://localhost"], LoggingTransport)
    assert "http://" not in mounts
    asyncio.run(client.aclose())


def test_http2_without_h2_falls_back(caplog):
    with patch(
        "httpbin_client.utils.http.client_manager._http2_available",
        return_value=False,
    ):
        with caplog.at_level(logging.WARNING):
            client = build_http_client(http2=True)
    assert "falling back to HTTP/1.1" in caplog.text
    asyncio.run(client.aclose())


@pytest.mark.asyncio
async def test_logging_transport_redacts_authorization(caplog):
    inner = httpx.MockTransport(lambda request: httpx.Response(200, json={"ok": True}))
    async with httpx.AsyncClient(transport=LoggingTransport(inner)) as client:
        with caplog.at_level(
            logging.DEBUG, logger="httpbin_client.utils.http.logging_transport"
        ):
            response = await client.get(
                "http://localhost:8085/get",
                headers={"Authorization": "Bearer some-secure-token"},
            )

    assert response.status_code == 200
    assert "--> GET http://localhost:8085/get" in caplog.text
    assert "<-- 200 GET http://localhost:8085/get" in caplog.text
    assert "some-secure-token" not in caplog.text
    assert "<REDACTED:length=24>" in caplog.text


@pytest.mark.asyncio
async def test_logging_transport_reraises_transport_errors(caplog):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    transport = LoggingTransport(httpx.MockTransport(refuse))
    async with httpx.AsyncClient(transport=transport) as client:
        with caplog.at_level(logging.DEBUG):
            with pytest.raises(httpx.ConnectError):
                await client.get("http://localhost:8085/get")
    assert "failed after" in caplog.text


def _response(status, **kwargs):
    request = httpx.Request("GET", "http://localhost:8085/get")
    return Response(httpx.Response(status, request=request, **kwargs))


def test_response_status_helpers():
    assert _response(200).is_success()
    assert _response(404).is_client_error()
    assert _response(502).is_server_error()
    assert not _response(302).is_success()


def test_response_raise_for_status_passes_success():
    response = _response(201)
    assert response.raise_for_status() is response


def test_response_raise_for_status_classifies():
    with pytest.raises(ClientError) as exc_info:
        _response(404, text="missing").raise_for_status()
    assert exc_info.value.code == "CLIENT_ERROR"
    assert exc_info.value.details == {"status_code": 404, "response_body": "missing"}
    assert "GET http://localhost:8085/get returned 404" in str(exc_info.value)

    with pytest.raises(ServerError):
        _response(500).raise_for_status()

    # both inherit the common API error
    assert issubclass(ClientError, APIError)
    assert issubclass(ServerError, APIError)


def test_response_retry_after_ignores_http_dates():
    with pytest.raises(RateLimitError) as exc_info:
        _response(
            429, headers={"Retry-After": "Wed, 21 Oct 2015 07:28:00 GMT"}
        ).raise_for_status()
    assert exc_info.value.retry_after is None
