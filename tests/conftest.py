import json
import sys
from pathlib import Path

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from httpbin_client import Authorization, Client, Opts  # noqa: E402


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "asyncio: mark test to run in an asyncio event loop"
    )
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep HTTPBIN_* variables and stray .env files out of the tests."""
    for key in [
        "HTTPBIN_HOST",
        "HTTPBIN_VERSION",
        "HTTPBIN_TOKEN",
        "HTTPBIN_AUTH_PREFIX",
        "HTTPBIN_DEBUG",
        "HTTPBIN_HTTP2",
        "HTTPBIN_TIMEOUT",
        "HTTPBIN_RAISE_FOR_STATUS",
        "HTTPBIN_LOG_LEVEL",
    ]:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


def canonical_header(name: str) -> str:
    return "-".join(part.capitalize() for part in name.split("-"))


def httpbin_echo(request: httpx.Request) -> httpx.Response:
    """Answer like httpbin: echo headers (Title-Case), URL, args and body."""
    payload = {
        "args": dict(request.url.params),
        "headers": {canonical_header(k): v for k, v in request.headers.items()},
        "origin": "127.0.0.1",
        "url": str(request.url),
    }
    if request.method != "GET":
        data = request.content.decode("utf-8")
        try:
            parsed = json.loads(data) if data else None
        except ValueError:
            parsed = None
        payload.update({"data": data, "json": parsed, "form": {}, "files": {}})
    return httpx.Response(200, json=payload)


@pytest.fixture
def echo_handler():
    return httpbin_echo


@pytest.fixture
def make_client():
    """Build a Client whose transport is served by ``handler``."""

    def _make(handler=httpbin_echo, **opts_kwargs):
        opts_kwargs.setdefault("host", "http://localhost:8085")
        token = opts_kwargs.pop("token", None)
        if token is not None:
            opts_kwargs["authorization"] = Authorization(token=token)
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return Client(Opts(**opts_kwargs), http_client=http_client)

    return _make
