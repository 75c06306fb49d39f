"""Default HTTP client construction.

This module builds the ``httpx.AsyncClient`` a
:class:`~httpbin_client.client.Client` uses when the caller does not
inject one: bounded timeouts, a keep-alive pool, TLS 1.2 or newer,
proxies taken from the environment and optional HTTP/2.
"""

import logging
import ssl
import urllib.request
from typing import Dict, Optional

import httpx

from .logging_transport import LoggingTransport

logger = logging.getLogger(__name__)


def create_timeout(
    connect: float = 10.0,
    read: float = 10.0,
    write: float = 10.0,
    pool: float = 10.0,
) -> httpx.Timeout:
    """Create a timeout configuration object.

    :param connect: Connection timeout in seconds
    :type connect: float
    :param read: Read timeout in seconds
    :type read: float
    :param write: Write timeout in seconds
    :type write: float
    :param pool: Pool timeout in seconds
    :type pool: float
    :return: Configured timeout object
    :rtype: httpx.Timeout
    """
    return httpx.Timeout(connect=connect, read=read, write=write, pool=pool)


def create_limits(
    max_keepalive_connections: int = 100,
    max_connections: Optional[int] = None,
    keepalive_expiry: float = 90.0,
) -> httpx.Limits:
    """Create a connection limits configuration object.

    :param max_keepalive_connections: Maximum number of idle keep-alive connections
    :type max_keepalive_connections: int
    :param max_connections: Maximum total number of connections, unbounded if None
    :type max_connections: Optional[int]
    :param keepalive_expiry: Idle connection expiry time in seconds
    :type keepalive_expiry: float
    :return: Configured limits object
    :rtype: httpx.Limits
    """
    return httpx.Limits(
        max_keepalive_connections=max_keepalive_connections,
        max_connections=max_connections,
        keepalive_expiry=keepalive_expiry,
    )


def create_ssl_context() -> ssl.SSLContext:
    """Create a verifying SSL context that refuses anything below TLS 1.2.

    :return: SSL context
    :rtype: ssl.SSLContext
    """
    context = ssl.create_default_context()
    context.minimum_version = ssl.TLSVersion.TLSv1_2
    return context


def _http2_available() -> bool:
    try:
        import h2  # type: ignore  # noqa: F401
    except ImportError:
        return False
    return True


def _environment_proxies() -> Dict[str, Optional[str]]:
    """Map httpx mount patterns to the proxies configured in the environment.

    ``None`` marks hosts listed in ``NO_PROXY`` that connect directly.
    """
    proxies: Dict[str, Optional[str]] = {}
    env = urllib.request.getproxies()
    for scheme in ("http", "https", "all"):
        url = env.get(scheme)
        if url:
            proxies[f"{scheme}://"] = url if "://" in url else f"http://{url}"

    for host in env.get("no", "").split(","):
        host = host.strip()
        if host == "*":
            return {}
        if host.startswith("."):
            proxies[f"all://*{host}"] = None
        elif host and "/" not in host:
            proxies[f"all://{host}"] = None
    return proxies


def build_http_client(
    timeout: float = 10.0,
    debug: bool = False,
    http2: bool = False,
) -> httpx.AsyncClient:
    """Build the default HTTP client.

    In debug mode the connection transport is wrapped in a
    :class:`LoggingTransport` so every request and response is traced.

    :param timeout: Timeout applied to connect, read, write and pool waits
    :type timeout: float
    :param debug: Wrap the transport with request/response logging
    :type debug: bool
    :param http2: Negotiate HTTP/2 when the ``h2`` package is installed
    :type http2: bool
    :return: Configured HTTP client
    :rtype: httpx.AsyncClient
    """
    if http2 and not _http2_available():
        logger.warning(
            "HTTP/2 requested but 'h2' package not installed; falling back to HTTP/1.1"
        )
        http2 = False

    verify = create_ssl_context()
    limits = create_limits()
    client_timeout = create_timeout(timeout, timeout, timeout, timeout)

    if debug:
        # httpx skips environment proxies once a transport is supplied, so
        # mount a logging transport per proxy pattern
        def logging_transport(proxy: Optional[str] = None) -> LoggingTransport:
            return LoggingTransport(
                httpx.AsyncHTTPTransport(
                    verify=verify, limits=limits, http2=http2, proxy=proxy
                )
            )

        mounts = {
            pattern: logging_transport(proxy)
            for pattern, proxy in _environment_proxies().items()
        }
        client = httpx.AsyncClient(
            transport=logging_transport(),
            mounts=mounts,
            timeout=client_timeout,
        )
    else:
        client = httpx.AsyncClient(
            verify=verify,
            limits=limits,
            http2=http2,
            timeout=client_timeout,
            trust_env=True,
        )
    logger.debug(
        "Created HTTP client (timeout=%.1fs, http2=%s, debug=%s)",
        timeout,
        http2,
        debug,
    )
    return client
