"""Command line entry point for the httpbin client.

Examples
--------
.. code-block:: bash

    # GET /get against a local httpbin with a bearer token
    httpbin-client --host http://localhost:8085 --token some-secure-token --debug

    # POST /post with a JSON body
    httpbin-client post --data '{"name": "value"}'
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

import httpx
from pydantic import ValidationError

from .client import Client
from .config.settings import Settings
from .exceptions import HttpBinError
from .utils.security import setup_secure_logging

logger = logging.getLogger(__name__)

METHODS = ("get", "post", "put", "patch", "delete")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="httpbin API client")
    parser.add_argument("method", nargs="?", choices=METHODS, default="get")
    parser.add_argument("--host", help="Base URL (env: HTTPBIN_HOST)")
    parser.add_argument("--version", help="Versioned path segment, ex: v1")
    parser.add_argument("--token", help="Authorization token")
    parser.add_argument("--prefix", help="Authorization scheme (default: Bearer)")
    parser.add_argument("--data", help="JSON body for post/put/patch/delete")
    parser.add_argument(
        "--debug", action="store_true", help="Log http calls and response bodies"
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Overlay command line flags onto environment settings."""
    settings = Settings()
    overrides = {
        "host": args.host,
        "version": args.version,
        "token": args.token,
        "auth_prefix": args.prefix,
    }
    update = {k: v for k, v in overrides.items() if v is not None}
    if args.debug:
        update["debug"] = True
        update["log_level"] = "DEBUG"
    return settings.model_copy(update=update)


async def run(args: argparse.Namespace, settings: Settings) -> str:
    body = json.loads(args.data) if args.data is not None else None
    async with Client.from_settings(settings) as client:
        service = client.http_methods
        if args.method == "get":
            result = await service.get()
        elif args.method == "delete":
            result = await service.delete(body)
        else:
            result = await getattr(service, args.method)(body)
    return result.model_dump_json(by_alias=True, exclude_none=True, indent=2)


def main(argv: Optional[List[str]] = None) -> int:
    """Run a single httpbin call and print the decoded response.

    :param argv: Arguments, ``sys.argv[1:]`` when None
    :type argv: Optional[List[str]]
    :return: Process exit code
    :rtype: int
    """
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)
    setup_secure_logging(level=settings.log_level)

    if args.data is not None and args.method == "get":
        logger.warning("--data is ignored for GET requests")

    try:
        output = asyncio.run(run(args, settings))
    except json.JSONDecodeError as e:
        logger.error("--data is not valid JSON: %s", e)
        return 2
    except (httpx.HTTPError, HttpBinError, ValidationError) as e:
        logger.error("Error calling %s: %s", args.method.upper(), e)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
