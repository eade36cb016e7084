"""Command line: ``python -m plainhttp http://host/path -H 'Accept: */*'``."""

from __future__ import annotations

import argparse
import logging
import sys

import anyio

from .client import HttpRequest
from .config import ClientConfig
from .errors import HttpClientError
from .request import RequestParams


def header_arg(value: str) -> tuple[str, str]:
    name, sep, rest = value.partition(":")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"expected 'Name: value', got {value!r}")
    return name.strip(), rest.strip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="plainhttp", description="Send an HTTP/1.0 GET request")
    parser.add_argument("url", type=str, help="http:// URL to fetch")
    parser.add_argument("--header", "-H", type=header_arg, action="append", default=[], help="extra request header, 'Name: value'")
    parser.add_argument("--timeout", "-t", type=float, default=30.0, help="connect and read timeout in seconds")
    parser.add_argument("--include", "-i", action="store_true", help="print the status line and headers")
    parser.add_argument("--debug", "-D", action="store_true", help="enable debug logging")
    return parser


async def run(args: argparse.Namespace) -> int:
    config = ClientConfig(connect_timeout=args.timeout, read_timeout=args.timeout)
    params = RequestParams(headers=dict(args.header) or None)
    try:
        response = await HttpRequest.request(args.url, params, config=config).send()
    except HttpClientError as e:
        print(f"plainhttp: {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    if args.include:
        print(f"HTTP/1.0 {response.status_code} {response.reason}")
        for name, value in response.headers.items():
            print(f"{name}: {value}")
        print()
    sys.stdout.buffer.write(response.body)
    sys.stdout.flush()
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    return anyio.run(run, args)


if __name__ == "__main__":
    sys.exit(main())
