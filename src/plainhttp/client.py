"""HTTP/1.0 GET client on top of AnyIO.

Usage::

    req = HttpRequest.get("http://httpbin.io/get?x=1")
    response = await req.send()

    req = HttpRequest.init("httpbin.io", "/get?a=%2Fb", RequestParams(headers={"Accept": "*/*"}))
    response = await req.send()

Every request opens its own connection, sends once and reads until the server
closes. Nothing is shared between two HttpRequest objects, so they can be sent
concurrently from the same task group.
"""

from __future__ import annotations

import logging
from typing import Mapping

from .config import ClientConfig
from .request import Method, RequestParams, build_request
from .response import HttpResponse, parse_response
from .target import Target
from .transport import connect, read_to_end, write_all


logger = logging.getLogger(__name__)


class HttpRequest:
    """A single request to a single target.

    ``request_bytes`` and ``response_bytes`` hold the raw wire data of the last
    ``send()`` for inspection; both are None before that.
    """

    def __init__(
        self,
        target: Target,
        params: RequestParams | None = None,
        *,
        config: ClientConfig | None = None,
    ):
        self.target = target
        self.params = params or RequestParams()
        self.config = config or ClientConfig()
        self.request_bytes: bytes | None = None
        self.response_bytes: bytes | None = None

    @classmethod
    def request(
        cls,
        url: str,
        params: RequestParams | None = None,
        *,
        config: ClientConfig | None = None,
    ) -> "HttpRequest":
        """Create a request from a full ``http://`` URL."""
        return cls(Target.from_url(url), params, config=config)

    @classmethod
    def get(cls, url: str, *, config: ClientConfig | None = None) -> "HttpRequest":
        return cls.request(url, RequestParams(method=Method.GET), config=config)

    @classmethod
    def init(
        cls,
        host: str,
        path: str,
        params: RequestParams | None = None,
        *,
        config: ClientConfig | None = None,
    ) -> "HttpRequest":
        """Create a request from a host and a percent-encoded path (query included)."""
        return cls(Target.from_host_path(host, path), params, config=config)

    @property
    def port(self) -> int:
        return self.config.default_port if self.target.port is None else self.target.port

    def build(self) -> bytes:
        self.request_bytes = build_request(self.target, self.params)
        return self.request_bytes

    async def send(self) -> HttpResponse:
        """Send the request and return the parsed response.

        Raises:
            RequestBuildError: before anything is sent.
            TransportError: the connection failed (see its subclasses).
            ParseError: the server answered with something unparsable.
        """
        data = self.build()

        async with connect(self.target.host, self.port, config=self.config) as stream:
            await write_all(stream, data)
            self.response_bytes = await read_to_end(stream, config=self.config)

        response = parse_response(self.response_bytes)
        logger.debug(
            "%s %s -> %d %s", self.params.method, self.target.url, response.status_code, response.reason
        )
        return response

    def __repr__(self) -> str:
        return f"HttpRequest({self.params.method} {self.target.url})"


async def fetch(
    url: str,
    headers: Mapping[str, str] | None = None,
    *,
    config: ClientConfig | None = None,
) -> HttpResponse:
    """GET ``url`` and return the parsed response."""
    return await HttpRequest.request(url, RequestParams(headers=headers), config=config).send()
