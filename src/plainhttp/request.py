"""Request Builder: HTTP/1.0 request serialization.

Wire format::

    GET /path?query HTTP/1.0\\r\\n
    Host: example.com\\r\\n
    Name: value\\r\\n
    \\r\\n

Headers are written in the order the caller supplied them (dict insertion
order). A caller-supplied ``Host`` header is written as well, after the
synthesized one; duplicates are not removed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Mapping

from .errors import RequestBuildError
from .target import Target
from .wire import CRLF, HTTP_VERSION, WIRE_ENCODING


class Method(StrEnum):
    """Supported request methods."""

    GET = "GET"


@dataclass(frozen=True, slots=True)
class RequestParams:
    """What to send.

    ``headers`` is copied into a dict owned by the params on construction, so
    the caller may keep mutating (or reuse) its own mapping afterwards.
    """

    method: Method = Method.GET
    body: bytes | None = None
    headers: Mapping[str, str] | None = field(default=None)

    def __post_init__(self) -> None:
        if self.headers is not None:
            object.__setattr__(self, "headers", dict(self.headers))

    @property
    def header_items(self) -> list[tuple[str, str]]:
        return list(self.headers.items()) if self.headers else []


def request_target(target: Target) -> str:
    """Return the ``path[?query]`` part of the request line."""
    path = target.path or "/"
    if target.query is not None:
        return f"{path}?{target.query}"
    return path


def _encode(text: str, what: str) -> bytes:
    try:
        return text.encode(WIRE_ENCODING)
    except UnicodeEncodeError as e:
        raise RequestBuildError(f"{what} is not representable on the wire: {text!r}") from e


def build_request(target: Target, params: RequestParams | None = None) -> bytes:
    """Serialize a request for ``target`` to wire-format bytes.

    Raises:
        RequestBuildError: the method is not supported, or a header or the
            request line contains characters outside ISO-8859-1.
    """
    params = params or RequestParams()
    try:
        method = Method(params.method)
    except ValueError as e:
        raise RequestBuildError(f"unsupported method {params.method!r}") from e

    parts: list[bytes] = [
        _encode(f"{method} {request_target(target)} {HTTP_VERSION}", "request line"),
        CRLF,
        _encode(f"Host: {target.authority_host}", "host"),
        CRLF,
    ]
    for name, value in params.header_items:
        parts.append(_encode(f"{name}: {value}", f"header {name!r}"))
        parts.append(CRLF)
    parts.append(CRLF)

    # No Content-Length handling, the body goes out as-is.
    if params.body:
        parts.append(params.body)

    return b"".join(parts)
