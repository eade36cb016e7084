"""Response Parser: HTTP/1.0 responses from a fully buffered byte string.

The parse is a short pipeline of steps (boundary search, status line, header
pairs, body slice). Each step returns either its value or a ``ParseError``
instance, and the first error ends the pipeline; ``try_parse_response``
hands that error back as a value while ``parse_response`` raises it.

Parsed responses own their data: headers are ``str`` and the body is a
``bytes`` copy, so the source buffer may be reused once parsing returns.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, TypeVar

from .errors import (
    BoundaryNotFoundError,
    InvalidHeaderPairError,
    InvalidResponseError,
    InvalidStatusCodeError,
    ParseError,
    UnsupportedVersionError,
)
from .wire import HTTP_VERSION, WIRE_ENCODING


T = TypeVar("T")
Result = T | ParseError
HeaderMap = dict[str, str]

BOUNDARY = b"\r\n\r\n"
LINE_SEPARATOR = "\r\n"
HEADER_SEPARATOR = ": "
STATUS_CODE_MAX = 65535


@dataclass(frozen=True, slots=True)
class StatusLine:
    version: str
    status_code: int
    reason: str


@dataclass(frozen=True, slots=True)
class HttpResponse:
    """A parsed response. Usually returned by ``HttpRequest.send()``."""

    status_code: int
    reason: str
    headers: HeaderMap = field(default_factory=dict)
    body: bytes = b""

    def text(self, encoding: str = "utf-8") -> str:
        return self.body.decode(encoding)

    def json(self) -> Any:
        """Decode the body as JSON.

        For anything fancier, call ``json.loads`` on ``body`` directly.
        """
        return json.loads(self.body)

    def __str__(self) -> str:
        lines = [f"HttpResponse {self.status_code} {self.reason}", "  headers:"]
        lines.extend(f"    {name}: {value}" for name, value in self.headers.items())
        lines.append(f"  body: {self.body!r}")
        return "\n".join(lines)


def find_boundary(data: bytes) -> Result[int]:
    """Return the index just past the first CRLF CRLF in ``data``."""
    idx = data.find(BOUNDARY)
    if idx == -1:
        return BoundaryNotFoundError("no CRLF CRLF between headers and body")
    return idx + len(BOUNDARY)


def parse_status_line(line: str) -> Result[StatusLine]:
    """Split ``HTTP/1.0 200 OK`` into its three fields.

    The reason text is everything after the second space and may itself
    contain spaces, or be empty.
    """
    version, sep, rest = line.partition(" ")
    if not sep:
        return InvalidResponseError(f"status line has no status code: {line!r}")
    code, _, reason = rest.partition(" ")

    if version != HTTP_VERSION:
        return UnsupportedVersionError(f"unsupported HTTP version {version!r}, expected {HTTP_VERSION}")

    status_code = parse_status_code(code)
    if isinstance(status_code, ParseError):
        return status_code
    return StatusLine(version=version, status_code=status_code, reason=reason)


def parse_status_code(token: str) -> Result[int]:
    # int() alone would accept signs, whitespace and underscores
    if not (token.isascii() and token.isdigit()):
        return InvalidStatusCodeError(f"status code is not a number: {token!r}")
    value = int(token)
    if value > STATUS_CODE_MAX:
        return InvalidStatusCodeError(f"status code out of range: {token!r}")
    return value


def parse_header_line(line: str) -> Result[tuple[str, str]]:
    name, sep, value = line.partition(HEADER_SEPARATOR)
    if not sep:
        return InvalidHeaderPairError(f"header line has no ': ' separator: {line!r}")
    return name, value


def parse_headers(lines: list[str]) -> Result[HeaderMap]:
    """Collect header pairs; a repeated name keeps its last value."""
    headers: HeaderMap = {}
    for line in lines:
        pair = parse_header_line(line)
        if isinstance(pair, ParseError):
            return pair
        name, value = pair
        headers[name] = value
    return headers


def try_parse_response(data: bytes) -> HttpResponse | ParseError:
    """Parse ``data`` and return either the response or the parse failure."""
    data = bytes(data)
    boundary = find_boundary(data)
    if isinstance(boundary, ParseError):
        return boundary

    head = data[: boundary - len(BOUNDARY)].decode(WIRE_ENCODING)
    status_line, *header_lines = head.split(LINE_SEPARATOR)

    status = parse_status_line(status_line)
    if isinstance(status, ParseError):
        return status

    headers = parse_headers(header_lines)
    if isinstance(headers, ParseError):
        return headers

    return HttpResponse(
        status_code=status.status_code,
        reason=status.reason,
        headers=headers,
        body=bytes(data[boundary:]),
    )


def parse_response(data: bytes) -> HttpResponse:
    """Parse a complete HTTP/1.0 response.

    Raises:
        ParseError: one of its subclasses, naming what was wrong.
    """
    match try_parse_response(data):
        case ParseError() as error:
            raise error
        case response:
            return response
