"""Minimal HTTP/1.0 client on AnyIO."""

from .client import HttpRequest, fetch
from .config import ClientConfig
from .errors import (
    BoundaryNotFoundError,
    ConnectError,
    HostTooLongError,
    HttpClientError,
    InvalidAddressError,
    InvalidHeaderPairError,
    InvalidResponseError,
    InvalidStatusCodeError,
    MissingHostError,
    ParseError,
    ReadError,
    RequestBuildError,
    ResponseTooLargeError,
    TargetError,
    TransportError,
    UnsupportedVersionError,
    WriteError,
)
from .request import Method, RequestParams, build_request
from .response import HttpResponse, parse_response, try_parse_response
from .target import Target

__all__ = [
    # Client
    "HttpRequest",
    "fetch",
    "ClientConfig",
    # Core
    "Target",
    "Method",
    "RequestParams",
    "build_request",
    "HttpResponse",
    "parse_response",
    "try_parse_response",
    # Errors
    "HttpClientError",
    "TargetError",
    "MissingHostError",
    "HostTooLongError",
    "InvalidAddressError",
    "RequestBuildError",
    "ParseError",
    "BoundaryNotFoundError",
    "InvalidResponseError",
    "UnsupportedVersionError",
    "InvalidHeaderPairError",
    "InvalidStatusCodeError",
    "TransportError",
    "ConnectError",
    "WriteError",
    "ReadError",
    "ResponseTooLargeError",
]
