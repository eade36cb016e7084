"""Error taxonomy shared by the builder, the parser and the transport."""


class HttpClientError(Exception):
    """Base class for every failure raised by plainhttp."""
    pass


# Target errors: raised while constructing a destination.

class TargetError(HttpClientError):
    """The destination could not be turned into a Target."""
    pass


class MissingHostError(TargetError):
    """The URL or address has no host component."""
    pass


class HostTooLongError(TargetError):
    """The host name exceeds the maximum host name length."""
    pass


class InvalidAddressError(TargetError):
    """The address string is malformed or uses an unsupported scheme."""
    pass


# Build errors

class RequestBuildError(HttpClientError):
    """The request could not be serialized to wire bytes."""
    pass


# Parse errors: any one of these aborts the whole parse.

class ParseError(HttpClientError):
    """The response buffer is not a valid HTTP/1.0 response."""
    pass


class BoundaryNotFoundError(ParseError):
    """No CRLF CRLF separates the headers from the body."""
    pass


class InvalidResponseError(ParseError):
    """The status line is missing the version or the status code."""
    pass


class UnsupportedVersionError(ParseError):
    """The server answered with a version other than HTTP/1.0."""
    pass


class InvalidHeaderPairError(ParseError):
    """A header line has no ': ' separator."""
    pass


class InvalidStatusCodeError(ParseError):
    """The status code is not an unsigned 16-bit integer."""
    pass


# Transport errors

class TransportError(HttpClientError):
    """The byte stream to the server failed."""
    pass


class ConnectError(TransportError):
    """The host is unreachable, unresolvable or refused the connection."""
    pass


class WriteError(TransportError):
    """The request bytes could not be written to the stream."""
    pass


class ReadError(TransportError):
    """The stream failed before the peer closed it."""
    pass


class ResponseTooLargeError(TransportError):
    """The response grew past the configured size limit."""
    pass
