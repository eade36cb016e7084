"""Protocol constants shared by the request builder and the response parser."""

HTTP_VERSION = "HTTP/1.0"
CRLF = b"\r\n"
# Header bytes are latin-1, as on the wire.
WIRE_ENCODING = "iso-8859-1"
