"""Byte-stream transport on AnyIO sockets.

HTTP/1.0 without keep-alive frames the response by closing the connection,
so reading stops at end of stream rather than at a Content-Length.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import anyio
from anyio.abc import SocketStream

from .config import ClientConfig
from .errors import ConnectError, ReadError, ResponseTooLargeError, WriteError


logger = logging.getLogger(__name__)

# Failures a stream reports once the connection is gone
_STREAM_ERRORS = (anyio.BrokenResourceError, anyio.ClosedResourceError, OSError)


@asynccontextmanager
async def connect(host: str, port: int, *, config: ClientConfig | None = None) -> AsyncIterator[SocketStream]:
    """Open a TCP stream to ``host:port``, closed when the block exits."""
    config = config or ClientConfig()
    logger.debug("connecting to %s:%d", host, port)
    try:
        with anyio.fail_after(config.connect_timeout):
            stream = await anyio.connect_tcp(host, port)
    except OSError as e:
        # TimeoutError and socket.gaierror are both OSErrors
        raise ConnectError(f"cannot connect to {host}:{port}: {e}") from e

    async with stream:
        yield stream


async def write_all(stream: SocketStream, data: bytes) -> None:
    try:
        await stream.send(data)
    except _STREAM_ERRORS as e:
        raise WriteError(f"failed to write request: {e!r}") from e
    logger.debug("wrote %d bytes", len(data))


async def read_to_end(stream: SocketStream, *, config: ClientConfig | None = None) -> bytes:
    """Read until the peer closes the stream and return everything received.

    Raises:
        ReadError: the stream broke or a read timed out.
        ResponseTooLargeError: more than ``config.max_response_bytes`` arrived.
    """
    config = config or ClientConfig()
    buf = bytearray()
    while True:
        try:
            with anyio.fail_after(config.read_timeout):
                chunk = await stream.receive(config.chunk_size)
        except anyio.EndOfStream:
            break
        except TimeoutError as e:
            raise ReadError(f"no data for {config.read_timeout}s after {len(buf)} bytes") from e
        except _STREAM_ERRORS as e:
            raise ReadError(f"failed to read response: {e!r}") from e
        if not chunk:
            break
        buf.extend(chunk)
        if config.max_response_bytes is not None and len(buf) > config.max_response_bytes:
            raise ResponseTooLargeError(
                f"response exceeds {config.max_response_bytes} bytes"
            )

    logger.debug("read %d bytes", len(buf))
    return bytes(buf)
