"""Shared helpers: a throwaway local HTTP/1.0 server."""

from contextlib import asynccontextmanager

import anyio
from anyio.abc import SocketAttribute, SocketStream


async def read_request(stream: SocketStream) -> bytes:
    buf = bytearray()
    while b"\r\n\r\n" not in buf:
        try:
            chunk = await stream.receive()
        except (anyio.EndOfStream, anyio.BrokenResourceError):
            break
        buf.extend(chunk)
    return bytes(buf)


@asynccontextmanager
async def local_server(chunks, received=None, *, hang=False):
    """Serve canned response ``chunks`` to every connection, then close it.

    Requests are appended to ``received``. With ``hang`` the server never
    closes the connection after replying.
    """
    listener = await anyio.create_tcp_listener(local_host="127.0.0.1")
    port = listener.listeners[0].extra(SocketAttribute.local_port)

    async def handle(stream: SocketStream) -> None:
        async with stream:
            request = await read_request(stream)
            if received is not None:
                received.append(request)
            try:
                for chunk in chunks:
                    await stream.send(chunk)
            except (anyio.BrokenResourceError, anyio.ClosedResourceError):
                # client went away first
                return
            if hang:
                await anyio.sleep_forever()

    async def serve() -> None:
        async with listener:
            await listener.serve(handle)

    async with anyio.create_task_group() as tg:
        tg.start_soon(serve)
        try:
            yield port
        finally:
            tg.cancel_scope.cancel()


async def unused_port() -> int:
    """Return a port that nothing listens on any more."""
    listener = await anyio.create_tcp_listener(local_host="127.0.0.1")
    async with listener:
        return listener.listeners[0].extra(SocketAttribute.local_port)
