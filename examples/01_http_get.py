"""
HTTP GET Example

Fetches a couple of pages from httpbin over plain HTTP/1.0.

- Each request opens its own connection and reads until the server closes it.
- Both requests run concurrently in one TaskGroup; they share nothing.

Run:
  uv run python examples/01_http_get.py
"""

from __future__ import annotations

import anyio

from plainhttp import HttpClientError, HttpRequest, RequestParams


async def show(req: HttpRequest) -> None:
    try:
        response = await req.send()
    except HttpClientError as e:
        print(f"{req!r} failed: {type(e).__name__}: {e}")
        return
    print(f"{req!r}")
    print(response)


async def main() -> None:
    requests = [
        HttpRequest.get("http://httpbin.io/get?test_param=1"),
        HttpRequest.init(
            "httpbin.io",
            "/get?test_param=1&another_param=%2Fnicoco",
            RequestParams(headers={"X-Test-Header": "test-value"}),
        ),
    ]

    async with anyio.create_task_group() as tg:
        for req in requests:
            tg.start_soon(show, req)


if __name__ == "__main__":
    anyio.run(main)
