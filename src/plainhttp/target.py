"""Request destinations.

A Target is the parsed form of ``http://host[:port]/path?query``. Paths and
queries are stored exactly as given: they are expected to be percent-encoded
already and nothing downstream encodes them again.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

from .errors import HostTooLongError, InvalidAddressError, MissingHostError


SCHEME = "http"
HOST_NAME_MAX = 255
# Characters that end or split a host inside a URL or a Host header
HOST_FORBIDDEN = frozenset("/?#@")


@dataclass(frozen=True, slots=True)
class Target:
    host: str
    port: int | None = None
    path: str = ""
    query: str | None = None
    scheme: str = SCHEME

    def __post_init__(self) -> None:
        if not self.host:
            raise MissingHostError("target has no host")
        if len(self.host) > HOST_NAME_MAX:
            raise HostTooLongError(
                f"host name is {len(self.host)} bytes long, maximum is {HOST_NAME_MAX}"
            )
        if any(c in HOST_FORBIDDEN or c.isspace() or not c.isprintable() for c in self.host):
            raise InvalidAddressError(f"malformed host {self.host!r}")
        if self.scheme != SCHEME:
            raise InvalidAddressError(f"unsupported scheme {self.scheme!r}")
        if self.port is not None and not 0 < self.port < 65536:
            raise InvalidAddressError(f"port out of range: {self.port}")

    @property
    def authority_host(self) -> str:
        """The host as written in a URL or Host header; IPv6 literals get brackets."""
        return f"[{self.host}]" if ":" in self.host else self.host

    @property
    def url(self) -> str:
        netloc = self.authority_host if self.port is None else f"{self.authority_host}:{self.port}"
        query = "" if self.query is None else f"?{self.query}"
        return f"{self.scheme}://{netloc}{self.path or '/'}{query}"

    @classmethod
    def from_url(cls, url: str) -> "Target":
        """Parse an absolute ``http://`` URL.

        Raises MissingHostError when the URL has no host and
        InvalidAddressError for anything else that cannot be used.
        """
        try:
            parts = urlsplit(url)
            port = parts.port
        except ValueError as e:
            raise InvalidAddressError(f"malformed address {url!r}: {e}") from e

        if parts.scheme != SCHEME:
            raise InvalidAddressError(f"unsupported scheme in {url!r}, only http:// is supported")
        if not parts.hostname:
            raise MissingHostError(f"no host in {url!r}")

        # urlsplit cannot tell "?" with an empty query from no query at all
        has_query = "?" in url.split("#", 1)[0]
        return cls(
            host=parts.hostname,
            port=port,
            path=parts.path,
            query=parts.query if has_query else None,
        )

    @classmethod
    def from_host_path(cls, host: str, path: str, port: int | None = None) -> "Target":
        """Build a target from a host and a percent-encoded path.

        The path may carry a ``?query`` suffix, which is split off on the
        first question mark.
        """
        path, sep, query = path.partition("?")
        return cls(host=host, port=port, path=path, query=query if sep else None)
