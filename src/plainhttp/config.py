"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ClientConfig:
    default_port: int = 80
    chunk_size: int = 1024
    connect_timeout: float | None = 10.0
    read_timeout: float | None = 30.0
    max_response_bytes: int | None = None

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
        if not 0 < self.default_port < 65536:
            raise ValueError(f"default_port out of range: {self.default_port}")
        for name in ("connect_timeout", "read_timeout", "max_response_bytes"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")

    def with_overrides(self, **changes) -> "ClientConfig":
        return replace(self, **changes)
