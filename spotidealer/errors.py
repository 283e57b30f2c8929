"""Shared error types for the dealer client."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WireDecodeError(Exception):
    """Raised when protobuf wire bytes are truncated or malformed."""

    reason: str
    offset: int

    def __str__(self) -> str:
        return f"{self.reason} at offset {self.offset}"


@dataclass(frozen=True, slots=True)
class DealerConnectError(Exception):
    """Raised when the dealer WebSocket cannot be opened.

    Only the host is kept; the access token is part of the URL and must not leak.
    """

    host: str
    detail: str

    def __str__(self) -> str:
        return f"failed to connect to dealer at {self.host}: {self.detail}"


__all__ = ["DealerConnectError", "WireDecodeError"]
