"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DealerSettings:
    host: str
    ping_interval_s: float
    stop_grace_s: float
    connect_timeout_s: float
    close_timeout_s: float
    max_message_bytes: int
    origin: str
    user_agent: str


@dataclass(frozen=True, slots=True)
class SpotifyApiSettings:
    host: str
    http_timeout_s: float


@dataclass(frozen=True, slots=True)
class AppSettings:
    dealer: DealerSettings
    spotify_api: SpotifyApiSettings


__all__ = [
    "AppSettings",
    "DealerSettings",
    "SpotifyApiSettings",
]
