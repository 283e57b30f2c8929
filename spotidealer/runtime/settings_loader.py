"""Environment parsing for runtime settings."""

from __future__ import annotations

import os

from spotidealer.state.settings import AppSettings, DealerSettings, SpotifyApiSettings
from spotidealer.config.spotify_api import (
    ENV_SPOTIFY_API_HOST,
    DEFAULT_SPOTIFY_API_HOST,
    ENV_SPOTIFY_HTTP_TIMEOUT_S,
    DEFAULT_SPOTIFY_HTTP_TIMEOUT_S,
)
from spotidealer.config.dealer import (
    ENV_DEALER_HOST,
    ENV_DEALER_ORIGIN,
    DEFAULT_DEALER_HOST,
    ENV_DEALER_USER_AGENT,
    DEFAULT_DEALER_ORIGIN,
    ENV_DEALER_STOP_GRACE_S,
    DEFAULT_DEALER_USER_AGENT,
    ENV_DEALER_CLOSE_TIMEOUT_S,
    ENV_DEALER_PING_INTERVAL_S,
    DEFAULT_DEALER_STOP_GRACE_S,
    ENV_DEALER_CONNECT_TIMEOUT_S,
    ENV_DEALER_MAX_MESSAGE_BYTES,
    DEFAULT_DEALER_CLOSE_TIMEOUT_S,
    DEFAULT_DEALER_PING_INTERVAL_S,
    DEFAULT_DEALER_CONNECT_TIMEOUT_S,
    DEFAULT_DEALER_MAX_MESSAGE_BYTES,
)


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _positive(value: float, default: float) -> float:
    return value if value > 0 else default


def _load_dealer_settings() -> DealerSettings:
    return DealerSettings(
        host=_str_env(ENV_DEALER_HOST, DEFAULT_DEALER_HOST),
        ping_interval_s=_positive(
            _float_env(ENV_DEALER_PING_INTERVAL_S, DEFAULT_DEALER_PING_INTERVAL_S), DEFAULT_DEALER_PING_INTERVAL_S
        ),
        stop_grace_s=max(0.0, _float_env(ENV_DEALER_STOP_GRACE_S, DEFAULT_DEALER_STOP_GRACE_S)),
        connect_timeout_s=_positive(
            _float_env(ENV_DEALER_CONNECT_TIMEOUT_S, DEFAULT_DEALER_CONNECT_TIMEOUT_S),
            DEFAULT_DEALER_CONNECT_TIMEOUT_S,
        ),
        close_timeout_s=_positive(
            _float_env(ENV_DEALER_CLOSE_TIMEOUT_S, DEFAULT_DEALER_CLOSE_TIMEOUT_S), DEFAULT_DEALER_CLOSE_TIMEOUT_S
        ),
        max_message_bytes=int(
            _positive(
                _int_env(ENV_DEALER_MAX_MESSAGE_BYTES, DEFAULT_DEALER_MAX_MESSAGE_BYTES),
                DEFAULT_DEALER_MAX_MESSAGE_BYTES,
            )
        ),
        origin=_str_env(ENV_DEALER_ORIGIN, DEFAULT_DEALER_ORIGIN),
        user_agent=_str_env(ENV_DEALER_USER_AGENT, DEFAULT_DEALER_USER_AGENT),
    )


def _load_spotify_api_settings() -> SpotifyApiSettings:
    return SpotifyApiSettings(
        host=_str_env(ENV_SPOTIFY_API_HOST, DEFAULT_SPOTIFY_API_HOST),
        http_timeout_s=_positive(
            _float_env(ENV_SPOTIFY_HTTP_TIMEOUT_S, DEFAULT_SPOTIFY_HTTP_TIMEOUT_S), DEFAULT_SPOTIFY_HTTP_TIMEOUT_S
        ),
    )


def load_settings() -> AppSettings:
    return AppSettings(
        dealer=_load_dealer_settings(),
        spotify_api=_load_spotify_api_settings(),
    )


__all__ = ["load_settings"]
