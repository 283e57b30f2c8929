"""Dealer WebSocket configuration and constants."""

from __future__ import annotations

ENV_DEALER_HOST = "SPOTIFY_DEALER_HOST"
ENV_DEALER_PING_INTERVAL_S = "DEALER_PING_INTERVAL_S"
ENV_DEALER_STOP_GRACE_S = "DEALER_STOP_GRACE_S"
ENV_DEALER_CONNECT_TIMEOUT_S = "DEALER_CONNECT_TIMEOUT_S"
ENV_DEALER_CLOSE_TIMEOUT_S = "DEALER_CLOSE_TIMEOUT_S"
ENV_DEALER_MAX_MESSAGE_BYTES = "DEALER_MAX_MESSAGE_BYTES"
ENV_DEALER_ORIGIN = "DEALER_ORIGIN"
ENV_DEALER_USER_AGENT = "DEALER_USER_AGENT"

DEFAULT_DEALER_HOST = "gue1-dealer.spotify.com"
DEFAULT_DEALER_PING_INTERVAL_S = 30.0
DEFAULT_DEALER_STOP_GRACE_S = 0.5
DEFAULT_DEALER_CONNECT_TIMEOUT_S = 10.0
DEFAULT_DEALER_CLOSE_TIMEOUT_S = 5.0
DEFAULT_DEALER_MAX_MESSAGE_BYTES = 4 * 1024 * 1024
DEFAULT_DEALER_ORIGIN = "https://open.spotify.com"
DEFAULT_DEALER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/143.0.0.0 Safari/537.36"
)

DEALER_URL_TEMPLATE = "wss://{host}/?access_token={token}"

# Keep-alive frame body, sent verbatim.
DEALER_PING_FRAME = '{"type":"ping"}'

DEALER_CLOSE_NORMAL_CODE = 1000
DEALER_CLOSE_NORMAL_REASON = "Closing"

__all__ = [
    "ENV_DEALER_HOST",
    "ENV_DEALER_PING_INTERVAL_S",
    "ENV_DEALER_STOP_GRACE_S",
    "ENV_DEALER_CONNECT_TIMEOUT_S",
    "ENV_DEALER_CLOSE_TIMEOUT_S",
    "ENV_DEALER_MAX_MESSAGE_BYTES",
    "ENV_DEALER_ORIGIN",
    "ENV_DEALER_USER_AGENT",
    "DEFAULT_DEALER_HOST",
    "DEFAULT_DEALER_PING_INTERVAL_S",
    "DEFAULT_DEALER_STOP_GRACE_S",
    "DEFAULT_DEALER_CONNECT_TIMEOUT_S",
    "DEFAULT_DEALER_CLOSE_TIMEOUT_S",
    "DEFAULT_DEALER_MAX_MESSAGE_BYTES",
    "DEFAULT_DEALER_ORIGIN",
    "DEFAULT_DEALER_USER_AGENT",
    "DEALER_URL_TEMPLATE",
    "DEALER_PING_FRAME",
    "DEALER_CLOSE_NORMAL_CODE",
    "DEALER_CLOSE_NORMAL_REASON",
]
