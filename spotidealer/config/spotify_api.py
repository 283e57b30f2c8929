"""Spotify Web API configuration used for the notification side effect."""

from __future__ import annotations

import os

ENV_SPOTIFY_API_HOST = "SPOTIFY_API_HOST"
ENV_SPOTIFY_HTTP_TIMEOUT_S = "SPOTIFY_HTTP_TIMEOUT_S"
ENV_SPOTIFY_ACCESS_TOKEN = "SPOTIFY_ACCESS_TOKEN"

DEFAULT_SPOTIFY_API_HOST = "api.spotify.com"
DEFAULT_SPOTIFY_HTTP_TIMEOUT_S = 10.0

PLAYER_NOTIFICATIONS_URL_TEMPLATE = "https://{host}/v1/me/notifications/player"
PLAYER_NOTIFICATIONS_QUERY_KEY = "connection_id"

# Upper bound on error bodies echoed into logs.
ERROR_BODY_PREVIEW_CHARS = 200


def get_spotify_access_token() -> str:
    return (os.getenv(ENV_SPOTIFY_ACCESS_TOKEN) or "").strip()


__all__ = [
    "ENV_SPOTIFY_API_HOST",
    "ENV_SPOTIFY_HTTP_TIMEOUT_S",
    "ENV_SPOTIFY_ACCESS_TOKEN",
    "DEFAULT_SPOTIFY_API_HOST",
    "DEFAULT_SPOTIFY_HTTP_TIMEOUT_S",
    "PLAYER_NOTIFICATIONS_URL_TEMPLATE",
    "PLAYER_NOTIFICATIONS_QUERY_KEY",
    "ERROR_BODY_PREVIEW_CHARS",
    "get_spotify_access_token",
]
