"""Dealer envelope keys, frame types and topic URIs."""

from __future__ import annotations

ENVELOPE_KEY_TYPE = "type"
ENVELOPE_KEY_HEADERS = "headers"
ENVELOPE_KEY_URI = "uri"
ENVELOPE_KEY_PAYLOADS = "payloads"

ENVELOPE_TYPE_MESSAGE = "message"
ENVELOPE_TYPE_PONG = "pong"

HEADER_CONNECTION_ID = "Spotify-Connection-Id"

# Topic markers routed to payload parsers (matched as URI substrings).
TOPIC_CONNECT_VOLUME = "connect-state/v1/connect/volume"
TOPIC_CONTENT_SETTINGS = "content-settings-update"

__all__ = [
    "ENVELOPE_KEY_TYPE",
    "ENVELOPE_KEY_HEADERS",
    "ENVELOPE_KEY_URI",
    "ENVELOPE_KEY_PAYLOADS",
    "ENVELOPE_TYPE_MESSAGE",
    "ENVELOPE_TYPE_PONG",
    "HEADER_CONNECTION_ID",
    "TOPIC_CONNECT_VOLUME",
    "TOPIC_CONTENT_SETTINGS",
]
