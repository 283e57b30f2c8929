"""Configuration module exports (env-resolved constants only)."""

from .dealer import DEALER_PING_FRAME, DEFAULT_DEALER_HOST
from .envelope import TOPIC_CONNECT_VOLUME, HEADER_CONNECTION_ID, TOPIC_CONTENT_SETTINGS

__all__ = [
    "DEALER_PING_FRAME",
    "DEFAULT_DEALER_HOST",
    "HEADER_CONNECTION_ID",
    "TOPIC_CONNECT_VOLUME",
    "TOPIC_CONTENT_SETTINGS",
]
