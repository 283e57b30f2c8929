"""Log noise filters for third-party libraries."""

from __future__ import annotations

import logging

from spotidealer.config.logging import SHOW_WEBSOCKETS_LOGS


def configure() -> None:
    # websockets logs every frame at DEBUG; keep it tame unless explicitly enabled.
    if not SHOW_WEBSOCKETS_LOGS:
        logging.getLogger("websockets").setLevel(logging.WARNING)
        logging.getLogger("aiohttp").setLevel(logging.WARNING)


__all__ = ["configure"]
