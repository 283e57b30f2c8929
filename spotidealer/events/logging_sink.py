"""Default event sink that only logs."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class LoggingSessionEvents:
    def on_volume(self, percent: int) -> None:
        logger.info("volume: %d%%", percent)

    def on_shuffle(self, enabled: bool) -> None:
        logger.info("shuffle: %s", "on" if enabled else "off")

    def on_shuffle_mode(self, mode: int) -> None:
        logger.info("shuffle mode: %d", mode)

    def trigger(self, name: str) -> None:
        logger.debug("event: %s", name)


__all__ = ["LoggingSessionEvents"]
