"""Logging initialization."""

from __future__ import annotations

import logging

from spotidealer.config.logging import LOG_LEVEL, LOG_FORMAT

from .third_party_log_filters import configure as configure_third_party


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)
    configure_third_party()


__all__ = ["configure_logging"]
