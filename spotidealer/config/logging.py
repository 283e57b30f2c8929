"""Logging configuration (env-resolved constants only)."""

from __future__ import annotations

import os

LOG_LEVEL = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
LOG_FORMAT = os.getenv("LOG_FORMAT") or "%(asctime)s %(levelname)s %(name)s: %(message)s"

SHOW_WEBSOCKETS_LOGS = (os.getenv("SHOW_WEBSOCKETS_LOGS") or "").strip().lower() in {"1", "true", "yes"}

__all__ = ["LOG_LEVEL", "LOG_FORMAT", "SHOW_WEBSOCKETS_LOGS"]
