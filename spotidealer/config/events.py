"""Trigger names relayed to the host's event system."""

from __future__ import annotations

VOLUME_EVENT = "VolumeEvent"
SHUFFLE_MODE_EVENT = "ShuffleModeEvent"

__all__ = ["SHUFFLE_MODE_EVENT", "VOLUME_EVENT"]
