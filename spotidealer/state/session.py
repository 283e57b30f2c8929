"""Mutable playback state decoded from dealer messages.

Only the receive loop writes; other threads (OSC emitters, UIs) read through
``snapshot()``. The lock keeps multi-field reads consistent.
"""

from __future__ import annotations

import logging
import threading

from spotidealer.config.protobuf import (
    SHUFFLE_MODE_OFF,
    SHUFFLE_MODE_SMART,
    VOLUME_PERCENT_MAX,
    SHUFFLE_MODE_SHUFFLE,
)

from .snapshot import ShuffleChange, SessionSnapshot

logger = logging.getLogger(__name__)


def derive_shuffle_mode(shuffle_enabled: bool, smart_shuffle_enabled: bool) -> int:
    if not shuffle_enabled:
        return SHUFFLE_MODE_OFF
    return SHUFFLE_MODE_SMART if smart_shuffle_enabled else SHUFFLE_MODE_SHUFFLE


class SessionState:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._volume_percent: int | None = None
        self._shuffle_enabled = False
        self._smart_shuffle_enabled = False
        self._shuffle_mode = SHUFFLE_MODE_OFF

    @property
    def volume_percent(self) -> int | None:
        return self._volume_percent

    @property
    def shuffle_enabled(self) -> bool:
        return self._shuffle_enabled

    @property
    def smart_shuffle_enabled(self) -> bool:
        return self._smart_shuffle_enabled

    @property
    def shuffle_mode(self) -> int:
        return self._shuffle_mode

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return SessionSnapshot(
                volume_percent=self._volume_percent,
                shuffle_enabled=self._shuffle_enabled,
                smart_shuffle_enabled=self._smart_shuffle_enabled,
                shuffle_mode=self._shuffle_mode,
            )

    def set_volume(self, percent: int) -> bool:
        """Store a volume percentage; returns True when the value changed."""
        percent = max(0, min(VOLUME_PERCENT_MAX, int(percent)))
        with self._lock:
            if self._volume_percent == percent:
                return False
            self._volume_percent = percent
        return True

    def apply_shuffle(self, *, shuffle: bool | None = None, smart_shuffle: bool | None = None) -> ShuffleChange:
        """Merge observed flags (None = not reported) and recompute the mode."""
        with self._lock:
            new_shuffle = self._shuffle_enabled if shuffle is None else bool(shuffle)
            new_smart = self._smart_shuffle_enabled if smart_shuffle is None else bool(smart_shuffle)
            new_mode = derive_shuffle_mode(new_shuffle, new_smart)

            change = ShuffleChange(
                shuffle_changed=new_shuffle != self._shuffle_enabled,
                smart_shuffle_changed=new_smart != self._smart_shuffle_enabled,
                mode_changed=new_mode != self._shuffle_mode,
            )
            self._shuffle_enabled = new_shuffle
            self._smart_shuffle_enabled = new_smart
            self._shuffle_mode = new_mode
        return change

    def reset(self) -> None:
        with self._lock:
            self._volume_percent = None
            self._shuffle_enabled = False
            self._smart_shuffle_enabled = False
            self._shuffle_mode = SHUFFLE_MODE_OFF
        logger.debug("session state reset")


__all__ = ["SessionState", "derive_shuffle_mode"]
