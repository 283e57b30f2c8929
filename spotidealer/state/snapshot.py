"""Immutable view of the session state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    volume_percent: int | None = None
    shuffle_enabled: bool = False
    smart_shuffle_enabled: bool = False
    shuffle_mode: int = 0


@dataclass(frozen=True, slots=True)
class ShuffleChange:
    """Which shuffle-related fields an update actually changed."""

    shuffle_changed: bool = False
    smart_shuffle_changed: bool = False
    mode_changed: bool = False

    @property
    def any(self) -> bool:
        return self.shuffle_changed or self.smart_shuffle_changed or self.mode_changed


__all__ = ["SessionSnapshot", "ShuffleChange"]
