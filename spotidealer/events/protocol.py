"""Callback surface for decoded session changes."""

from __future__ import annotations

from typing import Protocol


class SessionEvents(Protocol):
    """Receives session changes on the receive loop.

    Implementations run inline with frame processing, so they must return
    quickly; hand slow work to a queue or task.
    """

    def on_volume(self, percent: int) -> None: ...

    def on_shuffle(self, enabled: bool) -> None: ...

    def on_shuffle_mode(self, mode: int) -> None: ...

    def trigger(self, name: str) -> None: ...


__all__ = ["SessionEvents"]
