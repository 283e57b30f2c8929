"""Per-connection resources owned by DealerConnection."""

from __future__ import annotations

import asyncio
from typing import Any
from dataclasses import field, dataclass


@dataclass(slots=True)
class ConnectionHandle:
    ws: Any
    stop_event: asyncio.Event = field(default_factory=asyncio.Event)
    send_lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    receive_task: asyncio.Task | None = None
    keepalive_task: asyncio.Task | None = None

    @property
    def tasks(self) -> list[asyncio.Task]:
        return [t for t in (self.receive_task, self.keepalive_task) if t is not None]


__all__ = ["ConnectionHandle"]
