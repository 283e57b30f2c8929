"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    import aiohttp

    from spotidealer.state.session import SessionState
    from spotidealer.state.settings import AppSettings
    from spotidealer.dealer.router import MessageRouter
    from spotidealer.dealer.connection import DealerConnection
    from spotidealer.dealer.notifications import PlayerNotifications


@dataclass(slots=True)
class DealerClient:
    state: SessionState
    router: MessageRouter
    notifications: PlayerNotifications
    connection: DealerConnection
    settings: AppSettings
    _http_session: aiohttp.ClientSession
    _owns_http_session: bool = False

    async def start(self) -> None:
        self.state.reset()
        self.notifications.forget()
        await self.connection.start()

    async def stop(self) -> None:
        await self.connection.stop()

    async def shutdown(self) -> None:
        try:
            await self.connection.stop()
        finally:
            if self._owns_http_session:
                try:
                    await self._http_session.close()
                except Exception:
                    logger.exception("http session shutdown failed")


__all__ = ["DealerClient"]
