"""Enable Web API player notifications for a dealer connection id."""

from __future__ import annotations

import asyncio
import logging
import contextlib

import aiohttp

from spotidealer.state import SpotifyApiSettings
from spotidealer.config.spotify_api import (
    ERROR_BODY_PREVIEW_CHARS,
    PLAYER_NOTIFICATIONS_QUERY_KEY,
    PLAYER_NOTIFICATIONS_URL_TEMPLATE,
)

logger = logging.getLogger(__name__)


class PlayerNotifications:
    """Fire-and-forget ``PUT /v1/me/notifications/player`` once per connection id."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        access_token: str,
        settings: SpotifyApiSettings,
    ) -> None:
        self._session = session
        self._access_token = access_token
        self._url = PLAYER_NOTIFICATIONS_URL_TEMPLATE.format(host=settings.host)
        self._timeout = aiohttp.ClientTimeout(total=settings.http_timeout_s)
        self._seen: set[str] = set()
        self._pending: set[asyncio.Task] = set()

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def schedule(self, connection_id: str | None) -> asyncio.Task | None:
        """Start the enable call in the background unless this id was already seen."""
        if not isinstance(connection_id, str) or not connection_id.strip():
            return None
        connection_id = connection_id.strip()
        if connection_id in self._seen:
            return None
        self._seen.add(connection_id)

        task = asyncio.create_task(self.enable(connection_id))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def enable(self, connection_id: str) -> bool:
        headers = {"Authorization": f"Bearer {self._access_token}"}
        params = {PLAYER_NOTIFICATIONS_QUERY_KEY: connection_id}
        try:
            async with self._session.put(self._url, params=params, headers=headers, timeout=self._timeout) as resp:
                if 200 <= resp.status < 300:
                    logger.info("player notifications enabled for dealer connection")
                    return True
                body = await resp.text()
                logger.warning(
                    "enabling player notifications failed (%d): %s",
                    resp.status,
                    body[:ERROR_BODY_PREVIEW_CHARS],
                )
        except (aiohttp.ClientError, TimeoutError) as exc:
            logger.warning("enabling player notifications failed: %s", exc)
        return False

    async def wait_pending(self) -> None:
        """Wait for in-flight enable calls without cancelling them."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def cancel_pending(self) -> None:
        tasks = list(self._pending)
        for task in tasks:
            task.cancel()
        for task in tasks:
            with contextlib.suppress(asyncio.CancelledError, Exception):
                await task
        self._pending.clear()

    def forget(self) -> None:
        """Drop seen ids; a fresh connection gets a fresh id."""
        self._seen.clear()


__all__ = ["PlayerNotifications"]
