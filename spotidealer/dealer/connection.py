"""Dealer WebSocket connection: connect, receive loop, keep-alive, stop.

The connection never reconnects on its own. When the receive loop ends the
status drops to DISCONNECTED and ``wait_closed()`` returns; the caller decides
whether to ``start()`` again.
"""

from __future__ import annotations

import re
import asyncio
import logging
import contextlib
from typing import Any
from collections.abc import Callable

import websockets
from websockets.protocol import State
from websockets.exceptions import ConnectionClosed, ConnectionClosedOK, WebSocketException

from spotidealer.state import DealerSettings
from spotidealer.errors import DealerConnectError
from spotidealer.realtime.envelope import Envelope, parse_envelope
from spotidealer.config.dealer import (
    DEALER_PING_FRAME,
    DEALER_URL_TEMPLATE,
    DEALER_CLOSE_NORMAL_CODE,
    DEALER_CLOSE_NORMAL_REASON,
)

from .handle import ConnectionHandle
from .status import ConnectionStatus
from .notifications import PlayerNotifications

logger = logging.getLogger(__name__)

Dispatch = Callable[[Envelope], object]
ConnectFn = Callable[..., Any]

_ACCESS_TOKEN_RE = re.compile(r"(access_token=)[^&\s'\"]+")


def redact_url(text: str, secret: str | None = None) -> str:
    """Mask the ``access_token`` query value (and ``secret`` wherever it appears) in ``text``."""
    text = _ACCESS_TOKEN_RE.sub(r"\1<redacted>", text)
    return text.replace(secret, "<redacted>") if secret else text


def build_dealer_url(host: str, access_token: str) -> str:
    return DEALER_URL_TEMPLATE.format(host=host, token=access_token)


def get_ws_options(settings: DealerSettings) -> dict[str, Any]:
    return {
        "origin": settings.origin,
        "user_agent_header": settings.user_agent,
        "open_timeout": settings.connect_timeout_s,
        "close_timeout": settings.close_timeout_s,
        "max_size": settings.max_message_bytes,
        # Keep-alive is the dealer's JSON ping, not protocol-level pings.
        "ping_interval": None,
    }


class DealerConnection:
    def __init__(
        self,
        access_token: str,
        dispatch: Dispatch,
        settings: DealerSettings,
        *,
        notifications: PlayerNotifications | None = None,
        connect_fn: ConnectFn | None = None,
    ) -> None:
        self._access_token = access_token
        self._dispatch = dispatch
        self._settings = settings
        self._notifications = notifications
        self._connect_fn = connect_fn or websockets.connect
        self._handle: ConnectionHandle | None = None
        self._status = ConnectionStatus.DISCONNECTED
        self._frames_received = 0

    @property
    def status(self) -> ConnectionStatus:
        return self._status

    @property
    def frames_received(self) -> int:
        return self._frames_received

    async def __aenter__(self) -> DealerConnection:
        await self.start()
        return self

    async def __aexit__(self, *_exc: object) -> None:
        await self.stop()

    async def start(self) -> None:
        if self._handle is not None:
            raise RuntimeError("dealer connection already started")

        self._status = ConnectionStatus.CONNECTING
        url = build_dealer_url(self._settings.host, self._access_token)
        try:
            ws = await self._connect_fn(url, **get_ws_options(self._settings))
        except (OSError, TimeoutError, WebSocketException) as exc:
            self._status = ConnectionStatus.DISCONNECTED
            detail = redact_url(str(exc), self._access_token)
            logger.warning("dealer connect to %s failed: %s", self._settings.host, detail)
            raise DealerConnectError(host=self._settings.host, detail=detail) from None

        handle = ConnectionHandle(ws=ws)
        handle.receive_task = asyncio.create_task(self._receive_loop(handle))
        handle.keepalive_task = asyncio.create_task(self._keepalive_loop(handle))
        self._handle = handle
        self._frames_received = 0
        self._status = ConnectionStatus.CONNECTED
        logger.info("dealer connected to %s", self._settings.host)

    async def stop(self) -> None:
        handle = self._handle
        if handle is None:
            return

        handle.stop_event.set()
        try:
            # Give the loops a moment to notice the stop signal.
            await asyncio.wait(handle.tasks, timeout=self._settings.stop_grace_s)
            if getattr(handle.ws, "state", None) in (State.OPEN, State.CLOSING):
                try:
                    await handle.ws.close(code=DEALER_CLOSE_NORMAL_CODE, reason=DEALER_CLOSE_NORMAL_REASON)
                except Exception as exc:
                    logger.debug("dealer close handshake failed: %s", exc)
        finally:
            for task in handle.tasks:
                task.cancel()
            for task in handle.tasks:
                with contextlib.suppress(asyncio.CancelledError, Exception):
                    await task
            if self._notifications is not None:
                await self._notifications.cancel_pending()
            self._handle = None
            self._status = ConnectionStatus.DISCONNECTED
            logger.info("dealer connection stopped")

    async def wait_closed(self) -> None:
        """Return once the receive loop has ended (remote close, error or stop).

        Cancelling the caller propagates; the receive loop itself keeps running.
        """
        handle = self._handle
        if handle is None or handle.receive_task is None:
            return
        await asyncio.wait({handle.receive_task})

    async def send_text(self, text: str) -> bool:
        handle = self._handle
        if handle is None:
            return False
        return await self._send(handle, text)

    async def _send(self, handle: ConnectionHandle, text: str) -> bool:
        if getattr(handle.ws, "state", None) is not State.OPEN:
            return False
        async with handle.send_lock:
            await handle.ws.send(text)
        return True

    async def _receive_loop(self, handle: ConnectionHandle) -> None:
        ws = handle.ws
        try:
            while not handle.stop_event.is_set():
                frame = await ws.recv()
                self._frames_received += 1
                if isinstance(frame, bytes):
                    logger.debug("ignoring binary dealer frame (%d bytes)", len(frame))
                    continue
                envelope = parse_envelope(frame)
                if envelope is None:
                    continue
                try:
                    self._dispatch(envelope)
                except Exception:
                    logger.warning("error handling dealer message %s", envelope.uri, exc_info=True)
        except ConnectionClosedOK as exc:
            logger.info("dealer connection closed: %s", exc)
        except ConnectionClosed as exc:
            logger.warning("dealer connection dropped: %s", exc)
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            logger.warning("dealer receive loop failed: %s", exc, exc_info=True)
        finally:
            handle.stop_event.set()
            if self._handle is handle:
                self._status = ConnectionStatus.DISCONNECTED
            logger.debug("dealer receive loop exited after %d frames", self._frames_received)

    async def _keepalive_loop(self, handle: ConnectionHandle) -> None:
        interval = self._settings.ping_interval_s
        while not handle.stop_event.is_set():
            try:
                sent = await self._send(handle, DEALER_PING_FRAME)
            except ConnectionClosed:
                return
            except Exception as exc:
                logger.debug("dealer ping failed: %s", exc)
                sent = False
            if sent:
                logger.debug("dealer ping sent")
            with contextlib.suppress(TimeoutError):
                await asyncio.wait_for(handle.stop_event.wait(), timeout=interval)


__all__ = ["DealerConnection", "build_dealer_url", "get_ws_options", "redact_url"]
