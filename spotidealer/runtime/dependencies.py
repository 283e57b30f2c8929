"""Dealer client construction (session state, router, socket, HTTP side effect)."""

from __future__ import annotations

import logging

import aiohttp

from spotidealer.state import AppSettings, SessionState
from spotidealer.events import SessionEvents, LoggingSessionEvents
from spotidealer.dealer import MessageRouter, DealerConnection, PlayerNotifications
from spotidealer.state.runtime import DealerClient

from .settings_loader import load_settings

logger = logging.getLogger(__name__)


def build_dealer_client(
    access_token: str,
    *,
    settings: AppSettings | None = None,
    events: SessionEvents | None = None,
    http_session: aiohttp.ClientSession | None = None,
    connect_fn=None,
) -> DealerClient:
    """Wire one dealer client. Must be called with a running event loop when
    ``http_session`` is omitted, since a new aiohttp session is created."""
    if not access_token or not access_token.strip():
        raise ValueError("an access token is required")
    settings = settings or load_settings()
    owns_session = http_session is None
    session = http_session or aiohttp.ClientSession()

    state = SessionState()
    notifications = PlayerNotifications(session, access_token, settings.spotify_api)
    router = MessageRouter(state, events or LoggingSessionEvents(), notifications)
    connection = DealerConnection(
        access_token,
        router.route,
        settings.dealer,
        notifications=notifications,
        connect_fn=connect_fn,
    )
    logger.debug("dealer client wired for %s", settings.dealer.host)
    return DealerClient(
        state=state,
        router=router,
        notifications=notifications,
        connection=connection,
        settings=settings,
        _http_session=session,
        _owns_http_session=owns_session,
    )


__all__ = ["DealerClient", "build_dealer_client"]
