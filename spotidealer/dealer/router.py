"""Route decoded dealer envelopes to payload parsers."""

from __future__ import annotations

import logging
from collections.abc import Callable

from spotidealer.state import SessionState
from spotidealer.events import SessionEvents
from spotidealer.parsers import VolumeParser, ContentSettingsParser
from spotidealer.realtime.envelope import Envelope
from spotidealer.config.envelope import (
    ENVELOPE_TYPE_PONG,
    HEADER_CONNECTION_ID,
    TOPIC_CONNECT_VOLUME,
    TOPIC_CONTENT_SETTINGS,
)

from .notifications import PlayerNotifications

logger = logging.getLogger(__name__)

TopicHandler = Callable[[Envelope], bool]


class MessageRouter:
    """One envelope in: at most one notification call and one state mutation out."""

    def __init__(
        self,
        state: SessionState,
        events: SessionEvents,
        notifications: PlayerNotifications | None = None,
    ) -> None:
        self._notifications = notifications
        self._routes: list[tuple[str, TopicHandler]] = [
            (TOPIC_CONNECT_VOLUME, VolumeParser(state, events).handle),
            (TOPIC_CONTENT_SETTINGS, ContentSettingsParser(state, events).handle),
        ]

    def register(self, topic: str, handler: TopicHandler) -> None:
        """Add a topic handler; earlier registrations take precedence."""
        self._routes.append((topic, handler))

    def handler_for(self, uri: str | None) -> TopicHandler | None:
        if not uri:
            return None
        for topic, handler in self._routes:
            if topic in uri:
                return handler
        return None

    def route(self, envelope: Envelope) -> bool:
        """Dispatch one envelope; returns True if session state changed."""
        if not envelope.is_message:
            if envelope.type != ENVELOPE_TYPE_PONG:
                logger.debug("ignoring dealer frame of type %r", envelope.type)
            return False

        if self._notifications is not None:
            self._notifications.schedule(envelope.header(HEADER_CONNECTION_ID))

        handler = self.handler_for(envelope.uri)
        if handler is None:
            logger.debug("no handler for dealer message %s", envelope.uri)
            return False
        return handler(envelope)


__all__ = ["MessageRouter", "TopicHandler"]
