"""Spotify dealer client decoding volume and shuffle state into session updates."""

from spotidealer.state import SessionState, SessionSnapshot
from spotidealer.errors import WireDecodeError, DealerConnectError
from spotidealer.events import SessionEvents, LoggingSessionEvents
from spotidealer.dealer import MessageRouter, DealerConnection, ConnectionStatus, PlayerNotifications
from spotidealer.runtime import DealerClient, build_dealer_client

__all__ = [
    "ConnectionStatus",
    "DealerClient",
    "DealerConnectError",
    "DealerConnection",
    "LoggingSessionEvents",
    "MessageRouter",
    "PlayerNotifications",
    "SessionEvents",
    "SessionSnapshot",
    "SessionState",
    "WireDecodeError",
    "build_dealer_client",
]
