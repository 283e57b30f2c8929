from .handle import ConnectionHandle
from .router import MessageRouter, TopicHandler
from .status import ConnectionStatus
from .connection import DealerConnection, redact_url, get_ws_options, build_dealer_url
from .notifications import PlayerNotifications

__all__ = [
    "ConnectionHandle",
    "ConnectionStatus",
    "DealerConnection",
    "MessageRouter",
    "PlayerNotifications",
    "TopicHandler",
    "build_dealer_url",
    "get_ws_options",
    "redact_url",
]
