from __future__ import annotations

from enum import Enum


class ConnectionStatus(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"


__all__ = ["ConnectionStatus"]
