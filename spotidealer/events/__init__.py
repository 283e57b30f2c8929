from .protocol import SessionEvents
from .logging_sink import LoggingSessionEvents

__all__ = ["LoggingSessionEvents", "SessionEvents"]
