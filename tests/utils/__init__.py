"""Test helpers.

Focused modules:
- protobuf.py: wire writer for dealer payloads
- fakes.py: WebSocket, HTTP session and event-sink doubles
"""

from __future__ import annotations

from .fakes import FakeWebSocket, FakeHttpSession, RecordingEvents, drain_loop
from .protobuf import b64, mode_setting, set_volume_command, content_settings_update

__all__ = [
    "FakeHttpSession",
    "FakeWebSocket",
    "RecordingEvents",
    "b64",
    "content_settings_update",
    "drain_loop",
    "mode_setting",
    "set_volume_command",
]
