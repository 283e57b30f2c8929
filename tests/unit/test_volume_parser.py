from __future__ import annotations

import pytest
from utils import RecordingEvents
from utils.protobuf import b64, field_bytes, field_varint, field_string, set_volume_command

from spotidealer.state import SessionState
from spotidealer.parsers import VolumeParser, read_raw_volume, volume_to_percent
from spotidealer.realtime import Envelope

VOLUME_URI = "hm://connect-state/v1/connect/volume"


def _envelope(*payloads: str) -> Envelope:
    return Envelope(type="message", uri=VOLUME_URI, payloads=payloads)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (0, 0),
        (37, 37),
        (100, 100),
        (101, 0),
        (32768, 50),
        (65535, 100),
        (70000, 100),
        (6554, 10),
    ],
)
def test_volume_to_percent(raw: int, expected: int) -> None:
    assert volume_to_percent(raw) == expected


def test_read_raw_volume_skips_unknown_fields() -> None:
    data = field_string(4, "device") + field_bytes(1, b"\x01") + field_varint(1, 32768) + field_varint(1, 5)
    assert read_raw_volume(data) == 32768


def test_read_raw_volume_without_field_returns_none() -> None:
    assert read_raw_volume(field_varint(2, 10)) is None
    assert read_raw_volume(b"") is None


def test_handle_updates_state_and_triggers_once() -> None:
    state = SessionState()
    events = RecordingEvents()
    parser = VolumeParser(state, events)

    assert parser.handle(_envelope(b64(set_volume_command(32768)))) is True
    assert state.volume_percent == 50
    assert events.volumes == [50]
    assert events.triggers == ["VolumeEvent"]

    # Same percentage, different raw reading: no new event.
    assert parser.handle(_envelope(b64(set_volume_command(50)))) is False
    assert events.triggers == ["VolumeEvent"]


def test_bad_payloads_are_skipped_and_later_ones_applied() -> None:
    state = SessionState()
    events = RecordingEvents()
    parser = VolumeParser(state, events)

    envelope = _envelope(
        "***not base64***",
        b64(b"\x08"),  # truncated
        b64(field_varint(3, 1)),  # no volume field
        b64(set_volume_command(65535)),
    )
    assert parser.handle(envelope) is True
    assert state.volume_percent == 100
    assert events.volumes == [100]


def test_missing_payloads_is_a_no_op() -> None:
    state = SessionState()
    events = RecordingEvents()
    assert VolumeParser(state, events).handle(Envelope(type="message", uri=VOLUME_URI)) is False
    assert state.volume_percent is None
    assert events.triggers == []
