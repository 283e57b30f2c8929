from __future__ import annotations

import json

import pytest

from spotidealer.realtime import parse_envelope


def test_parse_full_message() -> None:
    raw = json.dumps({
        "type": "message",
        "uri": "hm://connect-state/v1/connect/volume",
        "headers": {"Spotify-Connection-Id": "abc", "Content-Type": "application/octet-stream"},
        "payloads": ["CIDAAg==", 5, "", None],
    })
    envelope = parse_envelope(raw)
    assert envelope is not None
    assert envelope.is_message
    assert envelope.uri == "hm://connect-state/v1/connect/volume"
    assert envelope.header("Spotify-Connection-Id") == "abc"
    assert envelope.header("spotify-connection-id") == "abc"
    assert envelope.payloads == ("CIDAAg==",)


def test_absent_fields_are_not_errors() -> None:
    envelope = parse_envelope(b'{"type": "pong"}')
    assert envelope is not None
    assert not envelope.is_message
    assert envelope.uri is None
    assert envelope.header("Spotify-Connection-Id") is None
    assert envelope.payloads == ()


def test_wrongly_typed_fields_are_dropped() -> None:
    envelope = parse_envelope(json.dumps({"type": 3, "uri": [], "headers": "x", "payloads": {"a": 1}}))
    assert envelope is not None
    assert envelope.type is None
    assert envelope.uri is None
    assert envelope.headers == {}
    assert envelope.payloads == ()


def test_non_string_header_value_is_none() -> None:
    envelope = parse_envelope(json.dumps({"type": "message", "headers": {"Spotify-Connection-Id": 12}}))
    assert envelope is not None
    assert envelope.header("Spotify-Connection-Id") is None


@pytest.mark.parametrize("raw", ["not json", "[]", "42", '"message"', "{"])
def test_malformed_frames_yield_none(raw: str) -> None:
    assert parse_envelope(raw) is None
