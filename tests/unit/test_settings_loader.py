from __future__ import annotations

import pytest

from spotidealer.runtime import load_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "SPOTIFY_DEALER_HOST",
        "DEALER_PING_INTERVAL_S",
        "DEALER_STOP_GRACE_S",
        "SPOTIFY_API_HOST",
        "SPOTIFY_HTTP_TIMEOUT_S",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()
    assert settings.dealer.host == "gue1-dealer.spotify.com"
    assert settings.dealer.ping_interval_s == 30.0
    assert settings.dealer.stop_grace_s == 0.5
    assert settings.dealer.origin == "https://open.spotify.com"
    assert settings.spotify_api.host == "api.spotify.com"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SPOTIFY_DEALER_HOST", "  dealer.example  ")
    monkeypatch.setenv("DEALER_PING_INTERVAL_S", "12.5")
    monkeypatch.setenv("DEALER_MAX_MESSAGE_BYTES", "2048")
    monkeypatch.setenv("SPOTIFY_API_HOST", "api.example")

    settings = load_settings()
    assert settings.dealer.host == "dealer.example"
    assert settings.dealer.ping_interval_s == 12.5
    assert settings.dealer.max_message_bytes == 2048
    assert settings.spotify_api.host == "api.example"


@pytest.mark.parametrize("raw", ["abc", "0", "-3", "   "])
def test_invalid_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("DEALER_PING_INTERVAL_S", raw)
    monkeypatch.setenv("SPOTIFY_HTTP_TIMEOUT_S", raw)
    settings = load_settings()
    assert settings.dealer.ping_interval_s == 30.0
    assert settings.spotify_api.http_timeout_s == 10.0
