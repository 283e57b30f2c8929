from __future__ import annotations

import pytest

from spotidealer.state import DealerSettings, SpotifyApiSettings


@pytest.fixture
def dealer_settings() -> DealerSettings:
    return DealerSettings(
        host="dealer.test",
        ping_interval_s=30.0,
        stop_grace_s=0.05,
        connect_timeout_s=1.0,
        close_timeout_s=1.0,
        max_message_bytes=1 << 20,
        origin="https://open.spotify.com",
        user_agent="spotidealer-tests",
    )


@pytest.fixture
def api_settings() -> SpotifyApiSettings:
    return SpotifyApiSettings(host="api.test", http_timeout_s=1.0)
