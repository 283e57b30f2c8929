from __future__ import annotations

import asyncio
import logging
import dataclasses

import pytest
from utils import FakeWebSocket, FakeHttpSession, b64, set_volume_command
from websockets.exceptions import InvalidURI, InvalidHandshake

from spotidealer.errors import DealerConnectError
from spotidealer.dealer import DealerConnection, ConnectionStatus, PlayerNotifications, redact_url
from spotidealer.realtime import Envelope

PING = '{"type":"ping"}'


def _connect_returning(ws: FakeWebSocket, calls: list | None = None):
    async def connect(url: str, **options):
        if calls is not None:
            calls.append((url, options))
        return ws

    return connect


async def _wait_until(predicate, timeout: float = 1.0) -> None:
    async def poll() -> None:
        while not predicate():
            await asyncio.sleep(0.005)

    await asyncio.wait_for(poll(), timeout=timeout)


@pytest.mark.asyncio
async def test_start_opens_socket_with_token_and_headers(dealer_settings) -> None:
    ws = FakeWebSocket()
    calls: list = []
    conn = DealerConnection("tok", lambda _e: None, dealer_settings, connect_fn=_connect_returning(ws, calls))

    await conn.start()
    assert conn.status is ConnectionStatus.CONNECTED
    url, options = calls[0]
    assert url == "wss://dealer.test/?access_token=tok"
    assert options["origin"] == "https://open.spotify.com"
    assert options["user_agent_header"] == "spotidealer-tests"
    assert options["ping_interval"] is None

    with pytest.raises(RuntimeError):
        await conn.start()
    await conn.stop()
    assert conn.status is ConnectionStatus.DISCONNECTED


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        OSError("unreachable"),
        TimeoutError(),
        InvalidHandshake("rejected"),
        InvalidURI("wss://dealer.test/?access_token=secret-token", "bad host"),
    ],
)
async def test_connect_failure_raises_without_leaking_token(dealer_settings, error, caplog) -> None:
    async def connect(url: str, **options):
        raise error

    conn = DealerConnection("secret-token", lambda _e: None, dealer_settings, connect_fn=connect)
    with caplog.at_level(logging.DEBUG, logger="spotidealer"):
        with pytest.raises(DealerConnectError) as exc:
            await conn.start()
    assert exc.value.host == "dealer.test"
    assert "secret-token" not in str(exc.value)
    assert "secret-token" not in caplog.text
    assert conn.status is ConnectionStatus.DISCONNECTED


@pytest.mark.asyncio
async def test_text_frames_are_dispatched_and_bad_frames_dropped(dealer_settings) -> None:
    volume = (
        '{"type":"message","uri":"hm://connect-state/v1/connect/volume","payloads":["'
        + b64(set_volume_command(50))
        + '"]}'
    )
    ws = FakeWebSocket(["not json", b"\x00\x01", "[1,2]", volume])
    seen: list[Envelope] = []
    conn = DealerConnection("tok", seen.append, dealer_settings, connect_fn=_connect_returning(ws))

    await conn.start()
    await _wait_until(lambda: len(seen) == 1)
    assert seen[0].uri == "hm://connect-state/v1/connect/volume"
    assert conn.frames_received == 4
    assert conn.status is ConnectionStatus.CONNECTED
    await conn.stop()


@pytest.mark.asyncio
async def test_dispatch_errors_do_not_stop_the_loop(dealer_settings) -> None:
    ws = FakeWebSocket(['{"type":"message","uri":"a"}', '{"type":"message","uri":"b"}'])
    seen: list[str | None] = []

    def dispatch(envelope: Envelope) -> None:
        if envelope.uri == "a":
            raise ValueError("handler bug")
        seen.append(envelope.uri)

    conn = DealerConnection("tok", dispatch, dealer_settings, connect_fn=_connect_returning(ws))
    await conn.start()
    await _wait_until(lambda: seen == ["b"])
    await conn.stop()


@pytest.mark.asyncio
async def test_keepalive_sends_ping_immediately_then_per_interval(dealer_settings) -> None:
    ws = FakeWebSocket()
    settings = dataclasses.replace(dealer_settings, ping_interval_s=0.05)
    conn = DealerConnection("tok", lambda _e: None, settings, connect_fn=_connect_returning(ws))

    await conn.start()
    await _wait_until(lambda: len(ws.sent) >= 3)
    await conn.stop()

    assert set(ws.sent) == {PING}
    count = len(ws.sent)
    await asyncio.sleep(0.15)
    assert len(ws.sent) == count


@pytest.mark.asyncio
async def test_stop_during_keepalive_sleep_sends_nothing_more(dealer_settings) -> None:
    ws = FakeWebSocket()
    conn = DealerConnection("tok", lambda _e: None, dealer_settings, connect_fn=_connect_returning(ws))

    await conn.start()
    await _wait_until(lambda: len(ws.sent) == 1)
    await asyncio.wait_for(conn.stop(), timeout=1.0)
    assert ws.sent == [PING]


@pytest.mark.asyncio
async def test_stop_unblocks_pending_receive(dealer_settings) -> None:
    ws = FakeWebSocket()
    conn = DealerConnection("tok", lambda _e: None, dealer_settings, connect_fn=_connect_returning(ws))

    await conn.start()
    await asyncio.sleep(0.01)
    await asyncio.wait_for(conn.stop(), timeout=1.0)

    assert ws.close_calls == [(1000, "Closing")]
    assert conn.status is ConnectionStatus.DISCONNECTED
    # A second stop is a no-op.
    await conn.stop()
    assert len(ws.close_calls) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("how", ["remote_close", "fail"])
async def test_remote_drop_ends_connection_without_reconnect(dealer_settings, how) -> None:
    ws = FakeWebSocket()
    calls: list = []
    conn = DealerConnection("tok", lambda _e: None, dealer_settings, connect_fn=_connect_returning(ws, calls))

    await conn.start()
    getattr(ws, how)()
    await asyncio.wait_for(conn.wait_closed(), timeout=1.0)

    assert conn.status is ConnectionStatus.DISCONNECTED
    assert len(calls) == 1
    await conn.stop()
    # Socket already closed by the peer: no close handshake attempted.
    assert ws.close_calls == []


@pytest.mark.asyncio
async def test_stop_cancels_pending_notification_calls(dealer_settings, api_settings) -> None:
    ws = FakeWebSocket()
    notifications = PlayerNotifications(FakeHttpSession(), "tok", api_settings)

    async def never_returns(connection_id: str) -> bool:
        await asyncio.Event().wait()
        return True

    notifications.enable = never_returns  # type: ignore[method-assign]
    conn = DealerConnection(
        "tok", lambda _e: None, dealer_settings, notifications=notifications, connect_fn=_connect_returning(ws)
    )
    await conn.start()
    notifications.schedule("conn-1")
    assert notifications.pending_count == 1

    await conn.stop()
    assert notifications.pending_count == 0


@pytest.mark.asyncio
async def test_async_context_manager(dealer_settings) -> None:
    ws = FakeWebSocket()
    async with DealerConnection("tok", lambda _e: None, dealer_settings, connect_fn=_connect_returning(ws)) as conn:
        assert conn.status is ConnectionStatus.CONNECTED
        assert await conn.send_text('{"type":"ping"}')
    assert conn.status is ConnectionStatus.DISCONNECTED
    assert await conn.send_text("x") is False


@pytest.mark.asyncio
async def test_cancelling_a_waiter_does_not_end_the_connection(dealer_settings) -> None:
    ws = FakeWebSocket()
    conn = DealerConnection("tok", lambda _e: None, dealer_settings, connect_fn=_connect_returning(ws))
    await conn.start()

    waiter = asyncio.create_task(conn.wait_closed())
    await asyncio.sleep(0.01)
    waiter.cancel()
    with pytest.raises(asyncio.CancelledError):
        await waiter
    assert conn.status is ConnectionStatus.CONNECTED

    await conn.stop()


def test_redact_url_masks_token_query_value() -> None:
    text = "wss://dealer.test/?access_token=abc.def-123&x=1 isn't a valid URI"
    assert redact_url(text) == "wss://dealer.test/?access_token=<redacted>&x=1 isn't a valid URI"
    assert redact_url("token abc.def-123 rejected", "abc.def-123") == "token <redacted> rejected"
    assert redact_url("nothing here") == "nothing here"
