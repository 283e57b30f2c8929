"""Run the dealer client from a terminal and log session changes.

This plays the role of the enclosing module: it owns the reconnect policy.
"""

from __future__ import annotations

import asyncio
import logging
import argparse
import contextlib
from typing import TYPE_CHECKING

from spotidealer.errors import DealerConnectError
from spotidealer.runtime import configure_logging, build_dealer_client
from spotidealer.config.spotify_api import ENV_SPOTIFY_ACCESS_TOKEN, get_spotify_access_token

if TYPE_CHECKING:
    import aiohttp

    from spotidealer.state import AppSettings

logger = logging.getLogger(__name__)

DEFAULT_RECONNECT_DELAY_S = 5.0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Follow Spotify dealer volume and shuffle updates")
    parser.add_argument("--token", type=str, default=None, help=f"Access token (overrides {ENV_SPOTIFY_ACCESS_TOKEN})")
    parser.add_argument("--reconnect", action="store_true", help="Start again after the connection drops")
    parser.add_argument(
        "--reconnect-delay",
        type=float,
        default=DEFAULT_RECONNECT_DELAY_S,
        help="Seconds to wait before reconnecting",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


async def run(
    token: str,
    *,
    reconnect: bool,
    reconnect_delay_s: float,
    settings: AppSettings | None = None,
    http_session: aiohttp.ClientSession | None = None,
    connect_fn=None,
) -> int:
    client = build_dealer_client(token, settings=settings, http_session=http_session, connect_fn=connect_fn)
    try:
        while True:
            try:
                await client.start()
            except DealerConnectError as exc:
                logger.error("%s", exc)
                if not reconnect:
                    return 1
            else:
                await client.connection.wait_closed()
                await client.stop()
                logger.info("session at disconnect: %s", client.state.snapshot())
                if not reconnect:
                    return 0
            await asyncio.sleep(max(0.0, reconnect_delay_s))
    finally:
        await client.shutdown()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.debug else None)

    token = (args.token or "").strip() or get_spotify_access_token()
    if not token:
        logger.error("access token missing: use --token or set %s", ENV_SPOTIFY_ACCESS_TOKEN)
        return 2

    with contextlib.suppress(KeyboardInterrupt):
        return asyncio.run(run(token, reconnect=args.reconnect, reconnect_delay_s=args.reconnect_delay))
    return 130


__all__ = ["build_parser", "main", "run"]
