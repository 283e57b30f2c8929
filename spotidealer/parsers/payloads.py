"""Base64 payload extraction shared by the protobuf parsers."""

from __future__ import annotations

import base64
import logging
import binascii
from collections.abc import Iterator

from spotidealer.realtime.envelope import Envelope

logger = logging.getLogger(__name__)


def decode_payload(encoded: str) -> bytes | None:
    """Strict standard-base64 decode; returns None for invalid input."""
    try:
        return base64.b64decode(encoded.strip(), validate=True)
    except (binascii.Error, ValueError) as exc:
        logger.debug("skipping payload with invalid base64: %s", exc)
        return None


def iter_payload_bytes(envelope: Envelope) -> Iterator[bytes]:
    """Yield decoded payload buffers, skipping entries that fail to decode."""
    if not envelope.payloads:
        logger.debug("no payloads in message for %s", envelope.uri)
        return
    for encoded in envelope.payloads:
        data = decode_payload(encoded)
        if data is None:
            continue
        logger.debug("decoded %d payload bytes for %s", len(data), envelope.uri)
        yield data


__all__ = ["decode_payload", "iter_payload_bytes"]
