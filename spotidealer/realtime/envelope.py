"""Decoded dealer frame.

Every field of a dealer frame is optional. Lookups return ``None`` on absence
or wrong type instead of raising.
"""

from __future__ import annotations

import logging
from typing import Any
from dataclasses import field, dataclass

import orjson

from spotidealer.config.envelope import (
    ENVELOPE_KEY_URI,
    ENVELOPE_KEY_TYPE,
    ENVELOPE_KEY_HEADERS,
    ENVELOPE_TYPE_MESSAGE,
    ENVELOPE_KEY_PAYLOADS,
)

logger = logging.getLogger(__name__)

_PREVIEW_CHARS = 200


@dataclass(frozen=True, slots=True)
class Envelope:
    type: str | None = None
    uri: str | None = None
    headers: dict[str, Any] = field(default_factory=dict)
    payloads: tuple[str, ...] = ()

    @property
    def is_message(self) -> bool:
        return self.type == ENVELOPE_TYPE_MESSAGE

    def header(self, name: str) -> str | None:
        """Case-insensitive string header lookup."""
        value = self.headers.get(name)
        if value is None:
            wanted = name.lower()
            for key, candidate in self.headers.items():
                if isinstance(key, str) and key.lower() == wanted:
                    value = candidate
                    break
        return value if isinstance(value, str) else None


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def envelope_from_object(obj: dict[str, Any]) -> Envelope:
    headers = obj.get(ENVELOPE_KEY_HEADERS)
    payloads = obj.get(ENVELOPE_KEY_PAYLOADS)
    return Envelope(
        type=_str_or_none(obj.get(ENVELOPE_KEY_TYPE)),
        uri=_str_or_none(obj.get(ENVELOPE_KEY_URI)),
        headers=dict(headers) if isinstance(headers, dict) else {},
        payloads=tuple(p for p in payloads if isinstance(p, str) and p.strip()) if isinstance(payloads, list) else (),
    )


def parse_envelope(raw: str | bytes) -> Envelope | None:
    """Decode one text frame; malformed or non-object JSON yields None."""
    try:
        obj = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        preview = raw[:_PREVIEW_CHARS] if isinstance(raw, str) else raw[:_PREVIEW_CHARS].decode("utf-8", "replace")
        logger.debug("dropping malformed dealer frame (%s): %s", exc, preview)
        return None
    if not isinstance(obj, dict):
        logger.debug("dropping non-object dealer frame of type %s", type(obj).__name__)
        return None
    return envelope_from_object(obj)


__all__ = ["Envelope", "envelope_from_object", "parse_envelope"]
