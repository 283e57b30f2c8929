"""SetVolumeCommand payloads (connect-state volume topic)."""

from __future__ import annotations

import logging

from spotidealer.state import SessionState
from spotidealer.events import SessionEvents
from spotidealer.errors import WireDecodeError
from spotidealer.protobuf import WireType, WireReader
from spotidealer.config.events import VOLUME_EVENT
from spotidealer.realtime.envelope import Envelope
from spotidealer.config.protobuf import VOLUME_FIELD, VOLUME_RAW_MAX, VOLUME_PERCENT_MAX

from .payloads import iter_payload_bytes

logger = logging.getLogger(__name__)


def read_raw_volume(data: bytes) -> int | None:
    """Return the first field-1 varint of a SetVolumeCommand, or None if absent."""
    reader = WireReader(data)
    while reader.has_more():
        tag = reader.read_tag()
        if tag.field_number == VOLUME_FIELD and tag.wire_type is WireType.VARINT:
            return reader.read_uint32()
        reader.skip_last_field()
    return None


def volume_to_percent(raw: int) -> int:
    """Map a volume reading to 0-100.

    Values up to 100 are already percentages; anything larger is on the
    0-65535 connect-state scale.
    """
    if raw <= VOLUME_PERCENT_MAX:
        percent = raw
    else:
        percent = round(raw * 100 / VOLUME_RAW_MAX)
    return max(0, min(VOLUME_PERCENT_MAX, percent))


class VolumeParser:
    def __init__(self, state: SessionState, events: SessionEvents) -> None:
        self._state = state
        self._events = events

    def handle(self, envelope: Envelope) -> bool:
        """Apply every decodable payload; returns True if the volume changed."""
        changed = False
        for data in iter_payload_bytes(envelope):
            try:
                raw = read_raw_volume(data)
            except WireDecodeError as exc:
                logger.debug("malformed SetVolumeCommand payload: %s", exc)
                continue
            if raw is None:
                logger.debug("SetVolumeCommand payload has no volume field")
                continue

            percent = volume_to_percent(raw)
            if not self._state.set_volume(percent):
                continue
            changed = True
            logger.debug("volume updated: raw=%d mapped=%d%%", raw, percent)
            self._events.on_volume(percent)
            self._events.trigger(VOLUME_EVENT)
        return changed


__all__ = ["VolumeParser", "read_raw_volume", "volume_to_percent"]
