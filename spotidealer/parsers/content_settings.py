"""ContentSettingsUpdate payloads (shuffle and smart shuffle flags)."""

from __future__ import annotations

import logging
from dataclasses import field, dataclass

from spotidealer.state import SessionState
from spotidealer.events import SessionEvents
from spotidealer.errors import WireDecodeError
from spotidealer.protobuf import WireType, WireReader
from spotidealer.config.events import SHUFFLE_MODE_EVENT
from spotidealer.realtime.envelope import Envelope
from spotidealer.config.protobuf import (
    MODE_ID_SHUFFLE,
    MODE_ID_SMART_SHUFFLE,
    CONTENT_CONTEXT_URI_FIELD,
    CONTENT_MODE_SETTING_FIELD,
)

from .payloads import iter_payload_bytes
from .mode_setting import ModeSetting, parse_mode_setting

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ContentSettingsUpdate:
    context_uri: str | None = None
    modes: list[ModeSetting] = field(default_factory=list)
    shuffle: bool | None = None
    smart_shuffle: bool | None = None

    @property
    def has_shuffle_flags(self) -> bool:
        return self.shuffle is not None or self.smart_shuffle is not None


def parse_content_settings(data: bytes) -> ContentSettingsUpdate:
    """Walk a ContentSettingsUpdate, collecting the shuffle-related ModeSettings.

    A malformed ModeSetting is skipped on its own; malformed top-level framing
    raises ``WireDecodeError``.
    """
    update = ContentSettingsUpdate()
    reader = WireReader(data)
    while reader.has_more():
        tag = reader.read_tag()
        if tag.field_number == CONTENT_CONTEXT_URI_FIELD and tag.wire_type is WireType.LENGTH_DELIMITED:
            update.context_uri = reader.read_bytes().decode("utf-8", "replace")
        elif tag.field_number == CONTENT_MODE_SETTING_FIELD and tag.wire_type is WireType.LENGTH_DELIMITED:
            raw_setting = reader.read_bytes()
            try:
                setting = parse_mode_setting(raw_setting)
            except WireDecodeError as exc:
                logger.debug("skipping malformed ModeSetting: %s", exc)
                continue
            if setting is None:
                continue
            update.modes.append(setting)
            # Later settings for the same id win.
            if setting.mode_id == MODE_ID_SHUFFLE:
                update.shuffle = setting.enabled
            elif setting.mode_id == MODE_ID_SMART_SHUFFLE:
                update.smart_shuffle = setting.enabled
        else:
            reader.skip_last_field()
    return update


class ContentSettingsParser:
    def __init__(self, state: SessionState, events: SessionEvents) -> None:
        self._state = state
        self._events = events

    def handle(self, envelope: Envelope) -> bool:
        """Apply every decodable payload; returns True if any shuffle value changed."""
        changed = False
        for data in iter_payload_bytes(envelope):
            try:
                update = parse_content_settings(data)
            except WireDecodeError as exc:
                logger.debug("malformed ContentSettingsUpdate payload: %s", exc)
                continue
            if not update.has_shuffle_flags:
                logger.debug("ContentSettingsUpdate for %s carried no shuffle settings", update.context_uri)
                continue
            changed = self._apply(update) or changed
        return changed

    def _apply(self, update: ContentSettingsUpdate) -> bool:
        result = self._state.apply_shuffle(shuffle=update.shuffle, smart_shuffle=update.smart_shuffle)
        if not result.any:
            return False

        snapshot = self._state.snapshot()
        logger.debug(
            "shuffle updated for %s: shuffle=%s smart=%s mode=%d",
            update.context_uri,
            snapshot.shuffle_enabled,
            snapshot.smart_shuffle_enabled,
            snapshot.shuffle_mode,
        )
        if result.shuffle_changed:
            self._events.on_shuffle(snapshot.shuffle_enabled)
        self._events.on_shuffle_mode(snapshot.shuffle_mode)
        self._events.trigger(SHUFFLE_MODE_EVENT)
        return True


__all__ = ["ContentSettingsParser", "ContentSettingsUpdate", "parse_content_settings"]
