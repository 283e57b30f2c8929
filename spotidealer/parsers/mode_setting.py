"""ModeSetting submessages carried in ContentSettingsUpdate field 3.

Inferred layout::

    message ModeSetting {
      uint32 mode_id = 1;     // 4 = shuffle, 5 = smart shuffle
      ModeValue value = 2;
    }
    message ModeValue {
      // field 2 or 3 (varint) carries the flag; non-zero means enabled
    }
"""

from __future__ import annotations

from dataclasses import dataclass

from spotidealer.protobuf import WireType, WireReader
from spotidealer.config.protobuf import MODE_ID_FIELD, MODE_VALUE_FIELD, MODE_VALUE_FLAG_FIELDS


@dataclass(frozen=True, slots=True)
class ModeSetting:
    mode_id: int
    enabled: bool


def read_mode_value(data: bytes) -> bool | None:
    reader = WireReader(data)
    enabled: bool | None = None
    while reader.has_more():
        tag = reader.read_tag()
        if tag.wire_type is WireType.VARINT and tag.field_number in MODE_VALUE_FLAG_FIELDS:
            enabled = reader.read_int32() != 0
        else:
            reader.skip_last_field()
    return enabled


def parse_mode_setting(data: bytes) -> ModeSetting | None:
    """Decode one ModeSetting; None when the id or the flag is missing.

    Raises ``WireDecodeError`` on malformed bytes.
    """
    reader = WireReader(data)
    mode_id = 0
    enabled: bool | None = None
    while reader.has_more():
        tag = reader.read_tag()
        if tag.field_number == MODE_ID_FIELD and tag.wire_type is WireType.VARINT:
            mode_id = reader.read_int32()
        elif tag.field_number == MODE_VALUE_FIELD and tag.wire_type is WireType.LENGTH_DELIMITED:
            value = read_mode_value(reader.read_bytes())
            if value is not None:
                enabled = value
        else:
            reader.skip_last_field()

    if mode_id == 0 or enabled is None:
        return None
    return ModeSetting(mode_id=mode_id, enabled=enabled)


__all__ = ["ModeSetting", "parse_mode_setting", "read_mode_value"]
