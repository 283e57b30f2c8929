"""Minimal protobuf wire-format cursor.

Walks messages structurally without a compiled schema: read a tag, then either
read the value with the matching typed reader or skip it. Unknown field numbers
are always skippable; malformed input raises ``WireDecodeError``.
"""

from __future__ import annotations

from spotidealer.errors import WireDecodeError

from .wire_type import WireTag, WireType

_MAX_VARINT_BYTES = 10
_UINT64_MASK = (1 << 64) - 1


class WireReader:
    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._buf = memoryview(bytes(data))
        self._pos = 0
        self._last_tag: WireTag | None = None

    @property
    def position(self) -> int:
        return self._pos

    def has_more(self) -> bool:
        return self._pos < len(self._buf)

    def read_tag(self) -> WireTag:
        offset = self._pos
        key = self.read_varint()
        field_number = key >> 3
        if field_number == 0:
            raise WireDecodeError("field number 0 is invalid", offset)
        try:
            wire_type = WireType(key & 0x7)
        except ValueError:
            raise WireDecodeError(f"unknown wire type {key & 0x7}", offset) from None
        self._last_tag = WireTag(field_number, wire_type)
        return self._last_tag

    def read_varint(self) -> int:
        result = 0
        shift = 0
        start = self._pos
        for _ in range(_MAX_VARINT_BYTES):
            if self._pos >= len(self._buf):
                raise WireDecodeError("truncated varint", start)
            byte = self._buf[self._pos]
            self._pos += 1
            result |= (byte & 0x7F) << shift
            if not byte & 0x80:
                return result & _UINT64_MASK
            shift += 7
        raise WireDecodeError("varint too long", start)

    def read_uint32(self) -> int:
        return self.read_varint() & 0xFFFFFFFF

    def read_int32(self) -> int:
        # Negative int32 values are sign-extended to 10 bytes on the wire.
        value = self.read_varint() & 0xFFFFFFFF
        return value - (1 << 32) if value & 0x80000000 else value

    def read_bool(self) -> bool:
        return self.read_varint() != 0

    def read_fixed(self, size: int) -> bytes:
        if size < 0 or self._pos + size > len(self._buf):
            raise WireDecodeError(f"need {size} bytes, {len(self._buf) - self._pos} left", self._pos)
        chunk = bytes(self._buf[self._pos : self._pos + size])
        self._pos += size
        return chunk

    def read_bytes(self) -> bytes:
        length = self.read_varint()
        return self.read_fixed(length)

    def read_string(self) -> str:
        offset = self._pos
        raw = self.read_bytes()
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            raise WireDecodeError("invalid utf-8 in string field", offset) from None

    def skip_last_field(self) -> None:
        """Skip the value belonging to the most recently read tag."""
        tag = self._last_tag
        if tag is None:
            raise WireDecodeError("skip requested before any tag was read", self._pos)
        self._skip_value(tag)

    def _skip_value(self, tag: WireTag) -> None:
        if tag.wire_type is WireType.VARINT:
            self.read_varint()
        elif tag.wire_type is WireType.FIXED64:
            self.read_fixed(8)
        elif tag.wire_type is WireType.FIXED32:
            self.read_fixed(4)
        elif tag.wire_type is WireType.LENGTH_DELIMITED:
            self.read_bytes()
        elif tag.wire_type is WireType.START_GROUP:
            self._skip_group(tag.field_number)
        else:
            raise WireDecodeError(f"unexpected end-group for field {tag.field_number}", self._pos)

    def _skip_group(self, field_number: int) -> None:
        while True:
            if not self.has_more():
                raise WireDecodeError(f"unterminated group for field {field_number}", self._pos)
            inner = self.read_tag()
            if inner.wire_type is WireType.END_GROUP:
                if inner.field_number != field_number:
                    raise WireDecodeError(f"mismatched end-group {inner.field_number}", self._pos)
                return
            self._skip_value(inner)


__all__ = ["WireReader"]
