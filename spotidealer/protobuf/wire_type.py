"""Protobuf wire types and the decoded tag pair."""

from __future__ import annotations

from enum import IntEnum
from dataclasses import dataclass


class WireType(IntEnum):
    VARINT = 0
    FIXED64 = 1
    LENGTH_DELIMITED = 2
    START_GROUP = 3
    END_GROUP = 4
    FIXED32 = 5


@dataclass(frozen=True, slots=True)
class WireTag:
    field_number: int
    wire_type: WireType


__all__ = ["WireTag", "WireType"]
