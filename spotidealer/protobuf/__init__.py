from .wire import WireReader
from .wire_type import WireTag, WireType

__all__ = ["WireReader", "WireTag", "WireType"]
