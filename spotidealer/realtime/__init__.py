from .envelope import Envelope, parse_envelope, envelope_from_object

__all__ = ["Envelope", "envelope_from_object", "parse_envelope"]
