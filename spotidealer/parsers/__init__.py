from .volume import VolumeParser, read_raw_volume, volume_to_percent
from .payloads import decode_payload, iter_payload_bytes
from .mode_setting import ModeSetting, parse_mode_setting
from .content_settings import ContentSettingsParser, ContentSettingsUpdate, parse_content_settings

__all__ = [
    "ContentSettingsParser",
    "ContentSettingsUpdate",
    "ModeSetting",
    "VolumeParser",
    "decode_payload",
    "iter_payload_bytes",
    "parse_content_settings",
    "parse_mode_setting",
    "read_raw_volume",
    "volume_to_percent",
]
