"""Field numbers and value ranges for the wire-walked dealer payloads.

These schemas are inferred from captured traffic; there is no published
descriptor for them.
"""

from __future__ import annotations

# SetVolumeCommand
VOLUME_FIELD = 1
VOLUME_PERCENT_MAX = 100
VOLUME_RAW_MAX = 65535

# ContentSettingsUpdate
CONTENT_CONTEXT_URI_FIELD = 2
CONTENT_MODE_SETTING_FIELD = 3

# ModeSetting / ModeValue
MODE_ID_FIELD = 1
MODE_VALUE_FIELD = 2
MODE_VALUE_FLAG_FIELDS = frozenset({2, 3})

MODE_ID_SHUFFLE = 4
MODE_ID_SMART_SHUFFLE = 5

# Derived shuffle mode
SHUFFLE_MODE_OFF = 0
SHUFFLE_MODE_SHUFFLE = 1
SHUFFLE_MODE_SMART = 2

__all__ = [
    "VOLUME_FIELD",
    "VOLUME_PERCENT_MAX",
    "VOLUME_RAW_MAX",
    "CONTENT_CONTEXT_URI_FIELD",
    "CONTENT_MODE_SETTING_FIELD",
    "MODE_ID_FIELD",
    "MODE_VALUE_FIELD",
    "MODE_VALUE_FLAG_FIELDS",
    "MODE_ID_SHUFFLE",
    "MODE_ID_SMART_SHUFFLE",
    "SHUFFLE_MODE_OFF",
    "SHUFFLE_MODE_SHUFFLE",
    "SHUFFLE_MODE_SMART",
]
