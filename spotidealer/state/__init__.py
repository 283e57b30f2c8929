from .session import SessionState, derive_shuffle_mode
from .settings import AppSettings, DealerSettings, SpotifyApiSettings
from .snapshot import ShuffleChange, SessionSnapshot

__all__ = [
    "AppSettings",
    "DealerSettings",
    "SessionSnapshot",
    "SessionState",
    "ShuffleChange",
    "SpotifyApiSettings",
    "derive_shuffle_mode",
]
