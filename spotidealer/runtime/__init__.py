from .logging import configure_logging
from .dependencies import DealerClient, build_dealer_client
from .settings_loader import load_settings

__all__ = ["DealerClient", "build_dealer_client", "configure_logging", "load_settings"]
