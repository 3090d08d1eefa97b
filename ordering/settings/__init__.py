# Settings package
from ordering.settings.ordering_settings import OrderingSettings, get_settings

__all__ = ["OrderingSettings", "get_settings"]
