# Settings package
from .app_settings import AppSettings, get_app_settings, load_app_settings
from .database_settings import DatabaseSettings
from .logging_settings import LoggingSettings
from .store_settings import StoreSettings

__all__ = [
    "AppSettings",
    "DatabaseSettings",
    "LoggingSettings",
    "StoreSettings",
    "get_app_settings",
    "load_app_settings",
]
