from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from cenphone.settings.database_settings import DatabaseSettings
from cenphone.settings.logging_settings import LoggingSettings
from cenphone.settings.store_settings import StoreSettings


class AppSettings(BaseModel):
    """Application settings aggregator."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore")

    database: DatabaseSettings
    store: StoreSettings
    logging: LoggingSettings


def load_app_settings() -> AppSettings:
    """Read every section from the environment (uncached)."""
    return AppSettings(
        database=DatabaseSettings(),
        store=StoreSettings(),
        logging=LoggingSettings(),
    )


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return load_app_settings()
