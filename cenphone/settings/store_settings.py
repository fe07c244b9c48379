from __future__ import annotations

from datetime import timedelta

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreSettings(BaseSettings):
    """Business-rule knobs for the storefront (CENPHONE_STORE_*)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="CENPHONE_STORE_",
    )

    cancellation_window_hours: int = Field(24, gt=0)
    password_hash_iterations: int = Field(390_000, ge=1)
    currency: str = "CAD"

    @property
    def cancellation_window(self) -> timedelta:
        return timedelta(hours=self.cancellation_window_hours)
