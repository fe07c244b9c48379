from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="CENPHONE_LOG_",
    )

    level: str = "INFO"  # CENPHONE_LOG_LEVEL

    @field_validator("level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.strip().upper()
