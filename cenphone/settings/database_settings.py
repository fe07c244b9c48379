from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """
    Embedded store settings.

    Loaded from environment variables or .env file:
      CENPHONE_DB_DATABASE_URL, CENPHONE_DB_ECHO_SQL
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="CENPHONE_DB_",
    )

    database_url: str = "sqlite+aiosqlite:///./cenphone.db"

    # Echo SQL (for debugging)
    echo_sql: bool = False

    @field_validator("database_url")
    @classmethod
    def _strip_url(cls, v: str) -> str:
        return v.strip()

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")
