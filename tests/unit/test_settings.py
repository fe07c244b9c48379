"""Test settings loading from environment variables."""
from datetime import timedelta

from cenphone.settings import (
    DatabaseSettings,
    LoggingSettings,
    StoreSettings,
    get_app_settings,
    load_app_settings,
)


def test_defaults(monkeypatch):
    for key in ("CENPHONE_DB_DATABASE_URL", "CENPHONE_STORE_CANCELLATION_WINDOW_HOURS", "CENPHONE_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)

    settings = load_app_settings()

    assert settings.database.database_url == "sqlite+aiosqlite:///./cenphone.db"
    assert settings.database.is_sqlite
    assert settings.store.cancellation_window == timedelta(hours=24)
    assert settings.store.currency == "CAD"
    assert settings.logging.level == "INFO"


def test_env_prefixes(monkeypatch):
    monkeypatch.setenv("CENPHONE_DB_DATABASE_URL", " sqlite+aiosqlite:///:memory: ")
    monkeypatch.setenv("CENPHONE_DB_ECHO_SQL", "true")
    monkeypatch.setenv("CENPHONE_STORE_CANCELLATION_WINDOW_HOURS", "48")
    monkeypatch.setenv("CENPHONE_STORE_PASSWORD_HASH_ITERATIONS", "1000")
    monkeypatch.setenv("CENPHONE_LOG_LEVEL", "debug")

    assert DatabaseSettings().database_url == "sqlite+aiosqlite:///:memory:"
    assert DatabaseSettings().echo_sql is True
    assert StoreSettings().cancellation_window == timedelta(hours=48)
    assert StoreSettings().password_hash_iterations == 1000
    assert LoggingSettings().level == "DEBUG"


def test_get_app_settings_is_cached():
    get_app_settings.cache_clear()
    try:
        assert get_app_settings() is get_app_settings()
    finally:
        get_app_settings.cache_clear()
