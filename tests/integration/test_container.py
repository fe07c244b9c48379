"""Tests for database bootstrap and service wiring."""
import pytest

from cenphone.container import build_store
from cenphone.infrastructure.database import close_database, get_session_factory
from cenphone.settings import AppSettings, DatabaseSettings, LoggingSettings, StoreSettings


@pytest.mark.asyncio
async def test_build_store_initializes_database():
    settings = AppSettings(
        database=DatabaseSettings(database_url="sqlite+aiosqlite:///:memory:"),
        store=StoreSettings(cancellation_window_hours=12, password_hash_iterations=1_000),
        logging=LoggingSettings(level="WARNING"),
    )
    store = await build_store(settings)
    try:
        assert get_session_factory() is store.session_factory
        assert store.orders.cancellation_window.total_seconds() == 12 * 3600
        assert await store.orders.fetch_orders() == []
        assert await store.catalog.list_products() == []
    finally:
        await store.close()

    with pytest.raises(RuntimeError):
        get_session_factory()


@pytest.mark.asyncio
async def test_close_database_is_safe_when_not_initialized():
    await close_database()
    with pytest.raises(RuntimeError):
        get_session_factory()
