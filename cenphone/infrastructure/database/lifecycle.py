"""Database Lifecycle Management - Async Version"""

import logging
from typing import Optional

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from cenphone.data.models import Base
from cenphone.settings import DatabaseSettings

logger = logging.getLogger(__name__)

_async_engine: Optional[AsyncEngine] = None
_async_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine_for(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine for ``database_url``.

    SQLite shares one connection (StaticPool) and enforces foreign keys.
    """
    url = make_url(database_url)

    if url.drivername.startswith("sqlite"):
        engine = create_async_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_async_engine(url, echo=echo, pool_pre_ping=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def init_database(
    settings: Optional[DatabaseSettings] = None,
) -> async_sessionmaker[AsyncSession]:
    """Initialize async database engine, session factory and tables."""
    global _async_engine, _async_session_factory

    if _async_session_factory is not None:
        return _async_session_factory

    settings = settings or DatabaseSettings()
    logger.info(f"Initializing database: {settings.database_url}")

    _async_engine = create_engine_for(settings.database_url, echo=settings.echo_sql)
    _async_session_factory = create_session_factory(_async_engine)

    # Create tables
    await create_tables(_async_engine)

    logger.info("✅ Database initialized successfully")
    return _async_session_factory


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get async session factory."""
    if _async_session_factory is None:
        raise RuntimeError(
            "Database not initialized. Call init_database() first."
        )
    return _async_session_factory


async def close_database() -> None:
    """Close async database engine."""
    global _async_engine, _async_session_factory

    if _async_engine is not None:
        await _async_engine.dispose()
        logger.info("Database connections closed")

    _async_engine = None
    _async_session_factory = None
