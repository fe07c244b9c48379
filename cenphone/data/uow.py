"""Unit of Work pattern for atomic transactions."""

import logging
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from cenphone.domain.exceptions import PersistenceError
from cenphone.domain.repositories import PersistenceGateway

from .repositories import (
    SqlAlchemyOrderRepository,
    SqlAlchemyProductRepository,
    SqlAlchemyUserRepository,
)

logger = logging.getLogger(__name__)


class UnitOfWork(PersistenceGateway):
    """
    Unit of Work pattern for atomic transactions.

    Responsibilities:
    1. Manage SQLAlchemy session lifecycle
    2. Atomic commit/rollback of all repository operations
    3. Translate store failures into PersistenceError
    4. Lazy initialization of repositories
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

        # Lazy-loaded repositories
        self._user_repository: Optional[SqlAlchemyUserRepository] = None
        self._product_repository: Optional[SqlAlchemyProductRepository] = None
        self._order_repository: Optional[SqlAlchemyOrderRepository] = None

    async def __aenter__(self) -> "UnitOfWork":
        """Start transaction scope."""
        self._session = self._session_factory()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Rollback on exception, then close the session.

        Store errors raised inside the block surface as PersistenceError.
        """
        try:
            if exc_type is not None:
                await self._session.rollback()
        finally:
            await self._session.close()
            self._session = None
            self._user_repository = None
            self._product_repository = None
            self._order_repository = None

        if exc_val is not None and isinstance(exc_val, SQLAlchemyError):
            logger.error(f"❌ Transaction failed: {exc_val}")
            raise PersistenceError("complete transaction", str(exc_val)) from exc_val

    def _require_session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._session

    @property
    def users(self) -> SqlAlchemyUserRepository:
        """Lazy-load user repository."""
        session = self._require_session()
        if self._user_repository is None:
            self._user_repository = SqlAlchemyUserRepository(session)
        return self._user_repository

    @property
    def products(self) -> SqlAlchemyProductRepository:
        """Lazy-load product repository."""
        session = self._require_session()
        if self._product_repository is None:
            self._product_repository = SqlAlchemyProductRepository(session)
        return self._product_repository

    @property
    def orders(self) -> SqlAlchemyOrderRepository:
        """Lazy-load order repository."""
        session = self._require_session()
        if self._order_repository is None:
            self._order_repository = SqlAlchemyOrderRepository(session)
        return self._order_repository

    async def commit(self) -> None:
        """Commit all pending changes.

        Raises:
            PersistenceError: If the commit fails (the session is rolled back first)
        """
        session = self._require_session()
        try:
            await session.commit()
        except SQLAlchemyError as e:
            logger.error(f"❌ Commit failed: {e}")
            await session.rollback()
            raise PersistenceError("commit", str(e)) from e

    async def rollback(self) -> None:
        """Rollback all pending changes."""
        await self._require_session().rollback()
        logger.warning("Transaction rolled back")


UnitOfWorkFactory = Callable[[], PersistenceGateway]


def create_uow(session_factory: async_sessionmaker) -> UnitOfWork:
    """Create a new Unit of Work instance.

    Args:
        session_factory: SQLAlchemy async session factory

    Returns:
        UnitOfWork instance
    """
    return UnitOfWork(session_factory)


def uow_factory(session_factory: async_sessionmaker) -> UnitOfWorkFactory:
    """Bind a session factory so services can open a fresh Unit of Work per call."""
    return lambda: create_uow(session_factory)
