"""Wiring: build the services from settings for one process."""

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from cenphone.application.services import AccountDirectory, CatalogCaptureService, OrderLedger
from cenphone.application.services.order_ledger import Clock
from cenphone.application.session import Session
from cenphone.application.use_cases import CheckoutWorkflow
from cenphone.data.uow import UnitOfWorkFactory, uow_factory
from cenphone.domain.catalog import PhoneCatalog
from cenphone.infrastructure.database import close_database, init_database
from cenphone.infrastructure.logging import configure_logging
from cenphone.infrastructure.security import PasswordHasher
from cenphone.settings import AppSettings, get_app_settings

logger = logging.getLogger(__name__)


@dataclass
class StoreContainer:
    """The three services plus what is needed to start a checkout."""

    settings: AppSettings
    session_factory: async_sessionmaker[AsyncSession]
    accounts: AccountDirectory
    catalog: CatalogCaptureService
    orders: OrderLedger
    clock: Optional[Clock] = None

    def new_checkout(self, session: Session) -> CheckoutWorkflow:
        return CheckoutWorkflow(
            accounts=self.accounts,
            catalog=self.catalog,
            orders=self.orders,
            session=session,
            clock=self.clock,
            currency=self.settings.store.currency,
        )

    async def close(self) -> None:
        await close_database()


def build_services(
    settings: AppSettings,
    session_factory: async_sessionmaker[AsyncSession],
    clock: Optional[Clock] = None,
) -> StoreContainer:
    """Wire services over an existing session factory."""
    factory: UnitOfWorkFactory = uow_factory(session_factory)
    return StoreContainer(
        settings=settings,
        session_factory=session_factory,
        accounts=AccountDirectory(
            factory, PasswordHasher(settings.store.password_hash_iterations)
        ),
        catalog=CatalogCaptureService(factory, PhoneCatalog()),
        orders=OrderLedger(
            factory,
            clock=clock,
            cancellation_window=settings.store.cancellation_window,
        ),
        clock=clock,
    )


async def build_store(
    settings: Optional[AppSettings] = None,
    clock: Optional[Clock] = None,
) -> StoreContainer:
    """Initialize logging and the database, then wire the services."""
    settings = settings or get_app_settings()
    configure_logging(settings.logging.level)

    session_factory = await init_database(settings.database)
    logger.info("✅ Store ready")
    return build_services(settings, session_factory, clock=clock)
