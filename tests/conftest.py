"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio

from cenphone.application.dtos import RegisterUserRequest
from cenphone.application.services import AccountDirectory, CatalogCaptureService, OrderLedger
from cenphone.data.models import Base
from cenphone.data.uow import uow_factory
from cenphone.infrastructure.database import (
    create_engine_for,
    create_session_factory,
    create_tables,
)
from cenphone.infrastructure.security import PasswordHasher

# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


class FixedClock:
    """Clock whose time only moves when a test says so."""

    def __init__(self, now: datetime = NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


def make_registration(**overrides) -> RegisterUserRequest:
    data = {
        "full_name": "Jane Doe",
        "address": "1 King St",
        "city": "Toronto",
        "province": "ON",
        "country": "Canada",
        "telephone": "4165550100",
        "email": "jane@example.com",
        "username": "jane",
        "password": "s3cret",
        "confirm_password": "s3cret",
    }
    data.update(overrides)
    return RegisterUserRequest(**data)


@pytest_asyncio.fixture
async def test_engine():
    """Create test database engine."""
    engine = create_engine_for(TEST_DATABASE_URL)

    # Create all tables
    await create_tables(engine)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine):
    """Create test session factory."""
    yield create_session_factory(test_engine)


@pytest.fixture
def test_uow_factory(test_session_factory):
    return uow_factory(test_session_factory)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def hasher() -> PasswordHasher:
    # Low iteration count keeps the suite fast
    return PasswordHasher(iterations=1_000)


@pytest.fixture
def accounts(test_uow_factory, hasher) -> AccountDirectory:
    return AccountDirectory(test_uow_factory, hasher)


@pytest.fixture
def catalog_service(test_uow_factory) -> CatalogCaptureService:
    return CatalogCaptureService(test_uow_factory)


@pytest.fixture
def ledger(test_uow_factory, clock) -> OrderLedger:
    return OrderLedger(test_uow_factory, clock=clock)


@pytest.fixture
def registration() -> RegisterUserRequest:
    return make_registration()


@pytest_asyncio.fixture
async def customer_id(accounts, registration):
    """A registered user."""
    return await accounts.register(registration)


@pytest_asyncio.fixture
async def product(catalog_service, customer_id):
    """A captured iPhone 15 at $899."""
    return await catalog_service.capture_selection(
        make="iPhone",
        model="iPhone 15",
        color="Red",
        storage="128 GB",
        price="$899",
        owner_id=customer_id,
    )


@pytest.fixture
def registration_factory():
    """Build a RegisterUserRequest with some fields overridden."""
    return make_registration
