"""
End-to-end scenario through the wired container.

register -> authenticate -> capture "$899" -> order -> cancel -> fetch
"""
from decimal import Decimal

import pytest

from cenphone.application.dtos import DeliveryInfo, PaymentRequest, RegisterUserRequest
from cenphone.container import build_services
from cenphone.domain.enums import OrderStatus, PaymentMethod
from cenphone.settings import AppSettings, DatabaseSettings, LoggingSettings, StoreSettings


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        database=DatabaseSettings(database_url="sqlite+aiosqlite:///:memory:"),
        store=StoreSettings(password_hash_iterations=1_000),
        logging=LoggingSettings(level="WARNING"),
    )


@pytest.fixture
def store(settings, test_session_factory, clock):
    return build_services(settings, test_session_factory, clock=clock)


REGISTRATION = RegisterUserRequest(
    full_name="Sam Lee",
    address="10 Main St",
    city="Vancouver",
    province="BC",
    country="Canada",
    telephone="6045550100",
    email="a@b.com",
    username="ab",
    password="secret1",
    confirm_password="secret1",
)


@pytest.mark.asyncio
async def test_register_order_cancel_fetch(store):
    customer_id = await store.accounts.register(REGISTRATION)
    assert await store.accounts.authenticate("a@b.com", "secret1")

    product = await store.catalog.capture_selection("iPhone", "iPhone 15", "Red", "128 GB", "$899")
    assert product.price == Decimal("899.0")

    order = await store.orders.create_order(customer_id, product.product_id, product.price)
    assert order.status is OrderStatus.CONFIRMED

    canceled = await store.orders.cancel_order(order)
    assert canceled.status is OrderStatus.CANCELED

    orders = await store.orders.fetch_orders_for_user(customer_id)
    assert len(orders) == 1
    assert orders[0].status is OrderStatus.CANCELED
    assert orders[0].product.phone_model == "iPhone 15"


@pytest.mark.asyncio
async def test_checkout_from_container(store, clock):
    await store.accounts.register(REGISTRATION)
    session = await store.accounts.login("a@b.com", "secret1")

    checkout = store.new_checkout(session)
    await checkout.select_catalog_model("Google Pixel 9 Pro", "Charcoal", "512 GB")
    await checkout.confirm_delivery(
        DeliveryInfo(street_address="10 Main St", city="Vancouver", province="BC", country="Canada"),
        terms_accepted=True,
    )
    checkout.submit_payment(PaymentRequest(method=PaymentMethod.GOOGLE_PAY))
    confirmation = await checkout.confirm()

    assert confirmation.total_amount == Decimal("999.00")
    assert confirmation.payment_method == "Google Pay"

    clock.advance(hours=25)
    order = (await store.orders.fetch_orders_for_user(session.customer_id))[0]
    assert not order.can_cancel(clock(), store.orders.cancellation_window)
