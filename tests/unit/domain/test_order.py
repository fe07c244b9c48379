"""Tests for the Order aggregate and its cancellation rule."""
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from cenphone.domain.entities import CANCELLATION_WINDOW, Order, Product
from cenphone.domain.enums import OrderStatus
from cenphone.domain.exceptions import (
    CancellationWindowExpiredError,
    MissingOrderDateError,
    OrderAlreadyCanceledError,
)
from cenphone.domain.value_objects import CustomerId, OrderId, ProductId

PLACED = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def make_order(**overrides) -> Order:
    data = {
        "customer_id": CustomerId.generate(),
        "product_id": ProductId.generate(),
        "total_amount": Decimal("899.00"),
        "order_date": PLACED,
    }
    data.update(overrides)
    return Order.create(**data)


class TestOrderCreation:
    def test_create_defaults_to_confirmed(self):
        order = make_order()
        assert order.status is OrderStatus.CONFIRMED
        assert order.order_date == PLACED
        assert isinstance(order.order_id, OrderId)

    def test_create_without_date_uses_now(self):
        before = datetime.now(timezone.utc)
        order = Order.create(CustomerId.generate(), ProductId.generate(), Decimal("1"))
        assert order.order_date >= before
        assert order.order_date.tzinfo is not None

    def test_string_status_is_parsed(self):
        order = make_order(status="cancelled")
        assert order.status is OrderStatus.CANCELED

    def test_negative_total_rejected(self):
        with pytest.raises(ValueError):
            make_order(total_amount=Decimal("-1"))

    def test_short_order_number(self):
        order = make_order()
        assert order.order_id.short == str(order.order_id)[:8].upper()


class TestOrderUpdate:
    def test_any_status_may_follow_any_other(self):
        order = make_order(status=OrderStatus.DELIVERED)
        order.update(Decimal("10"), OrderStatus.CONFIRMED)
        assert order.status is OrderStatus.CONFIRMED
        assert order.total_amount == Decimal("10")


class TestCancellationWindow:
    """The window is 24 hours and its end is exclusive."""

    def test_default_window_is_24_hours(self):
        assert CANCELLATION_WINDOW == timedelta(hours=24)

    def test_cancelable_just_inside_window(self):
        order = make_order()
        now = PLACED + timedelta(hours=23, minutes=59, seconds=59)
        order.ensure_cancelable(now)
        assert order.can_cancel(now)

    def test_exactly_24_hours_is_expired(self):
        order = make_order()
        with pytest.raises(CancellationWindowExpiredError) as exc_info:
            order.ensure_cancelable(PLACED + timedelta(hours=24))
        assert exc_info.value.order_id == order.order_id
        assert exc_info.value.window == CANCELLATION_WINDOW

    def test_custom_window(self):
        order = make_order()
        assert not order.can_cancel(PLACED + timedelta(hours=2), window=timedelta(hours=1))

    def test_missing_date_checked_first(self):
        order = make_order(status=OrderStatus.CANCELED)
        order.order_date = None
        with pytest.raises(MissingOrderDateError):
            order.ensure_cancelable(PLACED)

    def test_already_canceled_checked_before_window(self):
        order = make_order(status=OrderStatus.CANCELED)
        with pytest.raises(OrderAlreadyCanceledError):
            order.ensure_cancelable(PLACED + timedelta(days=3))


class TestOrderSearch:
    def test_matches_product_make_and_model(self):
        order = make_order()
        order.product = Product(
            product_id=order.product_id,
            phone_make="Samsung",
            phone_model="Galaxy S23",
            phone_color="Black",
            storage_capacity="128 GB",
            price=Decimal("699"),
        )
        assert order.matches("galaxy")
        assert order.matches("SAMSUNG")
        assert not order.matches("pixel")

    def test_matches_order_id(self):
        order = make_order()
        assert order.matches(str(order.order_id)[:6].upper())

    def test_empty_text_matches_everything(self):
        assert make_order().matches("")
