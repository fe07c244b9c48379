"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional

from ..enums import OrderStatus
from ..exceptions import (
    CancellationWindowExpiredError,
    MissingOrderDateError,
    OrderAlreadyCanceledError,
)
from ..value_objects import CustomerId, OrderId, ProductId
from .product import Product

CANCELLATION_WINDOW = timedelta(hours=24)


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass
class Order:
    """
    Association between one customer and one captured product.

    ``product`` is a read-only snapshot loaded alongside the order for
    display and search; the reference that matters is ``product_id``.
    """
    order_id: OrderId
    customer_id: CustomerId
    product_id: ProductId
    total_amount: Decimal
    status: OrderStatus = OrderStatus.CONFIRMED
    order_date: Optional[datetime] = None
    product: Optional[Product] = None

    def __post_init__(self):
        if not isinstance(self.total_amount, Decimal):
            self.total_amount = Decimal(str(self.total_amount))
        if self.total_amount < 0:
            raise ValueError(f"Order total cannot be negative: {self.total_amount}")
        self.status = OrderStatus.parse(self.status)

    @classmethod
    def create(
        cls,
        customer_id: CustomerId,
        product_id: ProductId,
        total_amount: Decimal,
        status: OrderStatus = OrderStatus.CONFIRMED,
        order_date: Optional[datetime] = None,
    ) -> "Order":
        """
        Factory method to create a new Order.

        Args:
            customer_id: Ordering customer
            product_id: Ordered product
            total_amount: Price snapshot at order time
            status: Initial status
            order_date: Creation time (defaults to now, UTC)

        Returns:
            New Order with a fresh identifier
        """
        return cls(
            order_id=OrderId.generate(),
            customer_id=customer_id,
            product_id=product_id,
            total_amount=total_amount,
            status=status,
            order_date=order_date or utc_now(),
        )

    def update(self, total_amount: Decimal, status: OrderStatus) -> None:
        """Overwrite total and status. Any status may follow any other."""
        if not isinstance(total_amount, Decimal):
            total_amount = Decimal(str(total_amount))
        if total_amount < 0:
            raise ValueError(f"Order total cannot be negative: {total_amount}")
        self.total_amount = total_amount
        self.status = OrderStatus.parse(status)

    def ensure_cancelable(
        self,
        now: datetime,
        window: timedelta = CANCELLATION_WINDOW,
    ) -> None:
        """
        Business rule: orders can be canceled only inside the window.

        The boundary itself is closed: an order exactly ``window`` old
        is expired.

        Raises:
            MissingOrderDateError: If the order has no date
            OrderAlreadyCanceledError: If the order is already canceled
            CancellationWindowExpiredError: If ``now - order_date >= window``
        """
        if self.order_date is None:
            raise MissingOrderDateError(self.order_id)
        if self.status.is_canceled:
            raise OrderAlreadyCanceledError(self.order_id)
        if now - self.order_date >= window:
            raise CancellationWindowExpiredError(self.order_id, self.order_date, window, now)

    def can_cancel(self, now: datetime, window: timedelta = CANCELLATION_WINDOW) -> bool:
        try:
            self.ensure_cancelable(now, window)
        except (MissingOrderDateError, OrderAlreadyCanceledError, CancellationWindowExpiredError):
            return False
        return True

    def matches(self, text: str) -> bool:
        """Search used by the order history: order id, product make or model."""
        if not text:
            return True
        needle = text.lower()
        if needle in str(self.order_id).lower():
            return True
        return self.product is not None and self.product.matches(needle)
