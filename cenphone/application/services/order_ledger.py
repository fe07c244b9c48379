"""Application service for Order operations."""

import logging
from datetime import datetime, timedelta
from typing import Callable, List, Optional, Union

from cenphone.data.uow import UnitOfWorkFactory
from cenphone.domain.entities import CANCELLATION_WINDOW, Order, utc_now
from cenphone.domain.enums import OrderStatus
from cenphone.domain.exceptions import (
    DuplicateOrderError,
    NotFoundError,
    OrderError,
)
from cenphone.domain.value_objects import CustomerId, OrderId, ProductId, parse_price
from cenphone.domain.value_objects.price import PriceInput

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
OrderRef = Union[Order, OrderId]


def _order_id(order: OrderRef) -> OrderId:
    return order.order_id if isinstance(order, Order) else order


class OrderLedger:
    """
    Application service for orchestrating order operations.

    Responsibilities:
    - Resolve customer and product inside the creating transaction
    - Guard against a second order for the same (customer, product)
    - Own the cancellation window rule
    - Handle transactions via UoW
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        clock: Optional[Clock] = None,
        cancellation_window: timedelta = CANCELLATION_WINDOW,
    ) -> None:
        """Initialize order ledger.

        Args:
            uow_factory: Callable returning a fresh Unit of Work
            clock: Returns the current aware UTC time (injectable for tests)
            cancellation_window: How long after ordering a cancel is allowed
        """
        self._uow_factory = uow_factory
        self._clock = clock or utc_now
        self._window = cancellation_window

    @property
    def cancellation_window(self) -> timedelta:
        return self._window

    async def create_order(
        self,
        customer_id: CustomerId,
        product_id: ProductId,
        total_amount: PriceInput,
        status: Union[OrderStatus, str] = OrderStatus.CONFIRMED,
    ) -> Order:
        """Create a new order.

        Args:
            customer_id: Ordering customer
            product_id: Product being ordered
            total_amount: Price snapshot
            status: Initial status (Confirmed unless stated)

        Returns:
            The persisted Order with its product snapshot

        Raises:
            NotFoundError: If the user or product does not exist
            DuplicateOrderError: If the pair already has an order
            PersistenceError: If the commit fails (rolled back)
        """
        total = parse_price(total_amount)
        status = OrderStatus.parse(status)

        async with self._uow_factory() as uow:
            # 1. Resolve references
            if await uow.users.get(customer_id) is None:
                raise NotFoundError("User", customer_id)
            product = await uow.products.get(product_id)
            if product is None:
                raise NotFoundError("Product", product_id)

            # 2. Check for duplicates in the same transaction as the insert
            existing = await uow.orders.find_by_customer_and_product(customer_id, product_id)
            if existing is not None:
                logger.warning(
                    f"Duplicate order rejected for customer {customer_id}, product {product_id}"
                )
                raise DuplicateOrderError(customer_id, product_id)

            # 3. Persist and commit
            order = Order.create(
                customer_id=customer_id,
                product_id=product_id,
                total_amount=total,
                status=status,
                order_date=self._clock(),
            )
            await uow.orders.add(order)
            await uow.commit()

        order.product = product
        logger.info(f"✅ Order {order.order_id} created ({order.status.value}, {product.display_price})")
        return order

    async def get_order(self, order_id: OrderId) -> Order:
        async with self._uow_factory() as uow:
            order = await uow.orders.get(order_id)
        if order is None:
            raise NotFoundError("Order", order_id)
        return order

    async def find_order(self, customer_id: CustomerId, product_id: ProductId) -> Optional[Order]:
        async with self._uow_factory() as uow:
            return await uow.orders.find_by_customer_and_product(customer_id, product_id)

    async def fetch_orders(self) -> List[Order]:
        async with self._uow_factory() as uow:
            return await uow.orders.list_all()

    async def fetch_orders_for_user(self, customer_id: CustomerId) -> List[Order]:
        async with self._uow_factory() as uow:
            return await uow.orders.find_by_customer(customer_id)

    async def search_orders(self, customer_id: CustomerId, text: str = "") -> List[Order]:
        """Orders of one customer whose id, make or model contains ``text`` (case-insensitive)."""
        orders = await self.fetch_orders_for_user(customer_id)
        needle = (text or "").strip()
        return [order for order in orders if order.matches(needle)]

    async def update_order(
        self,
        order: OrderRef,
        total_amount: PriceInput,
        status: Union[OrderStatus, str],
    ) -> Order:
        """Overwrite total and status. No transition rules apply.

        Raises:
            NotFoundError: If the order does not exist
            PersistenceError: If the commit fails
        """
        order_id = _order_id(order)
        total = parse_price(total_amount)
        status = OrderStatus.parse(status)

        async with self._uow_factory() as uow:
            stored = await uow.orders.get(order_id)
            if stored is None:
                raise NotFoundError("Order", order_id)
            stored.update(total, status)
            await uow.orders.update(stored)
            await uow.commit()

        logger.info(f"Order {order_id} updated: {stored.status.value}, {stored.total_amount}")
        return stored

    async def cancel_order(self, order: OrderRef) -> Order:
        """Cancel inside the window.

        Raises:
            NotFoundError: If the order does not exist
            MissingOrderDateError: If the order has no date
            OrderAlreadyCanceledError: If it is already canceled
            CancellationWindowExpiredError: If ``now - order_date >= window``
        """
        order_id = _order_id(order)

        async with self._uow_factory() as uow:
            # Check and write in one transaction
            stored = await uow.orders.get(order_id)
            if stored is None:
                raise NotFoundError("Order", order_id)
            try:
                stored.ensure_cancelable(self._clock(), self._window)
            except OrderError as e:
                logger.warning(f"Cancel rejected: {e}")
                raise

            stored.update(stored.total_amount, OrderStatus.CANCELED)
            await uow.orders.update(stored)
            await uow.commit()

        logger.info(f"✅ Order {order_id} canceled")
        return stored

    async def delete_order(self, order: OrderRef) -> None:
        """Hard delete. The product row is kept."""
        order_id = _order_id(order)
        async with self._uow_factory() as uow:
            if not await uow.orders.delete(order_id):
                raise NotFoundError("Order", order_id)
            await uow.commit()

        logger.info(f"Order {order_id} deleted")
