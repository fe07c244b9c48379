"""SQLAlchemy implementation of OrderRepository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cenphone.domain.entities import Order
from cenphone.domain.exceptions import NotFoundError
from cenphone.domain.repositories import OrderRepository
from cenphone.domain.value_objects import CustomerId, OrderId, ProductId

from ..mappers import OrderMapper
from ..models import OrderModel


class SqlAlchemyOrderRepository(OrderRepository):
    """Concrete implementation of OrderRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def add(self, order: Order) -> None:
        """Stage order for insert.

        Args:
            order: Order domain aggregate
        """
        self._session.add(OrderMapper.to_persistence(order))
        await self._session.flush()  # Propagate to DB without committing

    async def get(self, order_id: OrderId) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: OrderId identifier

        Returns:
            Order if found, None otherwise
        """
        model = await self._session.get(OrderModel, str(order_id))
        return OrderMapper.to_domain(model) if model else None

    async def list_all(self) -> List[Order]:
        result = await self._session.execute(select(OrderModel))
        return [OrderMapper.to_domain(model) for model in result.scalars().all()]

    async def find_by_customer(self, customer_id: CustomerId) -> List[Order]:
        """List orders of one customer.

        Args:
            customer_id: Owner of the orders

        Returns:
            List of Order aggregates
        """
        result = await self._session.execute(
            select(OrderModel).where(OrderModel.customer_id == str(customer_id))
        )
        return [OrderMapper.to_domain(model) for model in result.scalars().all()]

    async def find_by_customer_and_product(
        self, customer_id: CustomerId, product_id: ProductId
    ) -> Optional[Order]:
        result = await self._session.execute(
            select(OrderModel).where(
                OrderModel.customer_id == str(customer_id),
                OrderModel.product_id == str(product_id),
            )
        )
        model = result.scalar_one_or_none()
        return OrderMapper.to_domain(model) if model else None

    async def update(self, order: Order) -> None:
        model = await self._session.get(OrderModel, str(order.order_id))
        if model is None:
            raise NotFoundError("Order", order.order_id)
        OrderMapper.update_persistence(order, model)
        await self._session.flush()

    async def delete(self, order_id: OrderId) -> bool:
        model = await self._session.get(OrderModel, str(order_id))
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
