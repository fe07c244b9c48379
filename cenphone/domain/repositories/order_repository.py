"""Repository interface for Order records."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.order import Order
from ..value_objects import CustomerId, OrderId, ProductId


class OrderRepository(ABC):
    """Abstract repository for Order persistence."""

    @abstractmethod
    async def add(self, order: Order) -> None:
        """Stage a new order for insert.

        Args:
            order: Order aggregate to persist
        """
        pass

    @abstractmethod
    async def get(self, order_id: OrderId) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: OrderId identifier

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Order]:
        """List every order in storage order."""
        pass

    @abstractmethod
    async def find_by_customer(self, customer_id: CustomerId) -> List[Order]:
        """List orders placed by one customer.

        Args:
            customer_id: Owner of the orders

        Returns:
            List of Order aggregates, storage order
        """
        pass

    @abstractmethod
    async def find_by_customer_and_product(
        self, customer_id: CustomerId, product_id: ProductId
    ) -> Optional[Order]:
        """Find the order linking a (customer, product) pair (duplicate prevention).

        Returns:
            Order if one exists, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, order: Order) -> None:
        pass

    @abstractmethod
    async def delete(self, order_id: OrderId) -> bool:
        """Delete order.

        Returns:
            True if a row was removed, False if it did not exist
        """
        pass
