"""Persistence gateway - the transactional boundary every service works through."""

from abc import ABC, abstractmethod

from .order_repository import OrderRepository
from .product_repository import ProductRepository
from .user_repository import UserRepository


class PersistenceGateway(ABC):
    """
    Unit of Work over the three record kinds.

    Usage:
        async with gateway_factory() as gateway:
            user = await gateway.users.get(customer_id)
            await gateway.orders.add(order)
            await gateway.commit()

    Leaving the ``async with`` block without committing discards staged
    changes; leaving it with an exception rolls back.
    """

    @property
    @abstractmethod
    def users(self) -> UserRepository:
        pass

    @property
    @abstractmethod
    def products(self) -> ProductRepository:
        pass

    @property
    @abstractmethod
    def orders(self) -> OrderRepository:
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Durably commit staged changes.

        Raises:
            PersistenceError: If the store rejects the commit (after rollback)
        """
        pass

    @abstractmethod
    async def rollback(self) -> None:
        pass

    @abstractmethod
    async def __aenter__(self) -> "PersistenceGateway":
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        pass
