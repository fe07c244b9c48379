"""Repository interfaces."""

from .gateway import PersistenceGateway
from .order_repository import OrderRepository
from .product_repository import ProductRepository
from .user_repository import UserRepository

__all__ = [
    "OrderRepository",
    "PersistenceGateway",
    "ProductRepository",
    "UserRepository",
]
