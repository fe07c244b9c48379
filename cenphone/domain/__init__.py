"""Domain layer - pure domain models and interfaces."""

from .entities import Order, Product, User
from .enums import OrderStatus, PaymentMethod
from .repositories import (
    OrderRepository,
    PersistenceGateway,
    ProductRepository,
    UserRepository,
)
from .value_objects import CustomerId, OrderId, ProductId

__all__ = [
    "CustomerId",
    "Order",
    "OrderId",
    "OrderRepository",
    "OrderStatus",
    "PaymentMethod",
    "PersistenceGateway",
    "Product",
    "ProductId",
    "ProductRepository",
    "User",
    "UserRepository",
]
