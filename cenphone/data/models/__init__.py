"""Database models."""

from .base import Base
from .order_model import OrderModel
from .product_model import ProductModel
from .user_model import UserModel

__all__ = ["Base", "OrderModel", "ProductModel", "UserModel"]
