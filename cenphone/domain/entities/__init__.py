"""Domain entities."""

from .order import CANCELLATION_WINDOW, Order, utc_now
from .product import Product
from .user import User

__all__ = ["CANCELLATION_WINDOW", "Order", "Product", "User", "utc_now"]
