"""Domain enumerations."""

from .order_status import OrderStatus
from .payment_method import PaymentMethod

__all__ = ["OrderStatus", "PaymentMethod"]
