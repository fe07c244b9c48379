"""Domain value objects."""

from .identifiers import CustomerId, OrderId, ProductId
from .payment import CardDetails, DeliveryAddress
from .price import format_price, parse_price

__all__ = [
    "CardDetails",
    "CustomerId",
    "DeliveryAddress",
    "OrderId",
    "ProductId",
    "format_price",
    "parse_price",
]
