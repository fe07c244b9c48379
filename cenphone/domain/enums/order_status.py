"""
Order Status Enum.

Closed set of order states. Orders start as CONFIRMED; CANCELED is the
only state written by cancellation. The remaining values are reachable
through the generic update path.
"""
from enum import Enum
from typing import Union

from ..exceptions import ValidationError


class OrderStatus(str, Enum):
    """Order status values."""

    CONFIRMED = "Confirmed"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELED = "Canceled"

    @classmethod
    def parse(cls, raw: Union[str, "OrderStatus"]) -> "OrderStatus":
        """
        Resolve a status from user or storage input.

        Matching is case-insensitive and ``cancelled`` is accepted as an
        alias of ``Canceled``.

        Raises:
            ValidationError: If the value is not a known status.
        """
        if isinstance(raw, cls):
            return raw

        normalized = str(raw).strip().lower()
        if normalized == "cancelled":
            return cls.CANCELED

        for status in cls:
            if status.value.lower() == normalized:
                return status

        allowed = ", ".join(status.value for status in cls)
        raise ValidationError({"status": f"Unknown order status '{raw}' (expected one of {allowed})"})

    @property
    def is_canceled(self) -> bool:
        return self is OrderStatus.CANCELED
