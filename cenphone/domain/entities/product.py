"""Product entity - a phone configuration captured at checkout."""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..value_objects import CustomerId, ProductId, format_price


@dataclass
class Product:
    """Individual phone configuration (make, model, colour, storage, price)."""
    product_id: ProductId
    phone_make: str
    phone_model: str
    phone_color: str
    storage_capacity: str
    price: Decimal
    owner_id: Optional[CustomerId] = None

    def __post_init__(self):
        if not isinstance(self.price, Decimal):
            self.price = Decimal(str(self.price))
        if self.price < 0:
            raise ValueError(f"Product price cannot be negative: {self.price}")

    @property
    def display_name(self) -> str:
        return f"{self.phone_make} {self.phone_model}".strip()

    @property
    def display_price(self) -> str:
        return format_price(self.price)

    def matches(self, text: str) -> bool:
        """Case-insensitive match on make or model."""
        needle = text.lower()
        return needle in self.phone_make.lower() or needle in self.phone_model.lower()
