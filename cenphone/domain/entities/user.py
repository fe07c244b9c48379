"""
User entity.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
"""
from dataclasses import dataclass

from ..value_objects import CustomerId, DeliveryAddress


@dataclass
class User:
    """
    A registered shopper.

    Name, email and username are fixed at registration; contact details
    and the password can be changed from the profile screen.
    """
    customer_id: CustomerId
    full_name: str
    address: str
    city: str
    province: str
    country: str
    telephone: str
    email: str
    username: str
    password_hash: str

    @property
    def first_name(self) -> str:
        return self.full_name.split(" ")[0] if self.full_name else ""

    @property
    def delivery_address(self) -> DeliveryAddress:
        return DeliveryAddress(
            street_address=self.address,
            city=self.city,
            province=self.province,
            country=self.country,
        )

    def update_contact(
        self,
        address: str,
        city: str,
        province: str,
        country: str,
        telephone: str,
    ) -> None:
        """Overwrite the mutable contact fields."""
        self.address = address
        self.city = city
        self.province = province
        self.country = country
        self.telephone = telephone

    def move_to(self, delivery: DeliveryAddress) -> None:
        """Overwrite the address fields only (checkout address edit)."""
        self.address = delivery.street_address
        self.city = delivery.city
        self.province = delivery.province
        self.country = delivery.country

    def change_password_hash(self, password_hash: str) -> None:
        self.password_hash = password_hash
