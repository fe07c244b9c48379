"""Application DTOs for the checkout flow."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from cenphone.domain.enums import PaymentMethod
from cenphone.domain.value_objects import CardDetails, DeliveryAddress


class DeliveryInfo(BaseModel):
    """Delivery address entered on the customer info screen."""

    street_address: str = Field(default="", description="Street address")
    city: str = Field(default="", description="City")
    province: str = Field(default="", description="Province")
    country: str = Field(default="", description="Country")

    model_config = {"frozen": True}

    def to_address(self) -> DeliveryAddress:
        return DeliveryAddress(
            street_address=self.street_address.strip(),
            city=self.city.strip(),
            province=self.province.strip(),
            country=self.country.strip(),
        )


class PaymentRequest(BaseModel):
    """Payment screen input. Card fields are ignored for wallet methods."""

    method: PaymentMethod = Field(..., description="Payment method")
    card_number: str = Field(default="", repr=False)
    expiry_date: str = Field(default="", description="MM/YY")
    cvv: str = Field(default="", repr=False)
    card_holder_name: str = Field(default="")

    model_config = {"frozen": True}

    def to_card(self) -> CardDetails:
        return CardDetails(
            card_number=self.card_number,
            expiry_date=self.expiry_date,
            cvv=self.cvv,
            card_holder_name=self.card_holder_name,
        )


class ConfirmationDTO(BaseModel):
    """Response DTO for the order confirmation screen."""

    order_id: str = Field(..., description="Order identifier")
    order_number: str = Field(..., description="Short order number shown to the shopper")
    customer_name: str = Field(..., description="First name of the shopper")
    product_name: str = Field(..., description="Make and model")
    phone_color: str = Field(...)
    storage_capacity: str = Field(...)
    total_amount: Decimal = Field(..., ge=0, description="Order total")
    display_total: str = Field(..., description="Formatted total")
    currency: str = Field(default="CAD", description="Currency code")
    status: str = Field(..., description="Order status")
    order_date: datetime = Field(..., description="Order date (UTC)")
    delivery_address: str = Field(..., description="Formatted delivery address")
    payment_method: str = Field(..., description="Payment method")

    model_config = {"frozen": True}
