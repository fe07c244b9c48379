"""Application DTOs."""

from .account_dto import ProfileUpdateRequest, RegisterUserRequest
from .checkout_dto import ConfirmationDTO, DeliveryInfo, PaymentRequest

__all__ = [
    "ConfirmationDTO",
    "DeliveryInfo",
    "PaymentRequest",
    "ProfileUpdateRequest",
    "RegisterUserRequest",
]
