"""Application DTOs for account operations."""

from typing import Dict, Optional

from pydantic import BaseModel, Field

REGISTRATION_FIELDS = (
    "full_name",
    "address",
    "city",
    "province",
    "country",
    "telephone",
    "email",
    "username",
    "password",
    "confirm_password",
)

PROFILE_FIELDS = ("address", "city", "province", "country", "telephone")


def _label(field: str) -> str:
    return field.replace("_", " ").capitalize()


class RegisterUserRequest(BaseModel):
    """Request DTO for the registration form."""

    full_name: str = Field(..., description="Full name")
    address: str = Field(..., description="Street address")
    city: str = Field(..., description="City")
    province: str = Field(..., description="Province")
    country: str = Field(..., description="Country")
    telephone: str = Field(..., description="Phone number")
    email: str = Field(..., description="Email, unique per account")
    username: str = Field(..., description="Username, unique per account")
    password: str = Field(..., repr=False, description="Plaintext password")
    confirm_password: str = Field(..., repr=False, description="Password confirmation")

    model_config = {"frozen": True}

    def field_errors(self) -> Dict[str, str]:
        """Empty (or whitespace-only) fields and a mismatched confirmation."""
        errors = {
            field: f"{_label(field)} is required"
            for field in REGISTRATION_FIELDS
            if not getattr(self, field).strip()
        }
        if "confirm_password" not in errors and self.password != self.confirm_password:
            errors["confirm_password"] = "Passwords do not match"
        return errors


class ProfileUpdateRequest(BaseModel):
    """Request DTO for the profile screen. Leave ``new_password`` unset to keep the current one."""

    address: str = Field(..., description="Street address")
    city: str = Field(..., description="City")
    province: str = Field(..., description="Province")
    country: str = Field(..., description="Country")
    telephone: str = Field(..., description="Phone number")
    new_password: Optional[str] = Field(default=None, repr=False)
    confirm_password: Optional[str] = Field(default=None, repr=False)

    model_config = {"frozen": True}

    @property
    def changes_password(self) -> bool:
        return bool(self.new_password)

    def field_errors(self) -> Dict[str, str]:
        errors = {
            field: f"{_label(field)} is required"
            for field in PROFILE_FIELDS
            if not getattr(self, field).strip()
        }
        if self.changes_password and self.new_password != self.confirm_password:
            errors["confirm_password"] = "Passwords do not match"
        return errors
