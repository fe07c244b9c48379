"""Identifier value objects - pure Python immutable types."""

from dataclasses import dataclass
from typing import Union
from uuid import UUID, uuid4


@dataclass(frozen=True)
class _RecordID:
    """Opaque UUID identifier shared by every record kind."""

    value: UUID

    def __post_init__(self):
        # Accept the string form read back from storage
        if not isinstance(self.value, UUID):
            object.__setattr__(self, "value", UUID(str(self.value)))

    @classmethod
    def generate(cls):
        """Generate a new random identifier."""
        return cls(value=uuid4())

    @classmethod
    def parse(cls, raw: Union[str, UUID, "_RecordID"]):
        """Build an identifier from its string/UUID form."""
        if isinstance(raw, cls):
            return raw
        return cls(value=raw if isinstance(raw, UUID) else UUID(str(raw)))

    def __str__(self) -> str:
        """Return string representation."""
        return str(self.value)


@dataclass(frozen=True)
class CustomerId(_RecordID):
    """Identifier of a registered user."""


@dataclass(frozen=True)
class ProductId(_RecordID):
    """Identifier of a captured product configuration."""


@dataclass(frozen=True)
class OrderId(_RecordID):
    """Identifier of an order."""

    @property
    def short(self) -> str:
        """First eight characters, as shown in order lists."""
        return str(self.value)[:8].upper()
