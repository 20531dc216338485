"""Entity model for the warehouse inventory."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Any, ClassVar, Dict, Optional


class InvalidEntityError(ValueError):
    """Raised when an entity is constructed with invalid attributes."""


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(slots=True)
class InventoryItem:
    """Capability surface shared by every stocked entity.

    The repository only relies on ``id``, ``name`` and ``quantity``. The id is
    fixed once the entity is constructed; the quantity is the only field the
    repository ever changes.
    """

    kind: ClassVar[str] = "item"

    id: int
    name: str
    quantity: int

    def __post_init__(self) -> None:
        self._validate_identity()

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and hasattr(self, "id"):
            raise AttributeError("id is immutable once constructed")
        object.__setattr__(self, name, value)

    def _validate_identity(self) -> None:
        if not _is_int(self.id):
            raise InvalidEntityError(f"id must be an integer, got {self.id!r}")
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidEntityError("name must be a non-empty string")
        # Negative stock is accepted here; mutation goes through the repository.
        if not _is_int(self.quantity):
            raise InvalidEntityError(
                f"quantity must be an integer, got {self.quantity!r}"
            )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        for key, value in data.items():
            if isinstance(value, date):
                data[key] = value.isoformat()
        data["kind"] = self.kind
        return data


@dataclass(slots=True)
class DurableGood(InventoryItem):
    """A non-perishable product sold with a manufacturer warranty."""

    kind: ClassVar[str] = "durable"

    brand: str
    warranty_months: int

    def __post_init__(self) -> None:
        self._validate_identity()
        if not isinstance(self.brand, str) or not self.brand.strip():
            raise InvalidEntityError("brand must be a non-empty string")
        if not _is_int(self.warranty_months) or self.warranty_months < 0:
            raise InvalidEntityError(
                "warranty_months must be a non-negative integer, "
                f"got {self.warranty_months!r}"
            )

    def __str__(self) -> str:
        return (
            f"DurableGood(Id={self.id}, Name={self.name}, Qty={self.quantity}, "
            f"Brand={self.brand}, Warranty={self.warranty_months}mo)"
        )


@dataclass(slots=True)
class PerishableGood(InventoryItem):
    """A product that has to be sold before its expiry date."""

    kind: ClassVar[str] = "perishable"

    expiry_date: date

    def __post_init__(self) -> None:
        self._validate_identity()
        if isinstance(self.expiry_date, datetime):
            self.expiry_date = self.expiry_date.date()
        elif not isinstance(self.expiry_date, date):
            raise InvalidEntityError(
                f"expiry_date must be a date, got {self.expiry_date!r}"
            )

    def is_expired(self, on: Optional[date] = None) -> bool:
        reference = on or date.today()
        return reference > self.expiry_date

    def __str__(self) -> str:
        return (
            f"PerishableGood(Id={self.id}, Name={self.name}, Qty={self.quantity}, "
            f"Expires={self.expiry_date.isoformat()})"
        )


__all__ = [
    "InvalidEntityError",
    "InventoryItem",
    "DurableGood",
    "PerishableGood",
]
