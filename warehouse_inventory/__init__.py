"""In-memory inventory repositories for a small warehouse.

The package provides the entity model for durable and perishable stock, a
generic identity-keyed repository that reports duplicate, missing and
invalid-quantity outcomes as values, and a thin warehouse facade used by the
demo script and the web interface.
"""

from .domain import DurableGood, InvalidEntityError, InventoryItem, PerishableGood
from .repository import (
    DuplicateIdError,
    InMemoryRepository,
    InvalidQuantityError,
    NotFoundError,
    RepositoryError,
    RepositoryOptions,
)
from .result import Failure, Result, Success
from .services import WarehouseManager

__all__ = [
    "DurableGood",
    "InvalidEntityError",
    "InventoryItem",
    "PerishableGood",
    "DuplicateIdError",
    "InMemoryRepository",
    "InvalidQuantityError",
    "NotFoundError",
    "RepositoryError",
    "RepositoryOptions",
    "Failure",
    "Result",
    "Success",
    "WarehouseManager",
]
