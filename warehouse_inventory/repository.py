"""Generic in-memory repository for inventory entities."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    MutableMapping,
    Optional,
    Type,
    TypeVar,
)

from .domain import InventoryItem
from .result import Failure, Result, Success

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=InventoryItem)


class RepositoryError(RuntimeError):
    """Base exception for repository errors."""


class DuplicateIdError(RepositoryError):
    """Reported when inserting an item whose id is already stored."""

    def __init__(self, item_id: int) -> None:
        self.item_id = item_id
        super().__init__(f"An item with id {item_id} already exists")


class NotFoundError(RepositoryError):
    """Reported when an operation references an id that is not stored."""

    def __init__(self, item_id: int) -> None:
        self.item_id = item_id
        super().__init__(f"Item with id {item_id} not found")


class InvalidQuantityError(RepositoryError):
    """Reported when a quantity or an increase delta is out of range."""

    def __init__(
        self,
        quantity: int,
        item_id: Optional[int] = None,
        reason: str = "quantity cannot be negative",
    ) -> None:
        self.quantity = quantity
        self.item_id = item_id
        self.reason = reason
        super().__init__(f"Invalid quantity {quantity}: {reason}")


@dataclass(frozen=True, slots=True)
class RepositoryOptions:
    """Behaviour switches for an :class:`InMemoryRepository`."""

    name: str = "inventory"
    validate_on_insert: bool = False


def _require_int(value: object, label: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{label} must be an integer, got {value!r}")


def validate_quantity(
    quantity: int, item_id: Optional[int] = None
) -> Optional[InvalidQuantityError]:
    """Return an error when ``quantity`` cannot be stored, ``None`` otherwise."""

    _require_int(quantity, "quantity")
    if quantity < 0:
        return InvalidQuantityError(quantity, item_id)
    return None


def validate_delta(
    delta: int, item_id: Optional[int] = None
) -> Optional[InvalidQuantityError]:
    """Return an error when ``delta`` is not a positive increase."""

    _require_int(delta, "delta")
    if delta <= 0:
        return InvalidQuantityError(
            delta, item_id, reason="increase quantity must be positive"
        )
    return None


class InMemoryRepository(Generic[T]):
    """Generic repository keyed by entity id and backed by a dictionary.

    Every operation returns a :class:`~warehouse_inventory.result.Success` or
    a :class:`~warehouse_inventory.result.Failure` holding one of
    :class:`DuplicateIdError`, :class:`NotFoundError` or
    :class:`InvalidQuantityError`. Only contract violations, such as inserting
    ``None``, raise.

    The repository keeps private copies of its items. Values returned from
    :meth:`get`, :meth:`list_all` and iteration are snapshots, so changing
    them never changes the stored state.
    """

    def __init__(
        self,
        options: Optional[RepositoryOptions] = None,
        item_type: Optional[Type[T]] = None,
    ) -> None:
        self.options = options or RepositoryOptions()
        self.item_type = item_type
        self._items: MutableMapping[int, T] = {}

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.list_all())

    def __repr__(self) -> str:
        return f"InMemoryRepository(name={self.options.name!r}, items={len(self)})"

    # ------------------------------------------------------------------
    # CRUD operations
    # ------------------------------------------------------------------
    def insert(self, item: T) -> Result[None, RepositoryError]:
        if item is None:
            raise TypeError("item is required")
        expected = self.item_type or InventoryItem
        if not isinstance(item, expected) or type(item) is InventoryItem:
            raise TypeError(
                f"expected a {expected.__name__} variant, got {type(item).__name__}"
            )
        if self.options.validate_on_insert:
            error = validate_quantity(item.quantity, item.id)
            if error is not None:
                return self._fail(error)
        if item.id in self._items:
            return self._fail(DuplicateIdError(item.id))
        self._items[item.id] = replace(item)
        logger.debug("%s: inserted item %s", self.options.name, item.id)
        return Success(None)

    def get(self, item_id: int) -> Result[T, NotFoundError]:
        try:
            item = self._items[item_id]
        except KeyError:
            return self._fail(NotFoundError(item_id))
        return Success(replace(item))

    def remove(self, item_id: int) -> Result[None, NotFoundError]:
        if item_id not in self._items:
            return self._fail(NotFoundError(item_id))
        del self._items[item_id]
        logger.debug("%s: removed item %s", self.options.name, item_id)
        return Success(None)

    def list_all(self) -> List[T]:
        return [replace(item) for item in self._items.values()]

    def find(self, predicate: Callable[[T], bool]) -> List[T]:
        return [item for item in self.list_all() if predicate(item)]

    def ids(self) -> List[int]:
        return list(self._items)

    def as_dicts(self) -> Iterable[Dict[str, Any]]:
        for item in self._items.values():
            yield item.to_dict()

    # ------------------------------------------------------------------
    # Quantity updates
    # ------------------------------------------------------------------
    def set_quantity(
        self, item_id: int, new_quantity: int
    ) -> Result[None, RepositoryError]:
        # An invalid quantity is reported even when the id is unknown.
        error = validate_quantity(new_quantity, item_id)
        if error is not None:
            return self._fail(error)
        item = self._items.get(item_id)
        if item is None:
            return self._fail(NotFoundError(item_id))
        item.quantity = new_quantity
        logger.debug(
            "%s: quantity of item %s set to %s",
            self.options.name,
            item_id,
            new_quantity,
        )
        return Success(None)

    def increase_quantity(
        self, item_id: int, delta: int
    ) -> Result[None, RepositoryError]:
        error = validate_delta(delta, item_id)
        if error is not None:
            return self._fail(error)
        item = self._items.get(item_id)
        if item is None:
            return self._fail(NotFoundError(item_id))
        return self.set_quantity(item_id, item.quantity + delta)

    def _fail(self, error: RepositoryError) -> Failure[RepositoryError]:
        logger.debug(
            "%s: %s: %s", self.options.name, type(error).__name__, error
        )
        return Failure(error)


__all__ = [
    "InMemoryRepository",
    "RepositoryOptions",
    "RepositoryError",
    "DuplicateIdError",
    "NotFoundError",
    "InvalidQuantityError",
    "validate_quantity",
    "validate_delta",
]
