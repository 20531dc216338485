"""Warehouse facade bundling the repositories for each kind of stock."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import List, Optional

from .domain import DurableGood, InventoryItem, PerishableGood
from .repository import (
    InMemoryRepository,
    NotFoundError,
    RepositoryError,
    RepositoryOptions,
)
from .result import Result

logger = logging.getLogger(__name__)

EMPTY_LISTING = "(no items)"


def _add_months(start: date, months: int) -> date:
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    for day in range(start.day, 0, -1):
        try:
            return start.replace(year=year, month=month, day=day)
        except ValueError:
            continue
    raise ValueError(f"Cannot add {months} months to {start}")  # pragma: no cover


class WarehouseManager:
    """Facade that exposes warehouse use-cases to clients."""

    def __init__(
        self,
        electronics: Optional[InMemoryRepository[DurableGood]] = None,
        groceries: Optional[InMemoryRepository[PerishableGood]] = None,
    ) -> None:
        if electronics is None:
            electronics = InMemoryRepository(
                RepositoryOptions(name="electronics"), item_type=DurableGood
            )
        if groceries is None:
            groceries = InMemoryRepository(
                RepositoryOptions(name="groceries"), item_type=PerishableGood
            )
        self.electronics = electronics
        self.groceries = groceries

    def seed_data(self, today: Optional[date] = None) -> None:
        """Populate both repositories with the demo stock.

        Raises :class:`~warehouse_inventory.repository.DuplicateIdError` when
        the demo ids are already present.
        """

        today = today or date.today()
        electronics = [
            DurableGood(1, "Laptop", 5, "Dell", 24),
            DurableGood(2, "Smartphone", 10, "Samsung", 12),
            DurableGood(3, "Monitor", 7, "LG", 36),
        ]
        groceries = [
            PerishableGood(101, "Apples", 50, today + timedelta(days=7)),
            PerishableGood(102, "Milk", 20, today + timedelta(days=3)),
            PerishableGood(103, "Rice (5kg)", 30, _add_months(today, 12)),
        ]
        for item in electronics:
            self.electronics.insert(item).unwrap()
        for item in groceries:
            self.groceries.insert(item).unwrap()
        logger.info(
            "Seeded %d electronic and %d grocery items",
            len(electronics),
            len(groceries),
        )

    def increase_stock(
        self, repo: InMemoryRepository, item_id: int, quantity: int
    ) -> Result[None, RepositoryError]:
        return repo.increase_quantity(item_id, quantity)

    def remove_item_by_id(
        self, repo: InMemoryRepository, item_id: int
    ) -> Result[None, NotFoundError]:
        return repo.remove(item_id)

    def format_items(self, repo: InMemoryRepository) -> List[str]:
        items: List[InventoryItem] = repo.list_all()
        if not items:
            return [EMPTY_LISTING]
        return [str(item) for item in items]

    def expired_groceries(self, on: Optional[date] = None) -> List[PerishableGood]:
        reference = on or date.today()
        return self.groceries.find(lambda item: item.is_expired(reference))


__all__ = ["WarehouseManager", "EMPTY_LISTING"]
