from __future__ import annotations

from datetime import date

import pytest

from warehouse_inventory import (
    DurableGood,
    InMemoryRepository,
    PerishableGood,
    RepositoryOptions,
    WarehouseManager,
)


@pytest.fixture
def today() -> date:
    return date(2026, 1, 1)


@pytest.fixture
def laptop() -> DurableGood:
    return DurableGood(1, "Laptop", 5, "Dell", 24)


@pytest.fixture
def apples() -> PerishableGood:
    return PerishableGood(101, "Apples", 50, date(2026, 1, 8))


@pytest.fixture
def electronics() -> InMemoryRepository[DurableGood]:
    return InMemoryRepository(
        RepositoryOptions(name="electronics"), item_type=DurableGood
    )


@pytest.fixture
def groceries() -> InMemoryRepository[PerishableGood]:
    return InMemoryRepository(
        RepositoryOptions(name="groceries"), item_type=PerishableGood
    )


@pytest.fixture
def manager(today) -> WarehouseManager:
    manager = WarehouseManager()
    manager.seed_data(today=today)
    return manager
