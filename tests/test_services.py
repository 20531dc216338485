from __future__ import annotations

from datetime import date

import pytest

from warehouse_inventory.domain import DurableGood
from warehouse_inventory.repository import (
    DuplicateIdError,
    InMemoryRepository,
    InvalidQuantityError,
    NotFoundError,
)
from warehouse_inventory.services import EMPTY_LISTING, WarehouseManager


class TestSeedData:
    def test_seeds_both_repositories(self, manager):
        assert sorted(manager.electronics.ids()) == [1, 2, 3]
        assert sorted(manager.groceries.ids()) == [101, 102, 103]

    def test_expiry_dates_follow_today(self, manager):
        expiry = {item.name: item.expiry_date for item in manager.groceries}
        assert expiry == {
            "Apples": date(2026, 1, 8),
            "Milk": date(2026, 1, 4),
            "Rice (5kg)": date(2027, 1, 1),
        }

    def test_end_of_month_is_clamped(self):
        manager = WarehouseManager()
        manager.seed_data(today=date(2028, 2, 29))
        assert manager.groceries.get(103).unwrap().expiry_date == date(2029, 2, 28)

    def test_seeding_twice_raises_duplicate(self, manager):
        with pytest.raises(DuplicateIdError):
            manager.seed_data()

    def test_default_repositories_reject_the_other_kind(self, manager):
        with pytest.raises(TypeError):
            manager.groceries.insert(DurableGood(5, "Laptop", 1, "Dell", 12))
        expired = manager.expired_groceries(on=date(2026, 1, 5))
        assert [item.name for item in expired] == ["Milk"]

    def test_injected_repositories_are_used(self):
        electronics = InMemoryRepository()
        manager = WarehouseManager(electronics=electronics)
        assert manager.electronics is electronics
        assert manager.groceries is not electronics


class TestStockHelpers:
    def test_increase_stock(self, manager):
        assert manager.increase_stock(manager.electronics, 2, 5).is_success
        assert manager.electronics.get(2).unwrap().quantity == 15

    def test_increase_stock_rejects_zero(self, manager):
        result = manager.increase_stock(manager.electronics, 2, 0)
        assert isinstance(result.error, InvalidQuantityError)
        assert manager.electronics.get(2).unwrap().quantity == 10

    def test_remove_item_by_id(self, manager):
        assert manager.remove_item_by_id(manager.groceries, 102).is_success
        result = manager.remove_item_by_id(manager.groceries, 999)
        assert isinstance(result.error, NotFoundError)


class TestFormatting:
    def test_format_items(self):
        manager = WarehouseManager()
        manager.electronics.insert(DurableGood(1, "Laptop", 5, "Dell", 24))
        assert manager.format_items(manager.electronics) == [
            "DurableGood(Id=1, Name=Laptop, Qty=5, Brand=Dell, Warranty=24mo)"
        ]

    def test_format_empty_repository(self):
        manager = WarehouseManager()
        assert manager.format_items(manager.groceries) == [EMPTY_LISTING]


def test_expired_groceries(manager):
    expired = manager.expired_groceries(on=date(2026, 1, 5))
    assert [item.name for item in expired] == ["Milk"]
    assert manager.expired_groceries(on=date(2026, 1, 1)) == []
