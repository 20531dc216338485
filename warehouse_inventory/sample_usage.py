"""Demonstration script for the warehouse inventory repositories."""

from __future__ import annotations

import logging

from . import DurableGood, InMemoryRepository, WarehouseManager
from .result import Result


def print_items(manager: WarehouseManager, repo: InMemoryRepository) -> None:
    for line in manager.format_items(repo):
        print(line)


def report(action: str, outcome: Result) -> None:
    print(f"\n{action}...")
    if outcome.is_success:
        print("OK")
    else:
        print(f"{type(outcome.error).__name__}: {outcome.error}")


def main() -> None:
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    manager = WarehouseManager()

    print("Seeding data...")
    manager.seed_data()

    print("\n--- Grocery Items ---")
    print_items(manager, manager.groceries)
    print("\n--- Electronic Items ---")
    print_items(manager, manager.electronics)

    print("\n\n--- Failure outcomes ---")
    report(
        "Adding a duplicate electronic item (id 1)",
        manager.electronics.insert(DurableGood(1, "Another Laptop", 2, "HP", 12)),
    )
    report(
        "Removing a missing grocery item (id 999)",
        manager.remove_item_by_id(manager.groceries, 999),
    )
    report(
        "Setting a negative quantity for grocery item 101",
        manager.groceries.set_quantity(101, -5),
    )
    report(
        "Increasing electronic item 2 by 0",
        manager.increase_stock(manager.electronics, 2, 0),
    )

    print("\n\n--- Successful operations ---")
    report(
        "Increasing electronic item 2 by 5",
        manager.increase_stock(manager.electronics, 2, 5),
    )
    print("Updated electronics list:")
    print_items(manager, manager.electronics)

    report(
        "Removing grocery item 102",
        manager.remove_item_by_id(manager.groceries, 102),
    )
    print("Updated groceries list:")
    print_items(manager, manager.groceries)


if __name__ == "__main__":  # pragma: no cover - manual execution
    main()
