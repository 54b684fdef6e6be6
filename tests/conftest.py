from typing import List, Sequence, Tuple

import pytest

from ruhungry.core.restaurant import Restaurant
from ruhungry.domain.ingredients import Ingredient, IngredientLedger
from ruhungry.domain.menu import MenuCatalog

StockRow = Tuple[int, str, float, int]
MenuRows = Sequence[Tuple[str, Sequence[Tuple[str, List[int]]]]]


def build_ledger(rows: Sequence[StockRow], size: int = 5) -> IngredientLedger:
    ledger = IngredientLedger(size)
    for ingredient_id, name, unit_cost, stock_level in rows:
        ledger.add(
            Ingredient(
                id=ingredient_id, name=name, unit_cost=unit_cost, stock_level=stock_level
            )
        )
    return ledger


def build_catalog(menu: MenuRows) -> MenuCatalog:
    """Dishes are given in file order, like the menu feed."""
    catalog = MenuCatalog()
    for category, dishes in menu:
        index = catalog.add_category(category)
        for name, ids in dishes:
            catalog.add_dish(index, name, ids)
    return catalog


def build_restaurant(rows: Sequence[StockRow], menu: MenuRows, size: int = 5) -> Restaurant:
    return Restaurant(build_ledger(rows, size), build_catalog(menu))


@pytest.fixture
def bakery() -> Restaurant:
    return build_restaurant(
        [(1, "Flour", 2.0, 10)],
        [("Bakery", [("Bread", [1])])],
    )


@pytest.fixture
def mains() -> Restaurant:
    """
    Category "Mains" loaded as Alpha, Beta, Gamma, so walked Gamma, Beta, Alpha.
    - Alpha needs Yeast (1 in stock)
    - Beta needs Rice (10 in stock)
    - Gamma needs Zest (1 in stock)
    """
    return build_restaurant(
        [
            (1, "Rice", 1.0, 10),
            (2, "Yeast", 2.0, 1),
            (3, "Zest", 3.0, 1),
        ],
        [
            ("Mains", [("Alpha", [2]), ("Beta", [1]), ("Gamma", [3])]),
            ("Sides", [("Chips", [1])]),
        ],
    )
