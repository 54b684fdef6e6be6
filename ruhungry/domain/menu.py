# ruhungry/domain/menu.py
"""
Menu: categories of dishes, priced from the stockroom.

Dishes are inserted at the head of their category while loading, so a
category lists its dishes in the reverse of the menu file order. That
order decides which substitute an order gets.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from ruhungry.domain.errors import NotFoundError
from ruhungry.domain.ingredients import IngredientLedger

# Selling price = ingredient cost x markup
DEFAULT_MARKUP = 1.2


@dataclass
class Dish:
    """
    A dish on the menu.
    - ingredient_ids : ids referenced in the stockroom, one unit of each per dish.
    - cost / price / profit : per unit, refreshed by `MenuCatalog.recompute_pricing`.
    """

    name: str
    category: str
    ingredient_ids: List[int] = field(default_factory=list)
    cost: float = 0.0
    price: float = 0.0
    profit: float = 0.0


@dataclass
class Category:
    name: str
    dishes: List[Dish] = field(default_factory=list)


@dataclass
class MenuCatalog:
    """Categories in menu file order, each holding its dishes head-first."""

    categories: List[Category] = field(default_factory=list)

    # -------- Loading --------

    def add_category(self, name: str) -> int:
        """Append a category and return its index."""
        self.categories.append(Category(name=name))
        return len(self.categories) - 1

    def add_dish(self, category_index: int, name: str, ingredient_ids: List[int]) -> Dish:
        category = self.categories[category_index]
        dish = Dish(
            name=name, category=category.name, ingredient_ids=list(ingredient_ids)
        )
        category.dishes.insert(0, dish)
        return dish

    # -------- Lookup --------

    def find_dish(self, name: str) -> Optional[Dish]:
        wanted = name.casefold()
        for category in self.categories:
            for dish in category.dishes:
                if dish.name.casefold() == wanted:
                    return dish
        return None

    def get_dish(self, name: str) -> Dish:
        dish = self.find_dish(name)
        if dish is None:
            raise NotFoundError("dish", name)
        return dish

    def find_category_index(self, name: str) -> int:
        """Index of the category called `name` (case-insensitive).

        Raises:
            NotFoundError: If no category has that name.
        """
        wanted = name.casefold()
        for index, category in enumerate(self.categories):
            if category.name.casefold() == wanted:
                return index
        raise NotFoundError("category", name)

    def category_of(self, dish: Dish) -> Category:
        """The category holding this very dish object."""
        for category in self.categories:
            if any(candidate is dish for candidate in category.dishes):
                return category
        raise NotFoundError("category", dish.category)

    # -------- Listing --------

    def category_names(self) -> List[str]:
        return [category.name for category in self.categories]

    def dishes(self, category: Optional[str] = None) -> List[Dish]:
        """All dishes in traversal order, optionally restricted to one category.

        An unknown category yields an empty list.
        """
        if category is None:
            return [dish for c in self.categories for dish in c.dishes]
        try:
            index = self.find_category_index(category)
        except NotFoundError:
            return []
        return list(self.categories[index].dishes)

    # -------- Pricing --------

    def recompute_pricing(
        self, ledger: IngredientLedger, markup: float = DEFAULT_MARKUP
    ) -> None:
        """Refresh cost, price and profit of every dish from the stockroom.

        Formula
        -------
        cost   = sum(unit_cost of each referenced ingredient found in `ledger`)
        price  = cost x markup
        profit = price - cost

        Ids missing from the ledger add nothing to the cost. The result only
        depends on the current ledger, so calling it twice changes nothing.
        """
        for dish in self.dishes():
            cost = 0.0
            for ingredient_id in dish.ingredient_ids:
                ingredient = ledger.find_by_id(ingredient_id)
                if ingredient is not None:
                    cost += ingredient.unit_cost
            dish.cost = cost
            dish.price = cost * markup
            dish.profit = dish.price - cost

    def price_summary(self) -> Dict[str, Dict[str, float]]:
        """Per-category price statistics: {category: {count, mean, median}}."""
        summary: Dict[str, Dict[str, float]] = {}
        for category in self.categories:
            prices = [dish.price for dish in category.dishes]
            summary[category.name] = {
                "count": len(prices),
                "mean": float(np.mean(prices)) if prices else 0.0,
                "median": float(np.median(prices)) if prices else 0.0,
            }
        return summary
