# ruhungry/domain/ingredients.py
"""
Stockroom: ingredients and their stock levels.

Ingredients are spread over a fixed number of buckets (`id % size`), each
bucket holding a chain with the most recently added ingredient first. The
bucket order is observable: a lookup by name walks the buckets in index
order, which decides the winner when two ingredients share a name.
"""

import logging
from typing import Iterator, List, Optional, Union

from pydantic import BaseModel

from ruhungry.domain.errors import NotFoundError

logger = logging.getLogger(__name__)

Selector = Union[int, str]


class Ingredient(BaseModel):
    id: int
    name: str
    stock_level: int
    unit_cost: float


class IngredientLedger:
    """Bucketed table of ingredients keyed by id."""

    def __init__(self, size: int):
        if size <= 0:
            raise ValueError(f"Bucket count must be positive, got {size}")
        self.size = size
        self._buckets: List[List[Ingredient]] = [[] for _ in range(size)]

    # -------- Loading --------

    def add(self, ingredient: Ingredient) -> None:
        """Prepend `ingredient` to the chain of bucket `id % size`.

        Raises:
            ValueError: If an ingredient with the same id is already stored.
        """
        if self.find_by_id(ingredient.id) is not None:
            raise ValueError(f"Duplicate ingredient id {ingredient.id}")
        self._buckets[ingredient.id % self.size].insert(0, ingredient)

    # -------- Lookup --------

    def find_by_id(self, ingredient_id: int) -> Optional[Ingredient]:
        for ingredient in self._buckets[ingredient_id % self.size]:
            if ingredient.id == ingredient_id:
                return ingredient
        return None

    def find_by_name(self, name: str) -> Optional[Ingredient]:
        """Case-insensitive lookup; first match in (bucket, chain) order."""
        wanted = name.casefold()
        for ingredient in self:
            if ingredient.name.casefold() == wanted:
                return ingredient
        return None

    def find(self, selector: Selector) -> Optional[Ingredient]:
        # bool is an int subclass, never a valid id
        if isinstance(selector, bool):
            raise TypeError("Ingredient selector must be an id or a name")
        if isinstance(selector, int):
            return self.find_by_id(selector)
        return self.find_by_name(selector)

    def get(self, selector: Selector) -> Ingredient:
        """Same as `find` but raises NotFoundError instead of returning None."""
        ingredient = self.find(selector)
        if ingredient is None:
            raise NotFoundError("ingredient", selector)
        return ingredient

    # -------- Stock updates --------

    def update(self, selector: Selector, delta: int) -> None:
        """Add `delta` (possibly negative) to the matching ingredient's stock.

        Nothing happens when the selector matches no ingredient.
        """
        ingredient = self.find(selector)
        if ingredient is None:
            logger.debug("Stock update ignored, no ingredient %r", selector)
            return
        ingredient.stock_level += int(delta)

    # -------- Iteration --------

    def names(self) -> List[str]:
        return [ingredient.name for ingredient in self]

    def __iter__(self) -> Iterator[Ingredient]:
        for chain in self._buckets:
            yield from chain

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._buckets)

    def __contains__(self, selector) -> bool:
        return self.find(selector) is not None
