"""
Order fulfilment with substitution.

When the requested dish cannot be cooked for the requested quantity, the
kitchen walks the dish's category looking for something it can cook
instead. The walk starts at the requested dish, runs to the end of the
category, then wraps around from the first dish of the category back to
the requested one. Every dish that turns out to be unavailable leaves a
failed record in the journal; the first available one is served.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Iterator, List, Optional

from ruhungry.core.accounting import TransactionLedger, TransactionRecord
from ruhungry.domain.ingredients import IngredientLedger
from ruhungry.domain.menu import Dish, MenuCatalog
from ruhungry.domain.types import TransactionKind

logger = logging.getLogger(__name__)


def check_quantity(quantity: int) -> int:
    """Validate a requested quantity (orders, donations, restocks)."""
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValueError(f"Quantity must be an integer, got {quantity!r}")
    if quantity <= 0:
        raise ValueError(f"Quantity must be positive, got {quantity}")
    return quantity


@dataclass(frozen=True)
class OrderOutcome:
    requested: str
    quantity: int
    served: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.served is not None


class OrderEngine:
    """Serves orders against the stockroom and writes them to the journal."""

    def __init__(
        self,
        ledger: IngredientLedger,
        catalog: MenuCatalog,
        transactions: TransactionLedger,
    ):
        self.ledger = ledger
        self.catalog = catalog
        self.transactions = transactions

    # -------- Availability --------

    def check_availability(self, dish_name: str, quantity: int) -> bool:
        """True if every ingredient covers `quantity` portions of the dish.

        Raises:
            NotFoundError: If the dish is not on the menu.
        """
        return self._is_available(self.catalog.get_dish(dish_name), quantity)

    def _is_available(self, dish: Dish, quantity: int) -> bool:
        # one unit per reference, so an id listed twice needs twice the stock
        for ingredient_id, uses in Counter(dish.ingredient_ids).items():
            ingredient = self.ledger.find_by_id(ingredient_id)
            # an ingredient missing from the stockroom cannot be cooked with
            if ingredient is None or ingredient.stock_level < quantity * uses:
                return False
        return True

    # -------- Orders --------

    def place_order(self, dish_name: str, quantity: int) -> OrderOutcome:
        """Serve `quantity` portions of `dish_name`, or a substitute.

        Steps:
        1. Resolve the requested dish (NotFoundError if unknown).
        2. If it is available, record it, debit its ingredients and stop.
        3. Otherwise walk its category from the requested dish to the end,
           then from the head back to the requested dish. The first
           available dish is recorded and debited; each unavailable dish
           gets a failed record.
        4. If nothing in the category is available, the order fails and
           no stock moves.

        Returns:
            An OrderOutcome naming the dish served, or none if the order failed.
        """
        check_quantity(quantity)
        requested = self.catalog.get_dish(dish_name)

        if self._is_available(requested, quantity):
            self._serve(requested, quantity)
            return OrderOutcome(dish_name, quantity, served=requested.name)

        for candidate in self._substitution_walk(requested):
            if self._is_available(candidate, quantity):
                self._serve(candidate, quantity)
                logger.info(
                    "Order %r x%d served as %r", requested.name, quantity, candidate.name
                )
                return OrderOutcome(dish_name, quantity, served=candidate.name)
            self.transactions.append(
                TransactionRecord(
                    kind=TransactionKind.ORDER,
                    subject=candidate.name,
                    quantity=quantity,
                )
            )

        logger.info(
            "Order %r x%d failed, category %r is out of stock",
            requested.name,
            quantity,
            requested.category,
        )
        return OrderOutcome(dish_name, quantity)

    def _substitution_walk(self, requested: Dish) -> Iterator[Dish]:
        dishes: List[Dish] = self.catalog.category_of(requested).dishes
        start = next(i for i, dish in enumerate(dishes) if dish is requested)
        yield from dishes[start:]
        yield from dishes[:start]

    def _serve(self, dish: Dish, quantity: int) -> None:
        self.transactions.append(
            TransactionRecord(
                kind=TransactionKind.ORDER,
                subject=dish.name,
                quantity=quantity,
                profit=dish.profit * quantity,
                succeeded=True,
            )
        )
        for ingredient_id in dish.ingredient_ids:
            self.ledger.update(ingredient_id, -quantity)
