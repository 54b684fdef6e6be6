"""
The restaurant for one trading day.

`Restaurant` owns the stockroom, the menu, the transaction journal and the
tables, and is the only entry point a presentation layer should use. All
state sits behind a single re-entrant lock: every operation that checks
stock or profit and then mutates holds it from the check to the journal
write, so concurrent requests cannot interleave inside one decision.
"""

import logging
import threading
from pathlib import Path
from typing import Dict, List, Optional, Union

from ruhungry.config import Settings
from ruhungry.core.accounting import TransactionLedger
from ruhungry.core.orders import OrderEngine
from ruhungry.core.supply import SupplyGate
from ruhungry.data.feeds import FeedSource, load_menu, load_stock, load_tables
from ruhungry.domain.ingredients import IngredientLedger
from ruhungry.domain.menu import Dish, MenuCatalog
from ruhungry.domain.types import (
    DishView,
    OrderResult,
    StockView,
    TransactionKind,
    TransactionView,
)

logger = logging.getLogger(__name__)


def _dish_view(dish: Dish) -> DishView:
    return DishView(
        name=dish.name, category=dish.category, price=dish.price, profit=dish.profit
    )


class Restaurant:
    def __init__(
        self,
        ledger: IngredientLedger,
        catalog: MenuCatalog,
        table_seats: Optional[List[int]] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or Settings()
        self.ledger = ledger
        self.catalog = catalog
        self.table_seats = list(table_seats or [])
        self.transactions = TransactionLedger()
        self.orders = OrderEngine(ledger, catalog, self.transactions)
        self.supply = SupplyGate(
            ledger, self.transactions, self.settings.donation_threshold
        )
        self._lock = threading.RLock()
        self.catalog.recompute_pricing(self.ledger, self.settings.markup)
        logger.info(
            "Restaurant ready: %d ingredients, %d dishes in %d categories, %d tables",
            len(self.ledger),
            len(self.catalog.dishes()),
            len(self.catalog.categories),
            len(self.table_seats),
        )

    # -------- Construction --------

    @classmethod
    def from_feeds(
        cls,
        stock: FeedSource,
        menu: FeedSource,
        tables: Optional[FeedSource] = None,
        settings: Optional[Settings] = None,
    ) -> "Restaurant":
        """Load the three seed feeds, then run the pricing pass."""
        return cls(
            ledger=load_stock(stock),
            catalog=load_menu(menu),
            table_seats=load_tables(tables) if tables is not None else None,
            settings=settings,
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Restaurant":
        settings = settings or Settings()
        return cls.from_feeds(
            settings.stock_path,
            settings.menu_path,
            settings.tables_path,
            settings=settings,
        )

    @classmethod
    def from_data_dir(
        cls, data_dir: Union[str, Path], settings: Optional[Settings] = None
    ) -> "Restaurant":
        base = settings or Settings()
        return cls.from_settings(base.model_copy(update={"data_dir": Path(data_dir)}))

    # -------- Stockroom --------

    def ingredient_names(self) -> List[str]:
        with self._lock:
            return self.ledger.names()

    def stock(self, ingredient_name: str) -> StockView:
        """Raises NotFoundError if the ingredient is unknown."""
        with self._lock:
            ingredient = self.ledger.get(ingredient_name)
            return StockView(**ingredient.model_dump())

    def update_stock(self, ingredient_name: str, delta: int) -> None:
        """Adjust stock by a signed delta; unknown names are ignored."""
        with self._lock:
            self.ledger.update(ingredient_name, delta)

    def restock(self, ingredient_name: str, quantity: int) -> bool:
        with self._lock:
            return self.supply.restock(ingredient_name, quantity)

    def donate(self, ingredient_name: str, quantity: int) -> bool:
        with self._lock:
            return self.supply.donate(ingredient_name, quantity)

    # -------- Menu --------

    def all_dishes(self) -> List[DishView]:
        with self._lock:
            return [_dish_view(dish) for dish in self.catalog.dishes()]

    def categories(self) -> List[str]:
        with self._lock:
            return self.catalog.category_names()

    def dishes_by_category(self, category: str) -> List[DishView]:
        with self._lock:
            return [_dish_view(dish) for dish in self.catalog.dishes(category)]

    def refresh_prices(self) -> None:
        with self._lock:
            self.catalog.recompute_pricing(self.ledger, self.settings.markup)

    def price_summary(self) -> Dict[str, Dict[str, float]]:
        """Count, mean and median dish price per category."""
        with self._lock:
            return self.catalog.price_summary()

    # -------- Orders --------

    def place_order(self, dish_name: str, quantity: int) -> OrderResult:
        """Place an order and report what happened.

        `was_available` is measured on the requested dish before the order is
        served; `total_profit` is the day's profit once it has been recorded.
        """
        with self._lock:
            was_available = self.orders.check_availability(dish_name, quantity)
            outcome = self.orders.place_order(dish_name, quantity)
            return OrderResult(
                dish_name=dish_name,
                quantity=quantity,
                was_available=was_available,
                total_profit=self.transactions.total_profit(),
                served_dish=outcome.served,
                succeeded=outcome.succeeded,
            )

    # -------- Journal --------

    def total_profit(self) -> float:
        with self._lock:
            return self.transactions.total_profit()

    def transactions_log(
        self, kind: Optional[TransactionKind] = None
    ) -> List[TransactionView]:
        with self._lock:
            return [record.to_view() for record in self.transactions.records(kind)]

    def count_transactions(
        self, kind: TransactionKind, succeeded: Optional[bool] = None
    ) -> int:
        with self._lock:
            return self.transactions.count(kind, succeeded)

    def reset_transactions(self) -> None:
        with self._lock:
            self.transactions.reset()
            logger.info("Transaction journal reset")

    # -------- Tables --------

    def table_capacities(self) -> List[int]:
        with self._lock:
            return list(self.table_seats)
