"""
Trading day simulation.

Drives a restaurant through a stream of random customer orders, with a
donation request and a restock attempt every few orders, then sums the
day up from the transaction journal.

Rules:
- Each order picks a dish uniformly from the menu and a quantity between
  1 and `max_quantity`.
- Every `supply_every` orders, a random ingredient is asked for as a
  donation, then the lowest-stock ingredient is restocked.
- Profit and the donation/restock tallies are read from the journal.
"""

import logging
from typing import Dict, List, Optional

import numpy as np
from pydantic import BaseModel

from ruhungry.core.restaurant import Restaurant
from ruhungry.domain.types import TransactionKind

logger = logging.getLogger(__name__)


class DayReport(BaseModel):
    """Summary of a simulated trading day."""

    orders_requested: int
    orders_served: int
    orders_substituted: int
    orders_lost: int
    donations_approved: int
    donations_refused: int
    restocks_approved: int
    restocks_refused: int
    total_profit: float
    median_dish_price: float
    served_by_dish: Dict[str, int]

    @property
    def service_rate(self) -> float:
        if self.orders_requested <= 0:
            return 0.0
        return self.orders_served / self.orders_requested


def simulate_day(
    restaurant: Restaurant,
    n_orders: int = 60,
    seed: Optional[int] = None,
    max_quantity: int = 3,
    supply_every: int = 10,
    donation_quantity: int = 5,
    restock_quantity: int = 10,
) -> DayReport:
    """Run `n_orders` random orders against `restaurant` and report the day.

    Args:
        restaurant: The restaurant to drive; its state is mutated.
        n_orders: Number of customer orders.
        seed: Seed for numpy's random generator, for reproducible days.
        max_quantity: Largest quantity a customer orders at once.
        supply_every: Orders between two donation/restock rounds (0 disables).
        donation_quantity: Units asked for by each donation request.
        restock_quantity: Units bought by each restock attempt.

    Returns:
        A DayReport built from the journal at the end of the day.
    """
    if n_orders < 0:
        raise ValueError(f"n_orders must be >= 0, got {n_orders}")
    if max_quantity < 1:
        raise ValueError(f"max_quantity must be >= 1, got {max_quantity}")

    rng = np.random.default_rng(seed)
    dish_names = [dish.name for dish in restaurant.all_dishes()]
    ingredient_names = restaurant.ingredient_names()

    served = substituted = lost = 0
    served_by_dish: Dict[str, int] = {}
    for i in range(n_orders):
        if dish_names:
            dish_name = dish_names[int(rng.integers(len(dish_names)))]
            quantity = int(rng.integers(1, max_quantity + 1))
            result = restaurant.place_order(dish_name, quantity)
            if result.succeeded:
                served += 1
                substituted += int(result.substituted)
                served_by_dish[result.served_dish] = (
                    served_by_dish.get(result.served_dish, 0) + quantity
                )
            else:
                lost += 1

        if supply_every and ingredient_names and (i + 1) % supply_every == 0:
            asked = ingredient_names[int(rng.integers(len(ingredient_names)))]
            restaurant.donate(asked, donation_quantity)
            restaurant.restock(_lowest_stock(restaurant, ingredient_names), restock_quantity)

    report = _build_report(restaurant, n_orders, served, substituted, lost, served_by_dish)
    logger.info(
        "Day over: %d/%d orders served (%d substituted), profit %.2f",
        report.orders_served,
        report.orders_requested,
        report.orders_substituted,
        report.total_profit,
    )
    return report


def _lowest_stock(restaurant: Restaurant, ingredient_names: List[str]) -> str:
    levels = [restaurant.stock(name).stock_level for name in ingredient_names]
    return ingredient_names[int(np.argmin(levels))]


def _build_report(
    restaurant: Restaurant,
    n_orders: int,
    served: int,
    substituted: int,
    lost: int,
    served_by_dish: Dict[str, int],
) -> DayReport:
    prices = [dish.price for dish in restaurant.all_dishes()]
    return DayReport(
        orders_requested=n_orders,
        orders_served=served,
        orders_substituted=substituted,
        orders_lost=lost,
        donations_approved=restaurant.count_transactions(
            TransactionKind.DONATION, succeeded=True
        ),
        donations_refused=restaurant.count_transactions(
            TransactionKind.DONATION, succeeded=False
        ),
        restocks_approved=restaurant.count_transactions(
            TransactionKind.RESTOCK, succeeded=True
        ),
        restocks_refused=restaurant.count_transactions(
            TransactionKind.RESTOCK, succeeded=False
        ),
        total_profit=restaurant.total_profit(),
        median_dish_price=float(np.median(prices)) if prices else 0.0,
        served_by_dish=served_by_dish,
    )
