"""
RUHungry package

Simulates one trading day of the RUHungry restaurant: the stockroom,
the menu priced from that stock, customer orders with substitution,
donations and restocks gated by the day's profit, and the transaction
journal the profit is computed from.

Subpackages: domain objects, the core engine, seed data loaders and a
small console layer.
"""

from ruhungry.core.restaurant import Restaurant
from ruhungry.domain.errors import MalformedFeedError, NotFoundError, RUHungryError

__all__ = [
    "Restaurant",
    "RUHungryError",
    "NotFoundError",
    "MalformedFeedError",
    "core",
    "domain",
    "data",
    "ui",
]
