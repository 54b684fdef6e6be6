"""
Domain objects for RUHungry.

Ingredients and the stockroom ledger, dishes and the menu catalog, the
read-side views handed to callers, and the engine's exceptions.
"""

from .errors import MalformedFeedError, NotFoundError, RUHungryError
from .ingredients import Ingredient, IngredientLedger
from .menu import Category, Dish, MenuCatalog
from .types import DishView, OrderResult, StockView, TransactionKind, TransactionView

__all__ = [
    "Ingredient",
    "IngredientLedger",
    "Category",
    "Dish",
    "MenuCatalog",
    "TransactionKind",
    "StockView",
    "DishView",
    "OrderResult",
    "TransactionView",
    "RUHungryError",
    "NotFoundError",
    "MalformedFeedError",
]
