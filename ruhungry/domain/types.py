# ruhungry/domain/types.py
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class TransactionKind(Enum):
    # Values match the labels used in the transaction journal
    ORDER = "order"
    DONATION = "donation"
    RESTOCK = "restock"


# ---------- Read-side views ----------


class StockView(BaseModel):
    """Snapshot of one stockroom entry."""

    id: int
    name: str
    stock_level: int
    unit_cost: float


class DishView(BaseModel):
    name: str
    category: str
    price: float
    profit: float


class TransactionView(BaseModel):
    kind: TransactionKind
    subject: str
    quantity: int
    profit: float
    succeeded: bool


class OrderResult(BaseModel):
    """Answer returned to the caller of `Restaurant.place_order`.

    `was_available` tells whether the requested dish itself could be cooked
    when the order came in; `served_dish` is the dish actually sent out
    (the requested one or a substitute), or None when the whole category
    was out of stock.
    """

    dish_name: str
    quantity: int
    was_available: bool
    total_profit: float
    served_dish: Optional[str] = None
    succeeded: bool = False

    @property
    def substituted(self) -> bool:
        return self.succeeded and not self.was_available
