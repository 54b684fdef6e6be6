"""
Donations and restocks, both gated by the profit made so far.

Profit is read from the journal before the new record is written.
"""

import logging

from ruhungry.core.accounting import TransactionLedger, TransactionRecord
from ruhungry.core.orders import check_quantity
from ruhungry.domain.ingredients import IngredientLedger
from ruhungry.domain.types import TransactionKind

logger = logging.getLogger(__name__)

DONATION_PROFIT_THRESHOLD = 50.0


class SupplyGate:
    def __init__(
        self,
        ledger: IngredientLedger,
        transactions: TransactionLedger,
        donation_threshold: float = DONATION_PROFIT_THRESHOLD,
    ):
        self.ledger = ledger
        self.transactions = transactions
        self.donation_threshold = donation_threshold

    def donate(self, ingredient_name: str, quantity: int) -> bool:
        """Give away `quantity` units of an ingredient.

        Allowed only when the day's profit is above the donation threshold
        and the stock covers the quantity. The record carries no profit either
        way.

        Raises:
            NotFoundError: If the ingredient is unknown.
        """
        check_quantity(quantity)
        ingredient = self.ledger.get(ingredient_name)
        profit = self.transactions.total_profit()
        approved = (
            profit > self.donation_threshold and ingredient.stock_level >= quantity
        )
        self.transactions.append(
            TransactionRecord(
                kind=TransactionKind.DONATION,
                subject=ingredient_name,
                quantity=quantity,
                succeeded=approved,
            )
        )
        if approved:
            ingredient.stock_level -= quantity
        logger.info(
            "Donation of %d %s %s (profit %.2f)",
            quantity,
            ingredient.name,
            "approved" if approved else "refused",
            profit,
        )
        return approved

    def restock(self, ingredient_name: str, quantity: int) -> bool:
        """Buy `quantity` units of an ingredient, paid out of the day's profit.

        Formula
        -------
        cost = unit_cost x quantity, approved when profit > cost.
        An approved restock is recorded with profit = -cost.

        Raises:
            NotFoundError: If the ingredient is unknown.
        """
        check_quantity(quantity)
        ingredient = self.ledger.get(ingredient_name)
        cost = ingredient.unit_cost * quantity
        profit = self.transactions.total_profit()
        approved = profit > cost
        self.transactions.append(
            TransactionRecord(
                kind=TransactionKind.RESTOCK,
                subject=ingredient_name,
                quantity=quantity,
                profit=-cost if approved else 0.0,
                succeeded=approved,
            )
        )
        if approved:
            ingredient.stock_level += quantity
        logger.info(
            "Restock of %d %s (cost %.2f) %s (profit %.2f)",
            quantity,
            ingredient.name,
            cost,
            "approved" if approved else "refused",
            profit,
        )
        return approved
