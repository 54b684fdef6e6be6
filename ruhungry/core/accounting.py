"""
Transaction journal of the day.

Every order, donation and restock attempt is written here, whether it
succeeded or not. The day's profit is never stored: it is recomputed from
the whole journal each time it is asked for.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from ruhungry.domain.types import TransactionKind, TransactionView


@dataclass(frozen=True)
class TransactionRecord:
    """One attempt written to the journal.

    Attributes:
        kind: Order, donation or restock.
        subject: Dish name for orders, ingredient name otherwise.
        quantity: Requested quantity.
        profit: Profit contribution. Positive for a served order, negative
            for a paid restock, zero for everything else.
        succeeded: Whether the attempt went through.
    """

    kind: TransactionKind
    subject: str
    quantity: int
    profit: float = 0.0
    succeeded: bool = False

    def to_view(self) -> TransactionView:
        return TransactionView(
            kind=self.kind,
            subject=self.subject,
            quantity=self.quantity,
            profit=self.profit,
            succeeded=self.succeeded,
        )


@dataclass
class TransactionLedger:
    """Append-only journal of the day's transactions."""

    entries: List[TransactionRecord] = field(default_factory=list)

    def append(self, record: TransactionRecord) -> None:
        self.entries.append(record)

    def reset(self) -> None:
        """Forget every record. The list is swapped, never emptied in place."""
        self.entries = []

    def total_profit(self) -> float:
        return sum(record.profit for record in self.entries)

    def records(self, kind: Optional[TransactionKind] = None) -> List[TransactionRecord]:
        if kind is None:
            return list(self.entries)
        return [record for record in self.entries if record.kind == kind]

    def count(self, kind: TransactionKind, succeeded: Optional[bool] = None) -> int:
        return sum(
            1
            for record in self.entries
            if record.kind == kind
            and (succeeded is None or record.succeeded == succeeded)
        )

    def __iter__(self) -> Iterator[TransactionRecord]:
        return iter(list(self.entries))

    def __len__(self) -> int:
        return len(self.entries)
