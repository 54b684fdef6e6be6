"""
Readers for the three seed feeds: stockroom, menu and tables.

The feeds are whitespace separated text files. Numbers may sit anywhere on
a line, names always take the rest of their line, so the readers work on a
small cursor that can hand out either the next token or the rest of the
current line.
"""

import logging
from pathlib import Path
from typing import List, Optional, TextIO, Union

from ruhungry.domain.errors import MalformedFeedError
from ruhungry.domain.ingredients import Ingredient, IngredientLedger
from ruhungry.domain.menu import MenuCatalog

logger = logging.getLogger(__name__)

FeedSource = Union[str, Path, TextIO]


def read_feed(source: FeedSource, feed: str = "seed") -> str:
    """Return the text of a feed given as a path or an open text stream.

    Raises:
        FileNotFoundError: If the path does not exist.
        MalformedFeedError: If the bytes are not valid UTF-8.
    """
    try:
        if hasattr(source, "read"):
            return source.read()
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"Feed file not found: {path}")
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedFeedError(
            feed, f"invalid UTF-8 at byte {exc.start}"
        ) from exc


class FeedCursor:
    """Token / line cursor over a feed's text."""

    def __init__(self, feed: str, text: str):
        self.feed = feed
        self.text = text
        self.pos = 0

    @property
    def line(self) -> int:
        return self.text.count("\n", 0, self.pos) + 1

    def error(self, message: str) -> MalformedFeedError:
        return MalformedFeedError(self.feed, message, self.line)

    def _token_bounds(self):
        start = self.pos
        while start < len(self.text) and self.text[start].isspace():
            start += 1
        end = start
        while end < len(self.text) and not self.text[end].isspace():
            end += 1
        return start, end

    def peek(self) -> Optional[str]:
        start, end = self._token_bounds()
        return self.text[start:end] or None

    def next_token(self) -> str:
        start, end = self._token_bounds()
        if start == end:
            raise self.error("unexpected end of feed")
        self.pos = end
        return self.text[start:end]

    def next_int(self) -> int:
        token = self.next_token()
        try:
            return int(token)
        except ValueError:
            raise self.error(f"expected an integer, got {token!r}") from None

    def next_float(self) -> float:
        token = self.next_token()
        try:
            return float(token)
        except ValueError:
            raise self.error(f"expected a number, got {token!r}") from None

    def has_int(self) -> bool:
        return _parses(self.peek(), int)

    def has_float(self) -> bool:
        return _parses(self.peek(), float)

    def rest_of_line(self) -> str:
        end = self.text.find("\n", self.pos)
        if end == -1:
            end = len(self.text)
        line = self.text[self.pos : end]
        self.pos = min(end + 1, len(self.text))
        return line.strip()

    def next_line(self) -> str:
        """Next non-blank line, or an empty string at the end of the feed."""
        line = self.rest_of_line()
        while not line and self.pos < len(self.text):
            line = self.rest_of_line()
        return line

    def at_end(self) -> bool:
        return self.peek() is None


def _parses(token: Optional[str], kind) -> bool:
    if token is None:
        return False
    try:
        kind(token)
    except ValueError:
        return False
    return True


# -------- Stockroom --------


def load_stock(source: FeedSource) -> IngredientLedger:
    """Build the stockroom from a stock feed.

    Layout::

        <bucket count>
        <id> <name ...>
        <unit cost> <stock amount>
        ...

    A short or malformed record ends the feed: the records read so far are
    kept and a warning is logged.

    Raises:
        MalformedFeedError: If the bucket count is missing or invalid, or an
            id appears twice.
    """
    cursor = FeedCursor("stock", read_feed(source, "stock"))
    size = cursor.next_int()
    if size <= 0:
        raise cursor.error(f"bucket count must be positive, got {size}")
    cursor.rest_of_line()
    ledger = IngredientLedger(size)

    truncated = False
    while not cursor.at_end():
        record_line = cursor.line
        truncated = True
        if not cursor.has_int():
            break
        ingredient_id = cursor.next_int()
        name = cursor.rest_of_line()
        if not name or not cursor.has_float():
            break
        unit_cost = cursor.next_float()
        if not cursor.has_int():
            break
        stock_level = cursor.next_int()
        truncated = False
        cursor.rest_of_line()
        try:
            ledger.add(
                Ingredient(
                    id=ingredient_id,
                    name=name,
                    stock_level=stock_level,
                    unit_cost=unit_cost,
                )
            )
        except ValueError as e:
            raise MalformedFeedError("stock", str(e), record_line) from e
    if truncated:
        logger.warning(
            "Stock feed stopped at line %d on a malformed record, %d ingredients kept",
            record_line,
            len(ledger),
        )
    return ledger


# -------- Menu --------


def load_menu(source: FeedSource) -> MenuCatalog:
    """Build the menu from a menu feed.

    Layout::

        <category count>
        <category name>
        <dish count>
        <dish name>
        <ingredient count> <id> <id> ...
        ...

    Dishes land at the head of their category, so each category ends up in
    reverse file order.

    Raises:
        MalformedFeedError: On any missing or non numeric field.
    """
    cursor = FeedCursor("menu", read_feed(source, "menu"))
    catalog = MenuCatalog()
    n_categories = cursor.next_int()
    cursor.rest_of_line()
    for _ in range(n_categories):
        category_name = cursor.next_line()
        if not category_name:
            raise cursor.error("missing category name")
        index = catalog.add_category(category_name)
        n_dishes = cursor.next_int()
        cursor.rest_of_line()
        for _ in range(n_dishes):
            dish_name = cursor.next_line()
            if not dish_name:
                raise cursor.error(f"missing dish name in category {category_name!r}")
            n_ids = cursor.next_int()
            if n_ids < 0:
                raise cursor.error(f"negative ingredient count for {dish_name!r}")
            ids = [cursor.next_int() for _ in range(n_ids)]
            cursor.rest_of_line()
            catalog.add_dish(index, dish_name, ids)
    return catalog


# -------- Tables --------


def load_tables(source: FeedSource) -> List[int]:
    """Seat capacity of each table: the product of the two numbers per table."""
    cursor = FeedCursor("tables", read_feed(source, "tables"))
    n_tables = cursor.next_int()
    return [cursor.next_int() * cursor.next_int() for _ in range(n_tables)]
