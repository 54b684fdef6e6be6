"""Exceptions raised by the RUHungry engine."""


class RUHungryError(Exception):
    """Base class for every engine error."""


class NotFoundError(RUHungryError, LookupError):
    """A dish, category or ingredient name/id could not be resolved."""

    def __init__(self, kind: str, key):
        self.kind = kind
        self.key = key
        super().__init__(f"Unknown {kind}: {key!r}")


class MalformedFeedError(RUHungryError, ValueError):
    """A seed data feed could not be parsed."""

    def __init__(self, feed: str, message: str, line: int = 0):
        self.feed = feed
        self.line = line
        where = f" (line {line})" if line else ""
        super().__init__(f"{feed} feed{where}: {message}")
