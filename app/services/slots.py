from datetime import time
from typing import NamedTuple

from app.core.exceptions import InvalidSlot


class TimeRange(NamedTuple):
    start: time
    end: time


class SlotResolver:
    """Maps a slot keyword (``am``, ``pm``, ``udur`` by default) to its time range."""

    def __init__(self, table: dict[str, tuple[time, time]]):
        self._table = {keyword: TimeRange(*bounds) for keyword, bounds in table.items()}

    @property
    def keywords(self):
        return tuple(self._table)

    def resolve(self, keyword) -> TimeRange:
        if not isinstance(keyword, str) or keyword not in self._table:
            raise InvalidSlot(keyword)
        return self._table[keyword]
