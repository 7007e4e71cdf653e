# src/core/ordered_set.py — v1
"""Ordered unique collection of strings.

Keeps its elements in ascending code-point order and suppresses exact
duplicates. Used to merge the tag lists of a community into a single
alphabetical set.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator


class OrderedUniqueCollection:
    """Sorted, duplicate-free string container.

    Equality is exact string equality: "Data" and "data" are distinct
    elements, and uppercase sorts before lowercase.
    """

    __slots__ = ("_items",)

    def __init__(self, values: Iterable[str] = ()) -> None:
        self._items: list[str] = []
        self.update(values)

    def insert(self, value: str) -> bool:
        """Insert value in order. Returns False if an equal element exists."""
        pos = bisect_left(self._items, value)
        if pos < len(self._items) and self._items[pos] == value:
            return False
        self._items.insert(pos, value)
        return True

    def update(self, values: Iterable[str]) -> int:
        """Insert every value, returning how many were new."""
        return sum(1 for value in values if self.insert(value))

    def clear(self) -> None:
        self._items.clear()

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, str):
            return False
        pos = bisect_left(self._items, value)
        return pos < len(self._items) and self._items[pos] == value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
