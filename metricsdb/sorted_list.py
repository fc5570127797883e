"""A list kept in ascending order as elements are added."""

from __future__ import annotations

from bisect import insort_left
from typing import Any, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T", bound=Any)


class SortedList(Generic[T]):
    """Keeps elements ascending; a new element goes before any equal ones."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: List[T] = []

    def peek_begin(self) -> Optional[T]:
        """Return the smallest element, or None if empty."""
        return self._items[0] if self._items else None

    def seek_end(self) -> Optional[T]:
        """Return the largest element, or None if empty."""
        return self._items[-1] if self._items else None

    def add(self, elem: T) -> None:
        """Insert ``elem`` in order."""
        insort_left(self._items, elem)

    def pop(self) -> Optional[T]:
        """Remove and return the smallest element, or None if empty."""
        return self._items.pop(0) if self._items else None

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)