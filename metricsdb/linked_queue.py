"""A double-ended list used as a front-loaded queue."""

from __future__ import annotations

from collections import deque
from typing import Deque, Generic, Optional, TypeVar

T = TypeVar("T")


class LinkedQueue(Generic[T]):
    """A queue whose elements are pushed and popped at the front."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: Deque[T] = deque()

    def peek_front(self) -> Optional[T]:
        """Return the front element, or None if the queue is empty."""
        return self._items[0] if self._items else None

    def push_front(self, elem: T) -> None:
        """Put ``elem`` at the front."""
        self._items.appendleft(elem)

    def pop_front(self) -> Optional[T]:
        """Remove and return the front element, or None if the queue is empty."""
        return self._items.popleft() if self._items else None

    def __len__(self) -> int:
        return len(self._items)