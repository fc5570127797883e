"""A first-in, first-out singly linked list."""

from __future__ import annotations

from collections import deque
from typing import Deque, Generic, Optional, TypeVar

T = TypeVar("T")


class FifoList(Generic[T]):
    """Elements are pushed at the tail and popped from the head."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: Deque[T] = deque()

    def peek_head(self) -> Optional[T]:
        """Return the oldest element, or None if the list is empty."""
        return self._items[0] if self._items else None

    def peek_tail(self) -> Optional[T]:
        """Return the newest element, or None if the list is empty."""
        return self._items[-1] if self._items else None

    def push(self, elem: T) -> None:
        """Append ``elem`` at the tail."""
        self._items.append(elem)

    def pop(self) -> Optional[T]:
        """Remove and return the head element, or None if the list is empty."""
        return self._items.popleft() if self._items else None

    def __len__(self) -> int:
        return len(self._items)