"""A probabilistic skip list with a fixed number of layers."""

from __future__ import annotations

import random
from typing import Any, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T", bound=Any)


class _Node(Generic[T]):
    """A node in one layer; sentinel heads carry no element."""

    __slots__ = ("elem", "next", "down")

    def __init__(
        self,
        elem: Optional[T] = None,
        next: Optional["_Node[T]"] = None,
        down: Optional["_Node[T]"] = None,
    ) -> None:
        self.elem = elem
        self.next = next
        self.down = down


class SkipList(Generic[T]):
    """An ordered multiset of comparable elements.

    Layer 0 is the sparsest express layer; the last layer holds every element.
    Each added element is promoted one layer up with probability one half.
    """

    layers = 4

    def __init__(self, rng: Optional[Any] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._len = 0
        self._top: _Node[T] = _Node()
        head = self._top
        for _ in range(1, self.layers):
            head.down = _Node()
            head = head.down

    def layer_head(self, index: int) -> _Node[T]:
        """Return the sentinel node that starts layer ``index`` (0 is the top)."""
        if not 0 <= index < self.layers:
            raise IndexError(f"Cannot get head for layer {index}")
        head = self._top
        for _ in range(index):
            if head.down is None:
                break
            head = head.down
        return head

    def add(self, elem: T) -> None:
        """Insert ``elem``, placing it before any equal elements."""
        prev = self._top
        path: List[_Node[T]] = []
        while True:
            current = prev.next
            while current is not None and elem > current.elem:
                prev = current
                current = current.next
            path.append(prev)
            if prev.down is None:
                break
            prev = prev.down

        node: _Node[T] = _Node(elem, prev.next)
        prev.next = node

        lower = node
        for predecessor in reversed(path[:-1]):
            if not self._rng.random() < 0.5:
                break
            raised: _Node[T] = _Node(elem, predecessor.next, lower)
            predecessor.next = raised
            lower = raised

        self._len += 1

    def contains(self, value: T) -> bool:
        """Return True if an element equal to ``value`` is present."""
        prev: Optional[_Node[T]] = self._top
        while prev is not None:
            current = prev.next
            while current is not None and value > current.elem:
                prev = current
                current = current.next
            if current is not None and current.elem == value:
                return True
            prev = prev.down
        return False

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[T]:
        node = self.layer_head(self.layers - 1).next
        while node is not None:
            yield node.elem  # type: ignore[misc]
            node = node.next

    def __repr__(self) -> str:
        return f"SkipList({list(self)!r})"