"""An immutable singly linked list whose tails are shared between versions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class _Node(Generic[T]):
    elem: T
    next: Optional["_Node[T]"]


class PersistentList(Generic[T]):
    """A persistent stack: ``prepend`` and ``tail`` return new lists and never modify this one."""

    __slots__ = ("_head",)

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None

    @classmethod
    def _from_node(cls, node: Optional[_Node[T]]) -> "PersistentList[T]":
        new = cls()
        new._head = node
        return new

    def prepend(self, elem: T) -> "PersistentList[T]":
        """Return a new list with ``elem`` in front of this list."""
        return self._from_node(_Node(elem, self._head))

    def tail(self) -> "PersistentList[T]":
        """Return the list without its first element; the empty list stays empty."""
        return self._from_node(self._head.next if self._head else None)

    def head(self) -> Optional[T]:
        """Return the first element, or None if the list is empty."""
        return self._head.elem if self._head else None

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.elem
            node = node.next

    def __repr__(self) -> str:
        return f"PersistentList({list(self)!r})"