"""A character trie holding whole words."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class _TrieNode:
    word: Optional[str] = None
    children: Dict[str, "_TrieNode"] = field(default_factory=dict)


class Trie:
    """Stores strings and answers whether a whole string was inserted."""

    __slots__ = ("_root",)

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, value: str) -> None:
        """Add ``value`` to the trie."""
        node = self._root
        for char in value:
            node = node.children.setdefault(char, _TrieNode())
        node.word = value

    def contains(self, value: str) -> bool:
        """Return True if ``value`` was inserted as a whole word."""
        node = self._root
        for char in value:
            node = node.children.get(char)
            if node is None:
                return False
        return node.word is not None and node.word.lower() == value.lower()

    def __contains__(self, value: object) -> bool:
        return isinstance(value, str) and self.contains(value)