"""A prefix tree that stores words and looks them up character by character."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    is_end: bool = False


class Trie:
    """A set of words stored as a tree of characters."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _Node())
        node.is_end = True

    def search(self, word: str) -> bool:
        """Whether ``word`` was inserted as a whole word."""
        node = self._root
        for char in word:
            child = node.children.get(char)
            if child is None:
                return False
            node = child
        return node.is_end

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)