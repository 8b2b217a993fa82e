"""A trie of lowercase words with search, removal and completion."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    terminal: bool = False


def _check(word: str) -> None:
    if any(not "a" <= ch <= "z" for ch in word):
        raise ValueError(f"word {word!r} must hold lowercase letters a to z only")


class Trie:
    """A trie of words made of the letters a to z."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        _check(word)
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.terminal = True

    def _node(self, word: str) -> Optional[_TrieNode]:
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return None
            node = child
        return node

    def search(self, word: str) -> bool:
        """Whether ``word`` was added as a whole word."""
        _check(word)
        node = self._node(word)
        return node is not None and node.terminal

    def remove(self, word: str) -> None:
        """Remove ``word`` and prune nodes no other word needs."""
        _check(word)

        def prune(node: _TrieNode, index: int) -> None:
            if index == len(word):
                node.terminal = False
                return
            child = node.children.get(word[index])
            if child is None:
                return
            prune(child, index + 1)
            if not child.terminal and not child.children:
                del node.children[word[index]]

        prune(self._root, 0)

    def pattern_match(self, words: Iterable[str], pattern: str) -> bool:
        """Add every suffix of each of ``words`` and report whether ``pattern``
        is among the stored words."""
        for word in words:
            for start in range(len(word)):
                self.insert(word[start:])
        return self.search(pattern)

    def autocomplete(self, words: Iterable[str], pattern: str) -> list[str]:
        """Add ``words`` and list, alphabetically, the stored words beginning
        with ``pattern``; empty unless ``pattern`` is itself a stored word."""
        for word in words:
            self.insert(word)
        if not self.search(pattern):
            return []
        node = self._node(pattern)
        assert node is not None
        return list(self._words_below(node, pattern))

    def _words_below(self, node: _TrieNode, prefix: str) -> Iterator[str]:
        if node.terminal:
            yield prefix
        for ch in sorted(node.children):
            yield from self._words_below(node.children[ch], prefix + ch)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def __iter__(self) -> Iterator[str]:
        return self._words_below(self._root, "")