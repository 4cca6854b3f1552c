# trie.py
# Prefix tree holding the dictionary words and their corpus frequencies.
# Append-only: nodes are created lazily on insert and never removed.

from __future__ import annotations
from collections import defaultdict
from typing import Dict, Iterator, List, Optional, Tuple

Word = str
Freq = int
Candidate = Tuple[Word, Freq]


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode (owned, no parent pointers)
    is_word: True iff the path from the root spells a stored word
    freq: corpus occurrence count, only set on terminal nodes
    """

    __slots__ = ("children", "is_word", "freq")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = defaultdict(TrieNode)
        self.is_word = False
        self.freq: Optional[Freq] = None

    def __repr__(self) -> str:
        return (
            f"TrieNode(is_word={self.is_word}, freq={self.freq}, "
            f"children={len(self.children)})"
        )


class Trie:
    """
    Trie storing dictionary words for prefix lookup. Used by CompletionSearch for:
     - picking the most frequent word under a typed prefix
     - listing every word under a prefix, alphabetically
    Words are stored exactly as given; callers normalise case.
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._count = 0

    @property
    def root(self) -> TrieNode:
        return self._root

    # insertion -----------------------------------------------------
    def insert(self, word: Word, freq: Freq) -> None:
        """
        Insert `word` with frequency `freq`.
        Re-inserting a word overwrites its frequency (last write wins).
        """
        if freq < 0:
            raise ValueError(f"frequency must be non-negative, got {freq}")

        node = self._root
        for ch in word:
            node = node.children[ch]
        if not node.is_word:
            self._count += 1
        node.is_word = True
        node.freq = freq

    # lookup ---------------------------------------------------------
    def find_node(self, prefix: str) -> Optional[TrieNode]:
        """Follow `prefix` from the root. Empty prefix gives the root."""
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def find_word_node(self, word: Word) -> Optional[TrieNode]:
        """Like find_node, but the reached node must end a stored word."""
        node = self.find_node(word)
        if node is not None and node.is_word:
            return node
        return None

    # search/traversal ---------------------------------------------------------
    def list_with_prefix(self, prefix: str) -> List[Word]:
        """All stored words starting with `prefix`, sorted alphabetically."""
        node = self.find_node(prefix)
        if node is None:
            return []

        out = [word for word, _ in self._walk(node, prefix)]
        out.sort()
        return out

    def most_frequent_with_prefix(
        self, prefix: str, allow_zero: bool = False
    ) -> Optional[Word]:
        """
        Return the word under `prefix` with the highest frequency, or None.

        The subtree is walked depth-first in pre-order, children in insertion
        order. A word only replaces the current best when its frequency is
        strictly greater, so on ties the first word reached wins: a prefix
        word beats its extensions, and earlier-inserted branches beat later ones.

        Zero frequencies are never selectable unless `allow_zero` is set, in
        which case a zero-frequency word is returned when nothing beats it.
        """
        start = self.find_node(prefix)
        if start is None:
            return None

        best: Optional[Word] = None
        best_freq = -1 if allow_zero else 0
        for word, freq in self._walk(start, prefix):
            if freq > best_freq:
                best, best_freq = word, freq
        return best

    def items(self, prefix: str = "") -> Iterator[Candidate]:
        """Yield (word, freq) under `prefix` in traversal order."""
        node = self.find_node(prefix)
        if node is None:
            return iter(())
        return self._walk(node, prefix)

    # internal traversal ---------------------------------------------------------
    @staticmethod
    def _walk(start: TrieNode, prefix: str) -> Iterator[Candidate]:
        """Iterative pre-order walk, so deep words cannot hit the recursion limit."""
        stack: List[Tuple[TrieNode, str]] = [(start, prefix)]
        while stack:
            node, word = stack.pop()
            if node.is_word:
                yield word, node.freq
            # reversed so the first-inserted child is popped first
            for ch, child in reversed(list(node.children.items())):
                stack.append((child, word + ch))

    # convenience -----------------------------------------------------
    def __len__(self) -> int:
        """Number of distinct stored words."""
        return self._count

    def __contains__(self, word: object) -> bool:
        """Simple membership check."""
        return isinstance(word, str) and self.find_word_node(word) is not None
