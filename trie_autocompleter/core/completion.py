# completion.py - case-insensitive query layer over the Trie.

from __future__ import annotations
from typing import List, Optional

from trie_autocompleter.core.trie import Trie


class CompletionSearch:
    """
    Looks up completions for a typed prefix.
    Dictionary words are assumed lowercase already, so only the query is
    normalised.
    """

    def __init__(self, trie: Trie, allow_zero: bool = False) -> None:
        self.trie = trie
        self.allow_zero = allow_zero

    def best_match(self, prefix: str) -> Optional[str]:
        """Most frequent word starting with `prefix`, or None."""
        return self.trie.most_frequent_with_prefix(prefix.lower(), allow_zero=self.allow_zero)

    def words_with_prefix(self, prefix: str) -> List[str]:
        """Every word starting with `prefix`, alphabetically."""
        return self.trie.list_with_prefix(prefix.lower())
