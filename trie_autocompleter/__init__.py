"""
trie_autocompleter

Frequency-ranked word completion over a prefix tree.
Contains:
 - Trie / TrieNode: the dictionary store
 - read_dictionary: word frequency list loader
 - CompletionSearch: case-insensitive best-match queries
 - the interaction state machine deciding when completions are offered
"""

__version__ = "0.1.0"

from .core.trie import Trie, TrieNode
from .core.dictionary import DictionaryEntry, read_dictionary
from .core.completion import CompletionSearch
from .core.interaction import Mode, handle_commit, handle_edit
from .core.errors import CompleterError, DictionaryUnavailable, MalformedEntry, OutOfRange

__all__ = [
    "Trie",
    "TrieNode",
    "DictionaryEntry",
    "read_dictionary",
    "CompletionSearch",
    "Mode",
    "handle_edit",
    "handle_commit",
    "CompleterError",
    "DictionaryUnavailable",
    "MalformedEntry",
    "OutOfRange",
]
