# trie_autocompleter/core/protocols.py
"""
Interfaces between the completion core and the editing widget it drives.

The core never talks to a concrete widget. It reads text and issues edits
through TextSurface, and it is fed TextEdited notifications. Positions are
flat character offsets into the whole text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable


@dataclass(frozen=True)
class TextEdited:
    """
    Notification that the surface text changed.
    offset: where the change starts
    inserted: number of characters inserted at `offset`
    removed: number of characters removed at `offset` before inserting
    """
    offset: int
    inserted: int
    removed: int = 0

    @property
    def is_single_char(self) -> bool:
        return self.inserted == 1


@runtime_checkable
class TextSurface(Protocol):
    """Minimal editing surface the interaction state machine needs."""

    def read_substring(self, start: int, end: int) -> str:
        """
        Return text[start:end].
        Raises OutOfRange unless 0 <= start <= end <= len(text).
        """
        ...

    def insert(self, text: str, position: int) -> None:
        ...

    def set_caret(self, position: int) -> None:
        """Move the caret to `position`, collapsing any selection."""
        ...

    def extend_selection_to(self, position: int) -> None:
        """Move the caret to `position` keeping the selection anchor where it is."""
        ...

    def selection_end(self) -> int:
        """Larger end of the current selection (the caret when nothing is selected)."""
        ...

    def replace_selection(self, text: str) -> None:
        """Replace the selection with `text`, caret ends after it."""
        ...

    def subscribe(self, listener: Callable[[TextEdited], None]) -> None:
        """Call `listener` synchronously after every change to the text."""
        ...
