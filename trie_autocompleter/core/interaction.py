# interaction.py
"""
Completion interaction state machine.

Two modes: INSERT (plain typing) and COMPLETION (a tentative suffix has been
inserted and pre-selected, waiting to be accepted or typed over).

The machine is a pair of pure functions, (mode, event) -> Transition. A
Transition carries the next mode and, optionally, a command describing the
edit to make. Commands are never executed here: the caller applies them, and
for edit notifications it must do so only after the notification has
returned, because a surface cannot be changed while it is still reporting a
change.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from trie_autocompleter.core.completion import CompletionSearch
from trie_autocompleter.core.errors import OutOfRange
from trie_autocompleter.core.protocols import TextEdited, TextSurface
from trie_autocompleter.utils.logger_utils import Log

MIN_PREFIX = 2


class Mode(Enum):
    INSERT = "insert"
    COMPLETION = "completion"


# Commands -----------------------------------------------------------------

@dataclass(frozen=True)
class InsertCompletion:
    """Insert `suffix` at `position` and leave it selected, caret at `position`."""
    suffix: str
    position: int

    def apply(self, surface: TextSurface) -> None:
        surface.insert(self.suffix, self.position)
        surface.set_caret(self.position + len(self.suffix))
        surface.extend_selection_to(self.position)


@dataclass(frozen=True)
class AcceptCompletion:
    """Keep the pending suffix and add a space after it."""

    def apply(self, surface: TextSurface) -> None:
        pos = surface.selection_end()
        surface.insert(" ", pos)
        surface.set_caret(pos + 1)


@dataclass(frozen=True)
class InsertNewline:
    """Ordinary Enter behaviour."""

    def apply(self, surface: TextSurface) -> None:
        surface.replace_selection("\n")


Command = Union[InsertCompletion, AcceptCompletion, InsertNewline]


@dataclass(frozen=True)
class Transition:
    mode: Mode
    command: Optional[Command] = None


# Transitions ----------------------------------------------------------------

def typed_prefix(surface: TextSurface, offset: int) -> str:
    """
    The run of letters ending at `offset` (inclusive).
    Raises OutOfRange if `offset` is not inside the text.
    """
    content = surface.read_substring(0, offset + 1)
    start = len(content)
    while start > 0 and content[start - 1].isalpha():
        start -= 1
    return content[start:]


def handle_edit(
    mode: Mode,
    event: TextEdited,
    surface: TextSurface,
    search: CompletionSearch,
    min_prefix: int = MIN_PREFIX,
) -> Transition:
    """
    React to an edit notification.

    Only single-character insertions can offer a completion. Any other edit
    (deletion, paste, multi-character insert) discards a pending completion.
    """
    if not event.is_single_char:
        return Transition(Mode.INSERT)

    current = mode
    if event.removed:
        # typing over the selected suffix rejects it
        current = Mode.INSERT

    try:
        prefix = typed_prefix(surface, event.offset)
    except OutOfRange as e:
        Log.debug(f"[interaction] no completion at {event.offset}: {e}")
        return Transition(mode)

    if len(prefix) < min_prefix:
        return Transition(current)

    prefix = prefix.lower()
    match = search.best_match(prefix)
    if match is None:
        return Transition(Mode.INSERT)

    if len(match) > len(prefix) and match.startswith(prefix):
        suffix = match[len(prefix):]
        Log.debug(f"[interaction] {prefix!r} -> {match!r}")
        return Transition(Mode.COMPLETION, InsertCompletion(suffix, event.offset + 1))

    # typed word is already the best match
    return Transition(current)


def handle_commit(mode: Mode) -> Transition:
    """Commit key: accept a pending completion, otherwise insert a newline."""
    if mode is Mode.COMPLETION:
        return Transition(Mode.INSERT, AcceptCompletion())
    return Transition(Mode.INSERT, InsertNewline())
