# surface.py
"""
Text surface integration.

BufferSurface - an in-memory TextSurface (used by the CLI `type` command and tests)
CompletionController - wires a surface to the interaction state machine:
 - owns the current Mode
 - feeds edit notifications to handle_edit()
 - runs returned commands once the notification has returned
 - ignores the notifications caused by its own commands
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, List, Optional, Tuple

from trie_autocompleter.core.completion import CompletionSearch
from trie_autocompleter.core.errors import OutOfRange
from trie_autocompleter.core.interaction import (
    MIN_PREFIX,
    Command,
    Mode,
    handle_commit,
    handle_edit,
)
from trie_autocompleter.core.protocols import TextEdited, TextSurface
from trie_autocompleter.utils.logger_utils import Log

Listener = Callable[[TextEdited], None]
Task = Callable[[], None]

# control characters understood by CompletionController.type_text()
COMMIT_CHAR = "\n"
BACKSPACE_CHAR = "\b"


class BufferSurface:
    """
    Plain string text surface with a caret and a selection anchor.
    Tasks passed to call_next() run right after the current notification
    has been delivered, before the edit method returns.
    """

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.anchor = len(text)
        self.caret = len(text)
        self._listeners: List[Listener] = []
        self._pending: Deque[Task] = deque()
        self._draining = False

    # TextSurface -------------------------------------------------------------
    def read_substring(self, start: int, end: int) -> str:
        self._check_range(start, end)
        return self.text[start:end]

    def insert(self, text: str, position: int) -> None:
        self._check_range(position, position)
        if not text:
            return
        self.text = self.text[:position] + text + self.text[position:]
        n = len(text)
        if self.anchor >= position:
            self.anchor += n
        if self.caret >= position:
            self.caret += n
        self._notify(TextEdited(position, n))

    def set_caret(self, position: int) -> None:
        self._check_range(position, position)
        self.anchor = self.caret = position

    def extend_selection_to(self, position: int) -> None:
        self._check_range(position, position)
        self.caret = position

    def selection_end(self) -> int:
        return max(self.anchor, self.caret)

    def replace_selection(self, text: str) -> None:
        start, end = self.selection
        if not text and start == end:
            return
        self.text = self.text[:start] + text + self.text[end:]
        self.anchor = self.caret = start + len(text)
        self._notify(TextEdited(start, len(text), end - start))

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    # extras ------------------------------------------------------------------
    @property
    def selection(self) -> Tuple[int, int]:
        return min(self.anchor, self.caret), max(self.anchor, self.caret)

    @property
    def selected_text(self) -> str:
        start, end = self.selection
        return self.text[start:end]

    def delete(self, start: int, end: int) -> None:
        self._check_range(start, end)
        if start == end:
            return
        self.text = self.text[:start] + self.text[end:]
        n = end - start
        self.anchor = self._shift_for_delete(self.anchor, start, end, n)
        self.caret = self._shift_for_delete(self.caret, start, end, n)
        self._notify(TextEdited(start, 0, n))

    def backspace(self) -> None:
        """Delete the selection, or the character before the caret."""
        start, end = self.selection
        if start != end:
            self.delete(start, end)
        elif start > 0:
            self.delete(start - 1, start)

    def call_next(self, task: Task) -> None:
        self._pending.append(task)
        if not self._draining:
            self._drain()

    # internal ----------------------------------------------------------------
    def _check_range(self, start: int, end: int) -> None:
        if not 0 <= start <= end <= len(self.text):
            raise OutOfRange(start, end, len(self.text))

    @staticmethod
    def _shift_for_delete(pos: int, start: int, end: int, n: int) -> int:
        if pos >= end:
            return pos - n
        if pos > start:
            return start
        return pos

    def _notify(self, event: TextEdited) -> None:
        # tasks queued by listeners wait until every listener has seen the event
        outer = not self._draining
        self._draining = True
        try:
            for listener in list(self._listeners):
                listener(event)
        finally:
            if outer:
                self._draining = False
        if outer:
            self._drain()

    def _drain(self) -> None:
        self._draining = True
        try:
            while self._pending:
                self._pending.popleft()()
        finally:
            self._draining = False

    def __repr__(self) -> str:
        return f"BufferSurface(text={self.text!r}, selection={self.selection})"


class CompletionController:
    """
    Keeps the interaction mode for one editing session.
    Public API:
      on_edit(event) - edit notification handler (subscribed automatically)
      commit() - the commit key
      type_text(text) - simulate keystrokes; "\\n" commits, "\\b" is backspace
    """

    def __init__(
        self,
        surface: TextSurface,
        search: CompletionSearch,
        schedule: Optional[Callable[[Task], None]] = None,
        min_prefix: int = MIN_PREFIX,
    ) -> None:
        self.surface = surface
        self.search = search
        self.schedule = schedule or getattr(surface, "call_next")
        self.min_prefix = min_prefix
        self.mode = Mode.INSERT
        self._applying = False
        surface.subscribe(self.on_edit)

    def on_edit(self, event: TextEdited) -> None:
        if self._applying:
            return  # our own command echoing back
        transition = handle_edit(
            self.mode, event, self.surface, self.search, self.min_prefix
        )
        if transition.mode is not self.mode:
            Log.debug(f"[controller] {self.mode.value} -> {transition.mode.value}")
        self.mode = transition.mode
        command = transition.command
        if command is not None:
            self.schedule(lambda: self._apply(command))

    def commit(self) -> None:
        transition = handle_commit(self.mode)
        self.mode = transition.mode
        self._apply(transition.command)

    def type_text(self, text: str) -> None:
        """Feed keystrokes to a surface that supports replace_selection/backspace."""
        for ch in text:
            if ch == COMMIT_CHAR:
                self.commit()
            elif ch == BACKSPACE_CHAR:
                self.surface.backspace()
            else:
                self.surface.replace_selection(ch)

    def _apply(self, command: Command) -> None:
        self._applying = True
        try:
            command.apply(self.surface)
        finally:
            self._applying = False
