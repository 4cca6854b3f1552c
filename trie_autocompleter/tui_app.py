# tui_app.py — Trie Autocompleter TUI Application
# -------------------------------------------------------
# Terminal text editor that offers inline word completions as you type.
# Features:
#  - completion suffix inserted after the caret, pre-selected
#  - keep typing to overwrite it, or press the commit key (Enter) to accept
#  - Enter with no pending completion is a normal newline
#  - status line shows dictionary size and the current mode
# -------------------------------------------------------

from __future__ import annotations
from typing import Callable, List, Optional, Tuple

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Footer, Header, Static, TextArea
from textual.widgets.text_area import Edit, Selection

from trie_autocompleter.core.completion import CompletionSearch
from trie_autocompleter.core.errors import OutOfRange
from trie_autocompleter.core.interaction import MIN_PREFIX
from trie_autocompleter.core.protocols import TextEdited
from trie_autocompleter.core.trie import Trie
from trie_autocompleter.surface import CompletionController
from trie_autocompleter.utils.logger_utils import Log

Location = Tuple[int, int]
Listener = Callable[[TextEdited], None]


class CompletionTextArea(TextArea):
    """
    TextArea that reports every edit as a flat-offset TextEdited notification
    and routes the commit key to a CompletionController instead of inserting
    a newline itself.
    """

    def __init__(self, *args, commit_key: str = "enter", **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.commit_key = commit_key
        self.controller: Optional[CompletionController] = None
        self._edit_listeners: List[Listener] = []

    def add_edit_listener(self, listener: Listener) -> None:
        self._edit_listeners.append(listener)

    # offsets <-> (row, column) --------------------------------------------------
    def index_of(self, location: Location) -> int:
        row, col = location
        lines = self.document.lines
        sep = len(self.document.newline)
        return sum(len(line) + sep for line in lines[:row]) + col

    def location_of(self, index: int) -> Location:
        lines = self.document.lines
        sep = len(self.document.newline)
        for row, line in enumerate(lines):
            if index <= len(line):
                return row, index
            index -= len(line) + sep
        raise OutOfRange(index, index, len(self.text))

    # edits -----------------------------------------------------------------------
    def edit(self, edit: Edit):
        top, bottom = sorted((edit.from_location, edit.to_location))
        offset = self.index_of(top)
        removed = self.index_of(bottom) - offset
        result = super().edit(edit)
        self._notify(TextEdited(offset, len(edit.text), removed))
        return result

    def undo(self) -> None:
        super().undo()
        self._notify(TextEdited(0, 0))

    def redo(self) -> None:
        super().redo()
        self._notify(TextEdited(0, 0))

    def _notify(self, event: TextEdited) -> None:
        for listener in list(self._edit_listeners):
            listener(event)

    async def _on_key(self, event: events.Key) -> None:
        # TextArea's own key handler runs after this one unless default is prevented
        if event.key == self.commit_key and self.controller is not None and not self.read_only:
            event.stop()
            event.prevent_default()
            self.controller.commit()


class TextAreaSurface:
    """TextSurface adapter over a CompletionTextArea, in flat character offsets."""

    def __init__(self, area: CompletionTextArea) -> None:
        self.area = area

    def read_substring(self, start: int, end: int) -> str:
        text = self.area.text
        if not 0 <= start <= end <= len(text):
            raise OutOfRange(start, end, len(text))
        return text[start:end]

    def insert(self, text: str, position: int) -> None:
        self.area.insert(text, self._location(position))

    def set_caret(self, position: int) -> None:
        self.area.selection = Selection.cursor(self._location(position))

    def extend_selection_to(self, position: int) -> None:
        anchor = self.area.selection.start
        self.area.selection = Selection(anchor, self._location(position))

    def selection_end(self) -> int:
        start, end = self.area.selection
        return max(self.area.index_of(start), self.area.index_of(end))

    def replace_selection(self, text: str) -> None:
        start, end = sorted(self.area.selection)
        caret = self.area.index_of(start) + len(text)
        self.area.replace(text, start, end, maintain_selection_offset=False)
        self.set_caret(caret)

    def subscribe(self, listener: Listener) -> None:
        self.area.add_edit_listener(listener)

    def call_next(self, task: Callable[[], None]) -> None:
        self.area.call_next(task)

    def _location(self, position: int) -> Location:
        if not 0 <= position <= len(self.area.text):
            raise OutOfRange(position, position, len(self.area.text))
        return self.area.location_of(position)


class StatusLine(Static):
    """Top readout: dictionary size and current interaction mode."""

    def show(self, words: int, mode: str) -> None:
        if words:
            self.update(f"[b]Dictionary loaded:[/b] {words} words  [dim]mode: {mode}[/dim]")
        else:
            self.update("[yellow]No dictionary loaded, completions unavailable[/yellow]")


# Main Application -----------------------------------------------------------------
class CompleterApp(App):
    """
    The Textual app.
    The dictionary is loaded before the app is built; everything after that is
    keystrokes -> CompletionTextArea -> CompletionController -> edits.
    """

    TITLE = "Trie Autocompleter"

    BINDINGS = [
        ("ctrl+l", "clear_text", "Clear Text"),
    ]

    def __init__(
        self,
        trie: Trie,
        *,
        commit_key: str = "enter",
        allow_zero: bool = False,
        min_prefix: int = MIN_PREFIX,
    ) -> None:
        super().__init__()
        self.trie = trie
        self.search = CompletionSearch(trie, allow_zero=allow_zero)
        self.commit_key = commit_key
        self.min_prefix = min_prefix
        self.controller: Optional[CompletionController] = None

    # UI --------------------------------------------------------------------
    def compose(self) -> ComposeResult:
        yield Header()
        yield StatusLine(id="status")
        yield CompletionTextArea(id="editor", soft_wrap=True, commit_key=self.commit_key)
        yield Footer()

    def on_mount(self) -> None:
        area = self.query_one(CompletionTextArea)
        self.controller = CompletionController(
            TextAreaSurface(area), self.search, min_prefix=self.min_prefix
        )
        area.controller = self.controller
        area.add_edit_listener(self._refresh_status)
        area.focus()
        self._refresh_status()
        Log.info(f"[tui] started with {len(self.trie)} words")

    def _refresh_status(self, _event: Optional[TextEdited] = None) -> None:
        mode = self.controller.mode.value if self.controller else "insert"
        self.query_one(StatusLine).show(len(self.trie), mode)

    # Actions ----------------------------------------------------------------------
    def action_clear_text(self) -> None:
        self.query_one(CompletionTextArea).clear()
