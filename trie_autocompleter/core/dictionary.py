# dictionary.py
# Loads a line-oriented word frequency list into a Trie.
#
# Line format (whitespace separated, extra fields ignored):
#     <rank> <word> <frequency> [...]
# e.g. "1 the 23135851162". Lines with fewer than three fields, or whose third
# field is not a non-negative integer (ASCII digits, optional leading "+"),
# are skipped.

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, TextIO, Union

from trie_autocompleter.core.errors import DictionaryUnavailable, MalformedEntry
from trie_autocompleter.core.trie import Trie
from trie_autocompleter.utils.logger_utils import Log

PathLike = Union[str, Path]

WORD_FIELD = 1
FREQ_FIELD = 2
MIN_FIELDS = 3


@dataclass(frozen=True)
class DictionaryEntry:
    word: str
    freq: int


@dataclass
class LoadReport:
    """Counts gathered while loading one source."""
    loaded: int = 0
    skipped: int = 0

    @property
    def lines(self) -> int:
        return self.loaded + self.skipped


def parse_line(line: str) -> DictionaryEntry:
    """Parse one dictionary line, raising MalformedEntry if it is unusable."""
    fields = line.split()
    if len(fields) < MIN_FIELDS:
        raise MalformedEntry(line, f"expected {MIN_FIELDS} fields, got {len(fields)}")
    raw = fields[FREQ_FIELD]
    digits = raw[1:] if raw.startswith("+") else raw
    # isdigit alone accepts non-ASCII digits that int() treats differently
    if not (digits.isascii() and digits.isdigit()):
        raise MalformedEntry(line, f"bad frequency {raw!r}")
    return DictionaryEntry(fields[WORD_FIELD], int(raw))


def iter_entries(lines: Iterable[str], report: Optional[LoadReport] = None) -> Iterator[DictionaryEntry]:
    """Yield the valid entries of `lines`; malformed lines are skipped."""
    for lineno, line in enumerate(lines, 1):
        try:
            entry = parse_line(line)
        except MalformedEntry as e:
            if report is not None:
                report.skipped += 1
            Log.debug(f"[dictionary] skip line {lineno}: {e}")
            continue
        if report is not None:
            report.loaded += 1
        yield entry


def load_into(trie: Trie, lines: Iterable[str]) -> LoadReport:
    """Insert every valid entry of `lines` into `trie`."""
    report = LoadReport()
    for entry in iter_entries(lines, report):
        trie.insert(entry.word, entry.freq)
    return report


def open_dictionary(path: PathLike) -> TextIO:
    """Open a dictionary file for reading, raising DictionaryUnavailable on failure."""
    try:
        # undecodable bytes only spoil their own line
        return open(path, "r", encoding="utf-8", errors="replace")
    except OSError as e:
        raise DictionaryUnavailable(path, e.strerror or type(e).__name__) from e


def read_dictionary(path: PathLike, trie: Optional[Trie] = None) -> Trie:
    """
    Build a Trie from the dictionary file at `path`.
    A missing or unreadable file is not fatal: a warning is logged and the
    (possibly empty) trie is returned, so completion simply finds nothing.
    """
    trie = trie if trie is not None else Trie()
    try:
        fh = open_dictionary(path)
    except DictionaryUnavailable as e:
        Log.warning(f"[dictionary] {e}; continuing without completions")
        return trie

    with fh, Log.time_block(f"dictionary load {path}"):
        report = load_into(trie, fh)
    Log.info(
        f"[dictionary] {path}: {report.loaded} entries loaded, "
        f"{report.skipped} lines skipped, {len(trie)} distinct words"
    )
    return trie
