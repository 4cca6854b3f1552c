"""
cli.py - command line front end
Commands:
- complete PREFIX   most frequent dictionary word for a prefix
- list PREFIX       every word with that prefix, alphabetically
- lookup WORD       is WORD stored, and with which frequency
- type TEXT         replay keystrokes through the completion state machine
                    ("\\n" = commit key, "\\b" = backspace) and show the buffer
- tui               interactive editor
- config [KEY VALUE] show options, or set one and save the config file
Uses Rich for tables and formatting.
"""

import argparse
import sys
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich import box

from trie_autocompleter import __version__
from trie_autocompleter.core.completion import CompletionSearch
from trie_autocompleter.core.dictionary import read_dictionary
from trie_autocompleter.core.trie import Trie
from trie_autocompleter.surface import BufferSurface, CompletionController
from trie_autocompleter.utils.config_manager import Config
from trie_autocompleter.utils.logger_utils import Log

# initialise console for rich output
console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trie-autocompleter",
        description="Frequency-ranked prefix completion over a word list.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", default="config.json", help="JSON config file")
    parser.add_argument("--dictionary", help="word frequency file (overrides config)")
    parser.add_argument("--allow-zero", action="store_true", default=None,
                        help="let zero-frequency words be suggested")
    parser.add_argument("-v", "--verbose", action="store_true", help="echo log lines to stderr")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("complete", help="most frequent word starting with PREFIX")
    p.add_argument("prefix")

    p = sub.add_parser("list", help="all words starting with PREFIX")
    p.add_argument("prefix")
    p.add_argument("-n", "--limit", type=int, default=0, help="show at most N words")

    p = sub.add_parser("lookup", help="frequency of a stored word")
    p.add_argument("word")

    p = sub.add_parser("type", help="simulate typing TEXT into the editor")
    p.add_argument("text", help='keystrokes; escapes like "\\n" (commit) and "\\b" are decoded')

    sub.add_parser("tui", help="open the interactive editor")

    p = sub.add_parser("config", help="show options, or set KEY to VALUE and save")
    p.add_argument("key", nargs="?")
    p.add_argument("value", nargs="?")
    return parser


class CLI:
    """Runs one parsed command against a loaded dictionary."""

    def __init__(self, args: argparse.Namespace, cfg: Config):
        self.args = args
        self.cfg = cfg
        path = args.dictionary or cfg["dictionary_path"]
        self.trie: Trie = read_dictionary(path)
        self.allow_zero = cfg["allow_zero_freq"] if args.allow_zero is None else args.allow_zero
        self.search = CompletionSearch(self.trie, allow_zero=self.allow_zero)
        if not len(self.trie):
            console.print(f"[yellow]dictionary {path} unavailable or empty; no completions[/yellow]")

    def run(self) -> int:
        handler = getattr(self, f"cmd_{self.args.command}")
        return handler()

    # commands -------------------------------------------------------------------
    def cmd_complete(self) -> int:
        match = self.search.best_match(self.args.prefix)
        if match is None:
            console.print(f"[dim]no completion for[/dim] {self.args.prefix!r}")
            return 1
        node = self.trie.find_word_node(match)
        console.print(f"[green]{match}[/green]  [dim]{node.freq}[/dim]")
        return 0

    def cmd_list(self) -> int:
        words = self.search.words_with_prefix(self.args.prefix)
        if not words:
            console.print(f"[dim]no words start with[/dim] {self.args.prefix!r}")
            return 1
        shown = words[: self.args.limit] if self.args.limit > 0 else words
        table = Table(title=f"words with prefix {self.args.prefix!r}", box=box.SIMPLE)
        table.add_column("word", style="cyan")
        table.add_column("freq", justify="right")
        for w in shown:
            table.add_row(w, str(self.trie.find_word_node(w).freq))
        console.print(table)
        if len(shown) < len(words):
            console.print(f"[dim]... {len(words) - len(shown)} more[/dim]")
        return 0

    def cmd_lookup(self) -> int:
        node = self.trie.find_word_node(self.args.word.lower())
        if node is None:
            console.print(f"[red]{self.args.word!r} not in dictionary[/red]")
            return 1
        console.print(f"{self.args.word.lower()}: [b]{node.freq}[/b]")
        return 0

    def cmd_type(self) -> int:
        keys = decode_keys(self.args.text)
        surface = BufferSurface()
        ctl = CompletionController(
            surface, self.search, min_prefix=self.cfg["min_prefix"]
        )
        ctl.type_text(keys)
        console.print(render_buffer(surface))
        console.print(f"[dim]mode: {ctl.mode.value}[/dim]")
        return 0

    def cmd_tui(self) -> int:
        from trie_autocompleter.tui_app import CompleterApp

        CompleterApp(
            self.trie,
            commit_key=self.cfg["commit_key"],
            allow_zero=self.allow_zero,
            min_prefix=self.cfg["min_prefix"],
        ).run()
        return 0


KEY_ESCAPES = {"\\n": "\n", "\\b": "\b", "\\\\": "\\"}


def decode_keys(text: str) -> str:
    """Decode the keystroke escapes understood by `type`; other text is kept as is."""
    out = []
    i = 0
    while i < len(text):
        pair = text[i:i + 2]
        if pair in KEY_ESCAPES:
            out.append(KEY_ESCAPES[pair])
            i += 2
        else:
            out.append(text[i])
            i += 1
    return "".join(out)


def cmd_config(args: argparse.Namespace, cfg: Config) -> int:
    """Print every option, or set one option and save."""
    if args.key is not None:
        if args.value is None:
            console.print("[red]usage: config [KEY VALUE][/red]")
            return 2
        try:
            cfg.set(args.key, args.value)
        except (KeyError, ValueError) as e:
            console.print(f"[red]{e}[/red]")
            return 1
        cfg.save()
        console.print(f"[green]saved[/green] {args.key} = {cfg[args.key]!r} to {cfg.path}")
        return 0

    table = Table(title=f"config ({cfg.path})", box=box.SIMPLE)
    table.add_column("option", style="cyan")
    table.add_column("value")
    for k, v in cfg.data.items():
        table.add_row(k, repr(v))
    console.print(table)
    return 0


def render_buffer(surface: BufferSurface) -> Text:
    """Buffer text with the pending (selected) completion highlighted."""
    out = Text(surface.text)
    start, end = surface.selection
    if start != end:
        out.stylize("reverse", start, end)
    return out


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    cfg.apply_logging()
    if args.verbose:
        Log.configure(echo=True)
    if args.command == "config":
        return cmd_config(args, cfg)
    try:
        return CLI(args, cfg).run()
    except KeyboardInterrupt:
        console.print("\nbye.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
