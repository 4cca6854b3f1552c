# errors.py - exception types shared by the completion core.
# None of these are fatal: the worst outcome of any of them is "no completion offered".


class CompleterError(Exception):
    """Base class for every error raised by trie_autocompleter."""


class DictionaryUnavailable(CompleterError):
    """The dictionary source could not be opened."""

    def __init__(self, path, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        msg = f"dictionary unavailable: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class MalformedEntry(CompleterError):
    """A single dictionary line is underspecified or has a bad frequency."""

    def __init__(self, line: str, reason: str) -> None:
        self.line = line
        self.reason = reason
        super().__init__(f"{reason}: {line!r}")


class OutOfRange(CompleterError):
    """A text surface was asked for a range outside its current bounds."""

    def __init__(self, start: int, end: int, length: int) -> None:
        self.start = start
        self.end = end
        self.length = length
        super().__init__(f"range [{start}, {end}) outside text of length {length}")
