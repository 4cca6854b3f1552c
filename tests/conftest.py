# conftest.py - shared fixtures

import pytest

from trie_autocompleter.core.completion import CompletionSearch
from trie_autocompleter.core.trie import Trie
from trie_autocompleter.utils.logger_utils import Log


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path, monkeypatch):
    """Keep test runs from writing into ./logs."""
    monkeypatch.setattr(Log, "path", str(tmp_path / "logs" / "test.log"))
    monkeypatch.setattr(Log, "level", "DEBUG")
    monkeypatch.setattr(Log, "echo", False)


@pytest.fixture
def the_trie():
    t = Trie()
    t.insert("the", 100)
    t.insert("theory", 5)
    t.insert("therefore", 3)
    return t


@pytest.fixture
def search(the_trie):
    return CompletionSearch(the_trie)
