# tests/test_trie.py
import pytest

from trie_autocompleter.core.trie import Trie

WORDS = {"car": 40, "card": 12, "care": 30, "cat": 7, "dog": 55, "do": 90}


@pytest.fixture
def trie():
    t = Trie()
    for w, f in WORDS.items():
        t.insert(w, f)
    return t


def test_find_word_node_returns_stored_frequency(trie):
    for w, f in WORDS.items():
        node = trie.find_word_node(w)
        assert node is not None
        assert node.is_word
        assert node.freq == f


def test_find_word_node_rejects_unknown_and_prefix_only(trie):
    assert trie.find_word_node("cow") is None
    assert trie.find_word_node("ca") is None  # valid path, not a word
    assert trie.find_node("ca") is not None


def test_find_node_every_prefix(trie):
    assert trie.find_node("") is trie.root
    for w in WORDS:
        for i in range(len(w) + 1):
            assert trie.find_node(w[:i]) is not None


def test_find_node_missing_returns_none(trie):
    assert trie.find_node("cx") is None
    assert trie.find_node("z") is None


def test_reinsert_overwrites_frequency(trie):
    trie.insert("card", 99)
    assert trie.find_word_node("card").freq == 99
    assert trie.list_with_prefix("card") == ["card"]
    assert len(trie) == len(WORDS)


def test_insert_rejects_negative_frequency():
    with pytest.raises(ValueError):
        Trie().insert("x", -1)


def test_list_with_prefix_sorted(trie):
    assert trie.list_with_prefix("ca") == ["car", "card", "care", "cat"]
    assert trie.list_with_prefix("") == sorted(WORDS)
    assert trie.list_with_prefix("do") == ["do", "dog"]


def test_list_with_prefix_sorted_regardless_of_insert_order():
    t = Trie()
    for w in ["zeta", "zebra", "zap", "zen"]:
        t.insert(w, 1)
    assert t.list_with_prefix("z") == ["zap", "zebra", "zen", "zeta"]


def test_list_with_prefix_absent(trie):
    assert trie.list_with_prefix("x") == []
    assert trie.list_with_prefix("cart") == []


def test_most_frequent_with_prefix(trie):
    assert trie.most_frequent_with_prefix("ca") == "car"
    assert trie.most_frequent_with_prefix("car") == "car"
    assert trie.most_frequent_with_prefix("card") == "card"
    assert trie.most_frequent_with_prefix("d") == "do"
    assert trie.most_frequent_with_prefix("") == "do"


def test_most_frequent_absent_prefix(trie):
    assert trie.most_frequent_with_prefix("q") is None


def test_most_frequent_is_idempotent(trie):
    first = trie.most_frequent_with_prefix("ca")
    assert all(trie.most_frequent_with_prefix("ca") == first for _ in range(5))


def test_most_frequent_tie_prefers_first_reached():
    t = Trie()
    t.insert("abx", 5)
    t.insert("aby", 5)
    assert t.most_frequent_with_prefix("ab") == "abx"

    # a prefix word is reached before its extensions
    t = Trie()
    t.insert("abc", 5)
    t.insert("ab", 5)
    assert t.most_frequent_with_prefix("a") == "ab"


def test_most_frequent_no_terminal_below_prefix():
    t = Trie()
    t.insert("hello", 3)
    assert t.most_frequent_with_prefix("hel") == "hello"
    # the path exists but nothing below "hello" beyond it is stored
    assert t.most_frequent_with_prefix("hello") == "hello"
    assert t.most_frequent_with_prefix("help") is None


def test_zero_frequency_never_selected_by_default():
    t = Trie()
    t.insert("zero", 0)
    assert t.find_word_node("zero").freq == 0
    assert t.most_frequent_with_prefix("ze") is None


def test_zero_frequency_selectable_when_allowed():
    t = Trie()
    t.insert("zero", 0)
    assert t.most_frequent_with_prefix("ze", allow_zero=True) == "zero"
    t.insert("zest", 1)
    assert t.most_frequent_with_prefix("ze", allow_zero=True) == "zest"


def test_zero_frequency_tie_keeps_first_when_allowed():
    t = Trie()
    t.insert("zap", 0)
    t.insert("zip", 0)
    assert t.most_frequent_with_prefix("z", allow_zero=True) == "zap"


def test_len_contains_items(trie):
    assert len(trie) == len(WORDS)
    assert "care" in trie
    assert "ca" not in trie
    assert 42 not in trie
    assert dict(trie.items("ca")) == {w: f for w, f in WORDS.items() if w.startswith("ca")}
    assert list(trie.items("nope")) == []


def test_deep_word_does_not_recurse_in_ranking():
    t = Trie()
    word = "a" * 5000
    t.insert(word, 1)
    assert t.most_frequent_with_prefix("a") == word


def test_deep_word_does_not_recurse_in_listing():
    t = Trie()
    word = "a" * 5000
    t.insert(word, 1)
    t.insert("ab", 2)
    assert t.list_with_prefix("a") == [word, "ab"]
