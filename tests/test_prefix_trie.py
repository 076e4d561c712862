import doctest

import pytest

import prefix_trie
from prefix_trie import Trie, TrieNode, split_clusters, split_codepoints

SAMPLE = [
    "apple", "application", "amplitude", "amplifier", "ancho",
    "ampere", "amp", "amicable", "ample", "amaretto",
]


def make_trie(words=SAMPLE, **kwargs):
    t = Trie(**kwargs)
    for w in words:
        t.insert(w)
    return t


def test_empty_trie():
    t = Trie()
    assert t.search("") is False
    assert t.search("a") is False
    assert t.contains("a") is False
    assert t.autocomplete("") == []
    assert t.autocomplete("a") == []
    assert len(t) == 0
    assert t.node_count == 1


def test_empty_prefix_is_contained_once_anything_exists():
    t = Trie()
    assert t.contains("") is False
    t.insert("x")
    assert t.contains("") is True
    assert t.search("") is False


def test_sample_scenario():
    t = make_trie()

    assert set(t.autocomplete("a")) == set(SAMPLE)
    assert len(t.autocomplete("a")) == 10

    ami = t.autocomplete("ami")
    assert "amicable" in ami
    assert "amaretto" not in ami

    amp = t.autocomplete("amp")
    assert "amp" in amp
    assert "amplifier" in amp
    assert all(w.startswith("amp") for w in amp)

    assert t.search("apple") is True
    assert t.search("app") is False
    assert t.contains("amicable") is True
    assert t.contains("ami") is True
    assert t.contains("bogus") is False
    assert t.search("bogus") is False


def test_search_requires_terminal():
    t = make_trie(["car", "card", "cart", "cat"])
    for w in ("car", "card", "cart", "cat"):
        assert t.search(w) is True
    assert t.search("ca") is False
    assert t.search("cars") is False
    assert t.search("dog") is False


def test_every_prefix_is_contained():
    t = make_trie()
    for w in SAMPLE:
        for i in range(len(w) + 1):
            assert t.contains(w[:i]) is True


def test_search_implies_contains():
    t = make_trie()
    for w in SAMPLE + ["app", "bogus", "amp", ""]:
        if t.search(w):
            assert t.contains(w)


def test_autocomplete_matches_filter():
    t = make_trie()
    for prefix in ("", "a", "am", "amp", "ampl", "ap", "an", "z", "amplifiers"):
        expected = {w for w in SAMPLE if w.startswith(prefix)}
        assert set(t.autocomplete(prefix)) == expected


def test_autocomplete_empty_prefix_returns_all_without_duplicates():
    t = make_trie(SAMPLE + SAMPLE + ["amp"])
    result = t.autocomplete("")
    assert sorted(result) == sorted(SAMPLE)


def test_insert_is_idempotent():
    once = make_trie(["dog", "door"])
    many = make_trie(["dog", "door", "dog", "dog", "door"])
    assert len(once) == len(many) == 2
    assert once.node_count == many.node_count
    assert sorted(once) == sorted(many)
    for q in ("d", "do", "dog", "doo", "door", "doors"):
        assert once.search(q) == many.search(q)
        assert once.contains(q) == many.contains(q)


def test_empty_word_marks_root():
    t = Trie()
    t.insert("")
    assert t.search("") is True
    assert t.root.is_terminal is True
    assert t.autocomplete("") == [""]
    assert len(t) == 1
    assert t.node_count == 1


def test_node_values_accumulate_along_edges():
    t = make_trie()
    stack = [t.root]
    assert t.root.value == ""
    while stack:
        node = stack.pop()
        for unit, child in node.children.items():
            assert child.value == node.value + unit
            stack.append(child)


def test_node_count_matches_distinct_prefixes():
    t = make_trie()
    prefixes = {w[:i] for w in SAMPLE for i in range(1, len(w) + 1)}
    assert t.node_count == 1 + len(prefixes)


def test_lookups_do_not_create_nodes():
    t = make_trie(["apple"])
    before = t.node_count
    t.search("apricot")
    t.contains("banana")
    t.autocomplete("apz")
    assert t.node_count == before
    assert set(t.root.children) == {"a"}


def test_node_value_is_read_only():
    node = TrieNode("ab")
    with pytest.raises(AttributeError):
        node.value = "zz"
    assert node.value == "ab"


def test_dunder_protocols():
    t = make_trie(["hola", "hilo", "sol", "sombra"])
    assert "hilo" in t
    assert "hil" not in t
    assert len(t) == 4
    t.insert("extra")
    assert len(t) == 5
    assert set(t) == {"hola", "hilo", "sol", "sombra", "extra"}


def test_iter_prefix_is_lazy():
    t = make_trie()
    gen = t.iter_prefix("amp")
    first = next(gen)
    assert first.startswith("amp")


def test_deep_trie_does_not_recurse():
    word = "a" * 5000
    t = make_trie([word, word[:2500]])
    assert sorted(t.autocomplete("a"), key=len) == [word[:2500], word]


def test_codepoint_splitter_treats_combining_mark_as_own_edge():
    t = make_trie(["cafe\u0301"], split=split_codepoints)
    assert t.contains("cafe") is True
    assert t.node_count == 6


def test_cluster_splitter_keeps_combining_sequence_together():
    t = make_trie(["cafe\u0301", "cafes"], split=split_clusters)
    assert t.contains("cafe") is False
    assert t.contains("caf") is True
    assert t.search("cafe\u0301") is True
    assert set(t.autocomplete("caf")) == {"cafe\u0301", "cafes"}


def test_split_clusters_edge_cases():
    assert list(split_clusters("")) == []
    assert list(split_clusters("\u0301a")) == ["\u0301", "a"]
    assert list(split_clusters("a\u0301\u0323b")) == ["a\u0301\u0323", "b"]


def test_doctests():
    failures, _ = doctest.testmod(prefix_trie)
    assert failures == 0
