import io
import itertools
import string
import sys

from krtools.xref import (
    LINKING_WORDS,
    MAX_NR_OF_NODES,
    cross_reference,
    format_cross_reference,
    format_frequencies,
    frequency_main,
    word_frequencies,
    xref_main,
)


def _distinct_words(n):
    combos = itertools.product(string.ascii_lowercase, repeat=3)
    return ["w" + "".join(c) for c in itertools.islice(combos, n)]


def test_cross_reference_lines():
    text = "apple the\nbanana apple\n"
    assert cross_reference(text) == {"apple": [1, 2], "banana": [2]}


def test_cross_reference_skips_linking_words():
    index = cross_reference("The cat and the dog or Yet")
    assert set(index) == {"cat", "dog"}
    assert not set(index) & LINKING_WORDS


def test_cross_reference_keys_are_sorted():
    index = cross_reference("pear\nfig\nkiwi\nfig")
    assert list(index) == sorted(index)
    assert index["fig"] == [2, 4]


def test_cross_reference_repeats_on_same_line():
    assert cross_reference("echo echo")["echo"] == [1, 1]


def test_format_cross_reference():
    assert format_cross_reference({"apple": [1, 2], "fig": [3]}) == "apple: 1, 2\nfig: 3\n"


def test_word_frequencies_order():
    assert word_frequencies("b a b c b a") == [("b", 3), ("a", 2), ("c", 1)]


def test_word_frequencies_invariants():
    text = "one two two three three three four four four four _x 42\n" * 3
    items = word_frequencies(text)
    counts = [count for _, count in items]
    assert counts == sorted(counts, reverse=True)
    assert sum(counts) == len([w for w in text.split() if w[0].isalpha()])


def test_word_frequencies_caps_distinct_words():
    vocabulary = _distinct_words(MAX_NR_OF_NODES + 5)
    items = word_frequencies(" ".join(vocabulary))
    assert len(items) == MAX_NR_OF_NODES
    assert {word for word, _ in items} == set(sorted(vocabulary)[:MAX_NR_OF_NODES])


def test_word_frequencies_many_ties():
    vocabulary = _distinct_words(MAX_NR_OF_NODES)
    items = word_frequencies("\n".join(vocabulary))
    assert sorted(word for word, _ in items) == sorted(vocabulary)
    assert all(count == 1 for _, count in items)


def test_format_frequencies():
    assert format_frequencies([("b", 3), ("a", 12)]) == "   3 b\n  12 a\n"


def test_empty_text():
    assert word_frequencies("") == []
    assert cross_reference("") == {}


def test_xref_main(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("apple the\nbanana apple\n"))
    assert xref_main([]) == 0
    assert capsys.readouterr().out == "apple: 1, 2\nbanana: 2\n"


def test_frequency_main(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("b a b"))
    assert frequency_main([]) == 0
    assert capsys.readouterr().out == format_frequencies([("b", 2), ("a", 1)])