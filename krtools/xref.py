"""Cross-referencing words to line numbers and counting word frequencies."""

from __future__ import annotations

import string
import sys
from collections import Counter, defaultdict
from collections.abc import Iterable, Mapping, Sequence

from krtools.cscan import words

MAX_NR_OF_NODES = 1000

LINKING_WORDS = frozenset({
    "And", "As", "But", "For", "Like", "Nor", "Or", "So", "The", "Then",
    "To", "Too", "Yet", "and", "as", "but", "for", "like", "nor", "or",
    "so", "the", "then", "to", "too", "yet",
})


def _is_word(token: str) -> bool:
    return token[0] in string.ascii_letters


def cross_reference(text: str) -> dict[str, list[int]]:
    """Map each word, except linking words, to every line number it occurs on."""
    index: defaultdict[str, list[int]] = defaultdict(list)
    line_number = 1
    for token in words(text, False):
        if token == "\n":
            line_number += 1
        elif _is_word(token) and token not in LINKING_WORDS:
            index[token].append(line_number)
    return {word: index[word] for word in sorted(index)}


def format_cross_reference(index: Mapping[str, Sequence[int]]) -> str:
    return "".join(
        f"{word}: {', '.join(str(n) for n in lines)}\n" for word, lines in index.items()
    )


def _sort_by_count(items: list[tuple[str, int]]) -> None:
    """Partition sort by descending count, in place, using the middle element as pivot."""
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        middle = (start + end) // 2
        items[start], items[middle] = items[middle], items[start]
        pivot = items[start][1]
        last = start
        for i in range(start + 1, end + 1):
            if items[i][1] > pivot:
                last += 1
                items[last], items[i] = items[i], items[last]
        items[start], items[last] = items[last], items[start]
        pending.append((last + 1, end))
        pending.append((start, last - 1))


def word_frequencies(text: str) -> list[tuple[str, int]]:
    """Return (word, count) pairs ordered by decreasing count.

    At most ``MAX_NR_OF_NODES`` distinct words are kept, the alphabetically
    first ones.
    """
    counts = Counter(token for token in words(text, False) if _is_word(token))
    items = [(word, counts[word]) for word in sorted(counts)[:MAX_NR_OF_NODES]]
    _sort_by_count(items)
    return items


def format_frequencies(items: Iterable[tuple[str, int]]) -> str:
    return "".join(f"{count:4d} {word}\n" for word, count in items)


def xref_main(argv: Sequence[str] | None = None) -> int:
    """Print a cross-reference of the words read from standard input."""
    sys.stdout.write(format_cross_reference(cross_reference(sys.stdin.read())))
    return 0


def frequency_main(argv: Sequence[str] | None = None) -> int:
    """Print the words read from standard input by decreasing frequency."""
    sys.stdout.write(format_frequencies(word_frequencies(sys.stdin.read())))
    return 0