"""Tokenising C source text: keyword counting and variable-name grouping."""

from __future__ import annotations

import re
import string
import sys
from collections import Counter
from collections.abc import Iterator, Mapping, Sequence

MAX_WORD_LEN = 100
DEFAULT_PREFIX_LEN = 6

KEYWORDS = (
    "auto", "break", "case", "char", "const", "continue", "default", "do",
    "double", "else", "enum", "extern", "float", "for", "goto", "if", "int",
    "long", "register", "return", "short", "signed", "size_t", "sizeof",
    "static", "struct", "switch", "typedef", "union", "unsigned", "void",
    "volatile", "while",
)

DATA_TYPES = frozenset({"char", "double", "float", "int", "long", "short", "void"})

_LETTERS = frozenset(string.ascii_letters)
_WORD_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_BLANKS = frozenset(" \t")


class _Reader:
    """Character source with push-back; ``None`` marks the end of input."""

    def __init__(self, text: str) -> None:
        self._chars = iter(text)
        self._pushed: list[str] = []

    def getc(self) -> str | None:
        if self._pushed:
            return self._pushed.pop()
        return next(self._chars, None)

    def ungetc(self, c: str | None) -> None:
        if c is not None:
            self._pushed.append(c)

    def skip_blanks(self) -> None:
        c = self.getc()
        while c is not None and c in _BLANKS:
            c = self.getc()
        self.ungetc(c)

    def skip_comment(self) -> None:
        c = self.getc()
        if c == "/":
            c = self.getc()
            if c == "/":
                c = self.getc()
                while c is not None and c != "\n":
                    c = self.getc()
            elif c == "*":
                c = self.getc()
                while c is not None and c != "*":
                    c = self.getc()
                c = self.getc()
                if c == "/":
                    self.ungetc("\n")
                    return
        self.ungetc(c)

    def skip_quoted(self, quote: str) -> None:
        c = self.getc()
        if c == quote:
            while (c := self.getc()) is not None:
                if c == "\\":
                    if (c := self.getc()) is None:
                        break
                elif c == quote:
                    return
        self.ungetc(c)

    def read_word(self) -> str | None:
        c = self.getc()
        if c is None:
            return None
        if c not in _LETTERS and c != "_":
            return c
        chars = [c]
        while True:
            c = self.getc()
            if c is None or c not in _WORD_CHARS or len(chars) >= MAX_WORD_LEN:
                self.ungetc(c)
                break
            chars.append(c)
        return "".join(chars)


def words(text: str, skip_code: bool = True) -> Iterator[str]:
    """Yield identifiers and single other characters from ``text``.

    Blanks are skipped before each token.  With ``skip_code`` comments,
    character literals and string literals are skipped as well.
    """
    reader = _Reader(text)
    while True:
        reader.skip_blanks()
        if skip_code:
            reader.skip_comment()
            reader.skip_quoted("'")
            reader.skip_quoted('"')
        word = reader.read_word()
        if word is None:
            return
        yield word


def count_keywords(text: str) -> dict[str, int]:
    """Count C keywords in ``text``; only keywords seen are kept, in table order."""
    counts = Counter(
        word for word in words(text, True) if word[0] in _LETTERS and word in KEYWORDS
    )
    return {key: counts[key] for key in KEYWORDS if counts[key]}


def format_keyword_counts(counts: Mapping[str, int]) -> str:
    return "".join(f"{count:4d} {word}\n" for word, count in counts.items())


def group_variables(text: str, prefix_len: int = DEFAULT_PREFIX_LEN) -> list[list[str]]:
    """Group names declared after a data type by their first ``prefix_len`` characters.

    Each group is keyed by the first name that started it and holds its
    distinct names in sorted order; groups keep the order they were started.
    """
    groups: list[tuple[str, set[str]]] = []

    def add(name: str) -> None:
        for root, members in groups:
            if root[:prefix_len] == name[:prefix_len]:
                members.add(name)
                return
        groups.append((name, {name}))

    tokens = words(text, True)
    for token in tokens:
        if token not in DATA_TYPES:
            continue
        while True:
            name = next(tokens, None)
            if name is not None and (name[0] in _LETTERS or name[0] == "_"):
                add(name)
            if next(tokens, None) != ",":
                break
    return [sorted(members) for _, members in groups]


def format_groups(groups: Sequence[Sequence[str]]) -> str:
    return "".join("".join(f"{name}\n" for name in group) + "\n" for group in groups)


def _parse_prefix_len(args: Sequence[str]) -> int:
    if len(args) > 1:
        raise ValueError("too many arguments")
    if not args:
        return DEFAULT_PREFIX_LEN
    match = re.match(r"[0-9]+", args[0])
    if match is None:
        raise ValueError("prefix length must start with a digit")
    return int(match.group())


def count_keywords_main(argv: Sequence[str] | None = None) -> int:
    """Print the count of each C keyword read from standard input."""
    sys.stdout.write(format_keyword_counts(count_keywords(sys.stdin.read())))
    return 0


def var_group_main(argv: Sequence[str] | None = None) -> int:
    """Print groups of variable names read from standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        prefix_len = _parse_prefix_len(args)
    except ValueError:
        print("Error: invalid arguments.")
        return 1
    sys.stdout.write(format_groups(group_variables(sys.stdin.read(), prefix_len)))
    return 0