"""A small #define / #undef substituting filter for C source."""

from __future__ import annotations

import string
import sys
from collections.abc import Sequence

from krtools.hashtab import HashTable

MAX_WORD_LEN = 100

_LETTERS = frozenset(string.ascii_letters)
_ALNUM = frozenset(string.ascii_letters + string.digits)
_WORD_CHARS = _ALNUM | {"_"}
_BLANKS = frozenset(" \t")


class _Expander:
    def __init__(self, text: str) -> None:
        self._chars = iter(text)
        self._pushed: list[str] = []
        self._out: list[str] = []
        self._table = HashTable()

    def getc(self) -> str | None:
        if self._pushed:
            return self._pushed.pop()
        return next(self._chars, None)

    def ungetc(self, c: str | None) -> None:
        if c is not None:
            self._pushed.append(c)

    def put(self, s: str | None) -> None:
        if s is not None:
            self._out.append(s)

    def get_word(self) -> str | None:
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
                return "".join(chars)
            chars.append(c)

    def get_alnum(self) -> str:
        chars: list[str] = []
        while True:
            c = self.getc()
            if c is None or c not in _ALNUM or len(chars) >= MAX_WORD_LEN:
                self.ungetc(c)
                return "".join(chars)
            chars.append(c)

    def consume_word(self, error: str) -> str:
        word = self.get_word()
        if word is None:
            return ""
        if word[0] not in _LETTERS:
            self.put(error + "\n")
        self.put(word)
        return word

    def consume_blanks(self) -> None:
        c = self.getc()
        while c is not None and c in _BLANKS:
            self.put(c)
            c = self.getc()
        self.ungetc(c)

    def consume_comment(self) -> None:
        c = self.getc()
        if c == "/":
            self.put(c)
            c = self.getc()
            if c == "/":
                self.put(c)
                c = self.getc()
                while c is not None and c != "\n":
                    self.put(c)
                    c = self.getc()
            elif c == "*":
                self.put(c)
                while (c := self.getc()) is not None:
                    self.put(c)
                    if c == "*":
                        c = self.getc()
                        self.put(c)
                        if c == "/":
                            break
                c = self.getc()
                if c == "/":
                    self.put(c)
                    return
        self.ungetc(c)

    def consume_quoted(self, quote: str) -> None:
        c = self.getc()
        if c == quote:
            self.put(c)
            while (c := self.getc()) is not None:
                self.put(c)
                if c == "\\":
                    c = self.getc()
                    self.put(c)
                    if c is None:
                        break
                elif c == quote:
                    return
        self.ungetc(c)

    def consume_preproc(self) -> None:
        c = self.getc()
        if c != "#":
            self.ungetc(c)
            return
        self.put(c)
        directive = self.consume_word("Error: expected preprocessor directive.")
        if directive not in ("define", "undef"):
            return
        self.consume_blanks()
        name = self.consume_word("Error: invalid name.")
        if directive == "define":
            self.consume_blanks()
            definition = self.get_alnum()
            self.put(definition)
            existing = self._table.lookup(definition)
            self._table.install(name, definition if existing is None else existing)
        else:
            self._table.undef(name)

    def run(self) -> str:
        handlers = {
            "/": self.consume_comment,
            "'": lambda: self.consume_quoted("'"),
            '"': lambda: self.consume_quoted('"'),
            "#": self.consume_preproc,
        }
        while (word := self.get_word()) is not None:
            c = word[0]
            if c in _LETTERS:
                definition = self._table.lookup(word)
                self.put(word if definition is None else definition)
            elif c in handlers:
                self.ungetc(c)
                handlers[c]()
            else:
                self.put(c)
        return "".join(self._out)


def expand_defines(text: str) -> str:
    """Echo ``text`` with defined names replaced by their definitions."""
    return _Expander(text).run()


def main(argv: Sequence[str] | None = None) -> int:
    """Filter standard input through ``expand_defines``."""
    sys.stdout.write(expand_defines(sys.stdin.read()))
    return 0