"""Line-oriented file tools: compare, find, paginated print and cat."""

from __future__ import annotations

import contextlib
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import BinaryIO, TextIO

MAX_LINE_LEN = 1000
LINES_PER_PAGE = 10
BUFFER_SIZE = 1024


def _read_lines(stream: Iterable[str]) -> Iterator[str]:
    """Yield lines, splitting any longer than the line buffer into pieces."""
    limit = MAX_LINE_LEN - 1
    for line in stream:
        while len(line) > limit:
            yield line[:limit]
            line = line[limit:]
        yield line


def _open_text(name: str) -> TextIO:
    return open(name, encoding="utf-8", errors="surrogateescape", newline="")


def first_difference(
    lines_1: Iterable[str], lines_2: Iterable[str]
) -> tuple[int, str, str] | None:
    """Return (line number, line 1, line 2) of the first differing pair, or None.

    Comparison stops when either sequence runs out.
    """
    for number, (line_1, line_2) in enumerate(zip(lines_1, lines_2), start=1):
        if line_1 != line_2:
            return number, line_1, line_2
    return None


def find_pattern(
    lines: Iterable[str], pattern: str, invert: bool = False, number: bool = False
) -> Iterator[str]:
    """Yield lines containing ``pattern`` (or not, with ``invert``), optionally numbered."""
    for line_number, line in enumerate(lines, start=1):
        if (pattern in line) != invert:
            yield f"{line_number}: {line}" if number else line


def paginate(name: str, lines: Iterable[str]) -> Iterator[str]:
    """Yield numbered lines with a page header before every page."""
    for line_number, line in enumerate(lines, start=1):
        if (line_number - 1) % LINES_PER_PAGE == 0:
            yield f"[{name}]: page {line_number // LINES_PER_PAGE + 1}\n"
        yield f"{line_number}: {line}"


def copy_stream(source: BinaryIO, target: BinaryIO) -> int:
    """Copy ``source`` to ``target`` in fixed-size chunks; return the bytes copied."""
    total = 0
    while chunk := source.read(BUFFER_SIZE):
        target.write(chunk)
        total += len(chunk)
    return total


def _args(argv: Sequence[str] | None) -> list[str]:
    return list(sys.argv[1:] if argv is None else argv)


def compare_main(argv: Sequence[str] | None = None) -> int:
    """Print the first differing line of two files."""
    args = _args(argv)
    if len(args) != 2:
        sys.stderr.write("Error: invalid arguments.\n")
        return 1
    with contextlib.ExitStack() as stack:
        files = []
        for name in args:
            try:
                files.append(stack.enter_context(_open_text(name)))
            except OSError:
                sys.stderr.write(f"compare: can't open {name}.\n")
                return 1
        difference = first_difference(_read_lines(files[0]), _read_lines(files[1]))
    if difference is not None:
        line_number, line_1, line_2 = difference
        sys.stdout.write(f"{args[0]} [{line_number}]: {line_1}")
        sys.stdout.write(f"{args[1]} [{line_number}]: {line_2}")
    return 0


def find_main(argv: Sequence[str] | None = None) -> int:
    """Print lines matching a pattern: find [-xn]... PATTERN [FILE]..."""
    args = _args(argv)
    usage = "Usage: find [-xn]... PATTERN [FILE]...\n"
    if len(args) < 2:
        sys.stderr.write(usage)
        return 1
    invert = number = False
    pos = 0
    while pos < len(args) and args[pos].startswith("-"):
        for flag in args[pos][1:]:
            if flag == "x":
                invert = True
            elif flag == "n":
                number = True
            else:
                sys.stderr.write(f"find: illegal option {flag}.\n")
                return 1
        pos += 1
    if pos >= len(args):
        sys.stderr.write(usage)
        return 1
    pattern, files = args[pos], args[pos + 1:]
    if not files:
        sys.stdout.writelines(find_pattern(_read_lines(sys.stdin), pattern, invert, number))
        return 0
    for index, name in enumerate(files):
        try:
            stream = _open_text(name)
        except OSError:
            sys.stderr.write(f"find: can't open {name}.\n")
            return 1
        with stream:
            sys.stdout.write(f"{name}\n")
            sys.stdout.writelines(find_pattern(_read_lines(stream), pattern, invert, number))
        if index < len(files) - 1:
            sys.stdout.write("\n")
    return 0


def pages_main(argv: Sequence[str] | None = None) -> int:
    """Print each named file with line numbers and page headers."""
    args = _args(argv)
    if not args:
        sys.stderr.write("Usage: print [FILE]...\n")
        return 1
    for index, name in enumerate(args):
        try:
            stream = _open_text(name)
        except OSError:
            sys.stderr.write(f"print: can't open {name}.\n")
            return 1
        with stream:
            sys.stdout.writelines(paginate(name, _read_lines(stream)))
        if index < len(args) - 1:
            sys.stdout.write("\n")
    return 0


def cat_main(argv: Sequence[str] | None = None) -> int:
    """Copy the named files, or standard input, to standard output."""
    args = _args(argv)
    sys.stdout.flush()
    out = sys.stdout.buffer
    if not args:
        copy_stream(sys.stdin.buffer, out)
        out.flush()
        return 0
    for name in args:
        try:
            stream = open(name, "rb")
        except OSError:
            out.flush()
            sys.stderr.write(f"Error: could not open the file {name}.\n")
            return 1
        with stream:
            copy_stream(stream, out)
    out.flush()
    return 0