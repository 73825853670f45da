"""Character-level filters: case conversion and visible printing."""

from __future__ import annotations

import os
import string
import sys
from collections.abc import Sequence

MAX_LINE_LEN = 80
OFFSET = 10

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def convert_case(text: str, mode: str) -> str:
    """Convert ASCII letters in ``text`` to ``mode`` ("lower" or "upper")."""
    if mode == "lower":
        return text.translate(_TO_LOWER)
    if mode == "upper":
        return text.translate(_TO_UPPER)
    raise ValueError(f"unknown mode: {mode!r}")


def case_main(argv: Sequence[str] | None = None) -> int:
    """Convert standard input; the mode is the name the program runs under."""
    name = os.path.basename(sys.argv[0]) if argv is None else (argv[0] if argv else "")
    try:
        result = convert_case(sys.stdin.read(), name)
    except ValueError:
        print("Error: invalid arguments.")
        return 1
    sys.stdout.write(result)
    return 0


def visible_print(data: bytes, octal: bool = True) -> str:
    """Render ``data`` with newlines as spaces, non-ASCII bytes escaped, and lines folded."""
    out: list[str] = []
    col = 1
    for byte in data:
        if byte <= 127:
            ch = " " if byte == 10 else chr(byte)
            out.append(ch)
            col += 1
            blank = ch in " \t"
        else:
            escaped = f"\\{byte:o}" if octal else f"\\{byte:x}"
            out.append(escaped)
            col += len(escaped) - 1
            blank = False
        if col >= MAX_LINE_LEN - OFFSET and blank:
            col = 1
            out.append("\n")
    out.append("\n")
    return "".join(out)


def print_main(argv: Sequence[str] | None = None) -> int:
    """Print standard input visibly; ``-o`` for octal, ``-x`` for hex escapes."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1 or args[0] not in ("-o", "-x"):
        print("Error: invalid arguments.")
        return 1
    sys.stdout.write(visible_print(sys.stdin.buffer.read(), args[0] == "-o"))
    return 0


def is_upper_v1(c: str) -> bool:
    return "A" <= c <= "Z"


def is_upper_v2(c: str) -> bool:
    # The terminating NUL of the searched string also matches.
    return c in string.ascii_uppercase or c == "\0"