"""Minimal printf and scanf over a handful of conversions."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

_UINT_MASK = 0xFFFFFFFF

_PATTERNS = {
    "d": re.compile(r"[+-]?\d+"),
    "u": re.compile(r"[+-]?\d+"),
    "o": re.compile(r"[+-]?[0-7]+"),
    "x": re.compile(r"[+-]?(?:0[xX](?=[0-9a-fA-F]))?[0-9a-fA-F]+"),
    "i": re.compile(r"[+-]?(?:0[xX][0-9a-fA-F]+|0[0-7]*|[1-9]\d*)"),
    "f": re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"),
    "s": re.compile(r"\S+"),
}
_PATTERNS["e"] = _PATTERNS["g"] = _PATTERNS["f"]


def minprintf(fmt: str, *args: object) -> str:
    """Format ``args`` according to ``fmt`` and return the text."""
    out: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec in "di":
            out.append("%d" % int(next(values)))
        elif spec == "o":
            out.append("%o" % (int(next(values)) & _UINT_MASK))
        elif spec in "xX":
            out.append("%x" % (int(next(values)) & _UINT_MASK))
        elif spec == "u":
            out.append("%d" % (int(next(values)) & _UINT_MASK))
        elif spec == "c":
            value = next(values)
            out.append(value if isinstance(value, str) else chr(int(value)))
        elif spec == "s":
            out.append(str(next(values)))
        elif spec == "f":
            out.append("%f" % float(next(values)))
        elif spec in "eE":
            out.append("%e" % float(next(values)))
        elif spec in "gG":
            out.append("%g" % float(next(values)))
        elif spec == "p":
            out.append("0x%x" % int(next(values)))
        else:
            out.append(spec)
    return "".join(out)


def _convert(spec: str, token: str) -> object:
    if spec in "d":
        return int(token)
    if spec == "u":
        return int(token) & _UINT_MASK
    if spec == "o":
        return int(token, 8)
    if spec == "x":
        return int(token, 16)
    if spec == "i":
        sign = -1 if token.startswith("-") else 1
        body = token.lstrip("+-")
        if body[:2].lower() == "0x":
            return sign * int(body, 16)
        if body.startswith("0"):
            return sign * int(body, 8)
        return sign * int(body)
    if spec in "efg":
        return float(token)
    return token


def minscanf(fmt: str, text: str) -> list[object]:
    """Read values from ``text`` for each conversion in ``fmt``.

    Characters outside conversions are ignored.  Reading stops at the first
    conversion that fails; the values read so far are returned.
    """
    values: list[object] = []
    pos = 0
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "c":
            if pos >= len(text):
                break
            values.append(text[pos])
            pos += 1
            continue
        pattern = _PATTERNS.get(spec)
        if pattern is None:
            continue
        while pos < len(text) and text[pos].isspace():
            pos += 1
        match = pattern.match(text, pos)
        if match is None:
            break
        values.append(_convert(spec, match.group()))
        pos = match.end()
    return values


def main(argv: Sequence[str] | None = None) -> int:
    """Print a sample line, then read and echo values from standard input."""
    marker = object()
    sys.stdout.write(minprintf(
        "Let's print %d, %i, %o, %x, %X, %u, %c, %e, %E, %g, %G, %f, %p, and %s.\n",
        2, 3, 8, 16, 16, -1, 97, 0.0025, 0.0023, 0.0025, 0.0023, 3.14159,
        id(marker), "hello, world",
    ))
    values = minscanf("%d %i %o %u %x %c %s %f", sys.stdin.read())
    labels = ("decimal", "integer", "octal", "unsigned_decimal",
              "hexadecimal_integer", "character", "str", "float_point_number")
    specs = "dodux csf"
    for label, spec, value in zip(labels, "didux" + "csf", values):
        sys.stdout.write(minprintf(f"{label}: %{spec}\n", value))
    del specs
    return 0