"""Listing files and directory trees in a style similar to ``ls -l``."""

from __future__ import annotations

import os
import stat
import sys
import time
from collections.abc import Iterator, Sequence

try:
    import grp
    import pwd
except ImportError:  # not available on every platform
    grp = None  # type: ignore[assignment]
    pwd = None  # type: ignore[assignment]

MAX_PATH_LEN = 1024

_SIZES = ("B", "K", "M", "G")
_PERMISSIONS = (
    (stat.S_IRUSR, "r"), (stat.S_IWUSR, "w"), (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"), (stat.S_IWGRP, "w"), (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"), (stat.S_IWOTH, "w"), (stat.S_IXOTH, "x"),
)


def format_mode(mode: int) -> str:
    """Return the ten-character type and permission string for ``mode``."""
    kind = "d" if stat.S_ISDIR(mode) else "-"
    return kind + "".join(ch if mode & bit else "-" for bit, ch in _PERMISSIONS)


def format_size(size: int) -> str:
    """Return ``size`` in bytes scaled to B, K, M or G with one decimal."""
    unit = 0
    rem = 0
    while size >= 1024 and unit < len(_SIZES) - 1:
        rem = size % 1024
        unit += 1
        size //= 1024
    return f"{size + rem / 1024:6.1f}{_SIZES[unit]}"


def format_time(timestamp: float) -> str:
    """Return ``timestamp`` as local day, month and time of day."""
    return time.strftime("%d %b %H:%M", time.localtime(timestamp))


def _user_name(uid: int) -> str | None:
    if pwd is None:
        return None
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return None


def _group_name(gid: int) -> str | None:
    if grp is None:
        return None
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return None


def _describe_stat(path: str, info: os.stat_result) -> str:
    fields = [format_mode(info.st_mode), str(info.st_nlink)]
    user = _user_name(info.st_uid)
    if user is None:
        sys.stderr.write("Error: cannot find user\n")
    else:
        fields.append(user)
    group = _group_name(info.st_gid)
    if group is None:
        sys.stderr.write("Error: cannot find group\n")
    else:
        fields.append(group)
    fields += [format_size(info.st_size), format_time(info.st_atime), path]
    return " ".join(fields)


def describe(path: str) -> str:
    """Return one listing line for ``path``; raises OSError if it cannot be read."""
    return _describe_stat(path, os.stat(path))


def _dir_walk(dir_name: str) -> Iterator[str]:
    try:
        entries = os.listdir(dir_name)
    except OSError:
        sys.stderr.write(f"dir_walk: cannot open {dir_name}\n")
        return
    for entry in entries:
        if len(dir_name) + len(entry) + 2 > MAX_PATH_LEN:
            sys.stderr.write("dir_walk: path too long\n")
            continue
        yield from fsize(f"{dir_name}/{entry}")


def fsize(path: str) -> Iterator[str]:
    """Yield listing lines for ``path``; a directory's contents come before it."""
    try:
        info = os.stat(path)
    except OSError:
        sys.stderr.write(f"fsize: cannot access {path}\n")
        return
    if stat.S_ISDIR(info.st_mode):
        yield from _dir_walk(path)
    yield _describe_stat(path, info)


def main(argv: Sequence[str] | None = None) -> int:
    """List the named paths, or the current directory."""
    args = list(sys.argv[1:] if argv is None else argv) or ["."]
    for path in args:
        for line in fsize(path):
            print(line)
    return 0