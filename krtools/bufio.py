"""Buffered file access over raw descriptors, with a fixed table of open files."""

from __future__ import annotations

import io
import os
import sys
from collections.abc import Iterator, Sequence

BUFFER_SIZE = 1024
MAX_NR_OF_OPEN_FILES = 20
PERMISSIONS = 0o666

SEEK_SET = os.SEEK_SET
SEEK_CUR = os.SEEK_CUR
SEEK_END = os.SEEK_END


class TooManyOpenFilesError(OSError):
    """Raised when every slot of a file table is in use."""


class BufferedFile:
    """A descriptor opened either for reading or for writing, with its own buffer."""

    def __init__(self, fd: int, mode: str = "r", unbuffered: bool = False) -> None:
        self.fd = fd
        self.readable = mode.startswith("r")
        self.writable = not self.readable
        self.unbuffered = unbuffered
        self.eof = False
        self.error = False
        self.closed = False
        self._buffer = bytearray()
        self._pos = 0

    @property
    def buffer_size(self) -> int:
        return 1 if self.unbuffered else BUFFER_SIZE

    def _check_open(self) -> None:
        if self.closed:
            raise ValueError("I/O operation on closed file")

    def getc(self) -> int | None:
        """Return the next byte, or None at end of file."""
        self._check_open()
        if not self.readable or self.eof or self.error:
            return None
        if self._pos < len(self._buffer):
            byte = self._buffer[self._pos]
            self._pos += 1
            return byte
        try:
            data = os.read(self.fd, self.buffer_size)
        except OSError:
            self.error = True
            raise
        if not data:
            self.eof = True
            self._buffer.clear()
            self._pos = 0
            return None
        self._buffer = bytearray(data)
        self._pos = 1
        return data[0]

    def _write_out(self) -> None:
        if not self._buffer:
            return
        written = os.write(self.fd, bytes(self._buffer))
        if written != len(self._buffer):
            self.error = True
            raise OSError(f"short write on descriptor {self.fd}")
        self._buffer.clear()

    def putc(self, c: int) -> int:
        """Queue byte ``c`` for writing and return it."""
        self._check_open()
        if not self.writable:
            raise io.UnsupportedOperation("file not open for writing")
        if self.error:
            raise OSError("file is in an error state")
        if not 0 <= c <= 255:
            raise ValueError(f"byte out of range: {c}")
        if len(self._buffer) >= self.buffer_size:
            self._write_out()
        self._buffer.append(c)
        return c

    def flush(self) -> None:
        """Write out any pending bytes."""
        self._check_open()
        if not self.writable:
            self.error = True
            raise io.UnsupportedOperation("file not open for writing")
        if self.error:
            raise OSError("file is in an error state")
        self._write_out()

    def close(self) -> None:
        """Flush pending output and release the descriptor."""
        if self.closed:
            return
        try:
            if self.writable:
                self.flush()
        finally:
            self._buffer.clear()
            self._pos = 0
            self.closed = True
            os.close(self.fd)

    def seek(self, offset: int, whence: int = SEEK_SET) -> int:
        """Move to ``offset`` relative to ``whence``; return the new position."""
        self._check_open()
        if self.readable:
            self._buffer.clear()
            self._pos = 0
        else:
            self.flush()
        position = os.lseek(self.fd, offset, whence)
        self.eof = False
        return position

    def __iter__(self) -> Iterator[int]:
        while (byte := self.getc()) is not None:
            yield byte

    def __enter__(self) -> BufferedFile:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


class FileTable:
    """A fixed number of file slots; the first three are the standard streams."""

    def __init__(self) -> None:
        self._slots: list[BufferedFile | None] = [
            BufferedFile(0, "r"),
            BufferedFile(1, "w"),
            BufferedFile(2, "w", unbuffered=True),
        ]
        self._slots += [None] * (MAX_NR_OF_OPEN_FILES - len(self._slots))

    @property
    def stdin(self) -> BufferedFile:
        return self._slots[0]  # type: ignore[return-value]

    @property
    def stdout(self) -> BufferedFile:
        return self._slots[1]  # type: ignore[return-value]

    @property
    def stderr(self) -> BufferedFile:
        return self._slots[2]  # type: ignore[return-value]

    def open(self, name: str, mode: str) -> BufferedFile:
        """Open ``name`` for reading ("r"), writing ("w") or appending ("a")."""
        if not mode or mode[0] not in "rwa":
            raise ValueError(f"invalid mode: {mode!r}")
        index = next(
            (i for i, slot in enumerate(self._slots) if slot is None or slot.closed),
            None,
        )
        if index is None:
            raise TooManyOpenFilesError("no free file slots")
        creat_flags = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
        if mode[0] == "w":
            fd = os.open(name, creat_flags, PERMISSIONS)
        elif mode[0] == "a":
            try:
                fd = os.open(name, os.O_WRONLY)
            except OSError:
                fd = os.open(name, creat_flags, PERMISSIONS)
            os.lseek(fd, 0, SEEK_END)
        else:
            fd = os.open(name, os.O_RDONLY)
        file = BufferedFile(fd, mode[0])
        self._slots[index] = file
        return file

    def __len__(self) -> int:
        return sum(1 for slot in self._slots if slot is not None and not slot.closed)


def copy_file(source: str, target: str | None = None, offset: int = 0) -> int:
    """Copy ``source`` from ``offset`` onward to ``target`` (standard output if None).

    Returns the number of bytes copied.
    """
    table = FileTable()
    src = table.open(source, "r")
    try:
        dst = table.stdout if target is None else table.open(target, "w")
        src.seek(offset, SEEK_SET)
        count = 0
        for byte in src:
            dst.putc(byte)
            count += 1
        if target is None:
            dst.flush()
        else:
            dst.close()
    finally:
        src.close()
    return count


def main(argv: Sequence[str] | None = None) -> int:
    """Copy SOURCE [TARGET [OFFSET]]; without TARGET the file goes to standard output."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not 1 <= len(args) <= 3:
        sys.stderr.write("Usage: bufio SOURCE [TARGET [OFFSET]]\n")
        return 1
    offset = 0
    if len(args) == 3:
        try:
            offset = int(args[2])
        except ValueError:
            sys.stderr.write("Error: invalid offset.\n")
            return 1
    target = args[1] if len(args) >= 2 else None
    sys.stdout.flush()
    try:
        copy_file(args[0], target, offset)
    except OSError:
        sys.stdout.write("Error: could not open the file.\n")
        return 1
    return 0