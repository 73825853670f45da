"""A first-fit storage allocator over a simulated, growable heap."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

UNIT = 16
MIN_NR_OF_UNITS = 1024
UINT_MAX = 0xFFFFFFFF
_BASE = -1


class AllocationError(Exception):
    """Raised when a request cannot be satisfied or an address is invalid."""


@dataclass
class _Header:
    next: int
    size: int


class Arena:
    """A heap addressed by byte offsets, handing out blocks from a circular free list.

    Blocks are measured in units of ``UNIT`` bytes; each block starts with one
    header unit.  The heap grows by at least ``MIN_NR_OF_UNITS`` units at a time,
    up to ``capacity`` bytes when a capacity is given.
    """

    def __init__(self, capacity: int | None = None) -> None:
        self.capacity = capacity
        self._memory = bytearray()
        self._core_used = 0
        self._headers: dict[int, _Header] = {_BASE: _Header(next=_BASE, size=0)}
        self._free = _BASE
        self._allocated: set[int] = set()

    def malloc(self, nbytes: int) -> int:
        """Allocate ``nbytes`` and return the address of the usable space."""
        if nbytes <= 0 or nbytes >= UINT_MAX - MIN_NR_OF_UNITS:
            raise AllocationError(f"invalid size {nbytes}")
        units = (nbytes + UNIT - 1) // UNIT + 1
        prev = self._free
        p = self._headers[prev].next
        while True:
            header = self._headers[p]
            if header.size >= units:
                if header.size == units:
                    self._headers[prev].next = header.next
                else:
                    header.size -= units
                    p += header.size
                    self._headers[p] = _Header(next=_BASE, size=units)
                self._free = prev
                self._allocated.add(p)
                return (p + 1) * UNIT
            if p == self._free:
                p = self._morecore(units)
            prev, p = p, self._headers[p].next

    def calloc(self, count: int, size: int) -> int:
        """Allocate ``count * size`` zeroed bytes and return their address."""
        nbytes = count * size
        address = self.malloc(nbytes)
        self._memory[address:address + nbytes] = bytes(nbytes)
        return address

    def free(self, address: int) -> None:
        """Return the block at ``address`` to the free list."""
        block = address // UNIT - 1
        if address % UNIT or block not in self._allocated:
            raise AllocationError(f"invalid address {address}")
        size = self._headers[block].size
        if size == 0 or size == UINT_MAX - MIN_NR_OF_UNITS:
            raise AllocationError(f"invalid block size {size}")
        self._allocated.discard(block)
        self._release(block)

    def bfree(self, block: bytes | bytearray) -> None:
        """Donate the memory of ``block`` to the free list."""
        if len(block) < MIN_NR_OF_UNITS:
            raise AllocationError(f"block must be at least of size {MIN_NR_OF_UNITS}")
        units = len(block) // UNIT
        start = self._align_end()
        self._memory.extend(bytes(block[:units * UNIT]))
        self._headers[start] = _Header(next=_BASE, size=units - 1)
        self._release(start)

    def read(self, address: int, size: int) -> bytes:
        """Return ``size`` bytes at ``address`` within one allocated block."""
        self._check_range(address, size)
        return bytes(self._memory[address:address + size])

    def write(self, address: int, data: bytes | bytearray) -> None:
        """Store ``data`` at ``address`` within one allocated block."""
        self._check_range(address, len(data))
        self._memory[address:address + len(data)] = data

    def free_blocks(self) -> list[tuple[int, int]]:
        """Return (start address, size in bytes) of each free block, in list order."""
        blocks = []
        p = self._headers[_BASE].next
        while p != _BASE:
            header = self._headers[p]
            blocks.append((p * UNIT, header.size * UNIT))
            p = header.next
        return blocks

    def _align_end(self) -> int:
        remainder = len(self._memory) % UNIT
        if remainder:
            self._memory.extend(bytes(UNIT - remainder))
        return len(self._memory) // UNIT

    def _check_range(self, address: int, size: int) -> None:
        if size < 0:
            raise AllocationError(f"invalid size {size}")
        for block in self._allocated:
            start = (block + 1) * UNIT
            end = (block + self._headers[block].size) * UNIT
            if start <= address and address + size <= end:
                return
        raise AllocationError(f"address range {address}+{size} is not allocated")

    def _morecore(self, units: int) -> int:
        units = max(units, MIN_NR_OF_UNITS)
        nbytes = units * UNIT
        if self.capacity is not None and self._core_used + nbytes > self.capacity:
            raise AllocationError("out of memory")
        self._core_used += nbytes
        start = self._align_end()
        self._memory.extend(bytes(nbytes))
        self._headers[start] = _Header(next=_BASE, size=units)
        self._release(start)
        return self._free

    def _release(self, block: int) -> None:
        headers = self._headers
        bh = headers[block]
        p = self._free
        while not (p < block < headers[p].next):
            nxt = headers[p].next
            if p >= nxt and (block > p or block < nxt):
                break
            p = nxt
        ph = headers[p]
        if block + bh.size == ph.next:
            neighbour = headers.pop(ph.next)
            bh.size += neighbour.size
            bh.next = neighbour.next
        else:
            bh.next = ph.next
        if p != _BASE and p + ph.size == block:
            ph.size += bh.size
            ph.next = bh.next
            del headers[block]
        else:
            ph.next = block
        self._free = p


def _c_string(arena: Arena, address: int, limit: int) -> str:
    data = arena.read(address, limit)
    return data.split(b"\0", 1)[0].decode("ascii")


def main(argv: Sequence[str] | None = None) -> int:
    """Exercise malloc, calloc, free and bfree on a fresh arena."""
    arena = Arena()
    try:
        address = arena.malloc(27)
    except AllocationError:
        print("Error: malloc faild to allocate the requrested memory.")
        return 1
    arena.write(address, b"Content from malloc here.\0")
    print(_c_string(arena, address, 27))
    arena.free(address)

    try:
        address = arena.calloc(27, 1)
    except AllocationError:
        print("Error: calloc faild to allocate the requrested memory.")
        return 1
    arena.write(address, b"Content from calloc here.\0")
    print(_c_string(arena, address, 27))
    arena.free(address)

    block = bytearray(1024)
    content = b"Some test content here."
    block[:len(content)] = content
    try:
        arena.bfree(block)
    except AllocationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0