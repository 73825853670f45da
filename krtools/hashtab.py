"""A fixed-size chained hash table of name/definition pairs."""

from __future__ import annotations

from collections.abc import Sequence

HASH_SIZE = 101
_WORD_MASK = (1 << 64) - 1


def hash_string(text: str) -> int:
    """Return the bucket index of ``text``."""
    value = 0
    for ch in text:
        value = (ord(ch) + 31 * value) & _WORD_MASK
    return value % HASH_SIZE


class HashTable:
    """Names mapped to definitions, newest entry first in each bucket."""

    def __init__(self) -> None:
        self._buckets: list[list[tuple[str, str]]] = [[] for _ in range(HASH_SIZE)]

    def install(self, name: str, definition: str) -> None:
        """Define ``name``, replacing any earlier definition."""
        bucket = self._buckets[hash_string(name)]
        for i, (key, _) in enumerate(bucket):
            if key == name:
                bucket[i] = (name, definition)
                return
        bucket.insert(0, (name, definition))

    def lookup(self, name: str) -> str | None:
        """Return the definition of ``name``, or None."""
        for key, definition in self._buckets[hash_string(name)]:
            if key == name:
                return definition
        return None

    def undef(self, name: str) -> bool:
        """Remove ``name``; return whether it was defined."""
        bucket = self._buckets[hash_string(name)]
        for i, (key, _) in enumerate(bucket):
            if key == name:
                del bucket[i]
                return True
        return False

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)


def main(argv: Sequence[str] | None = None) -> int:
    """Install colliding names, then undefine one of them."""
    table = HashTable()
    table.install("TEST", "test")
    for i, name in enumerate(("TSHe", "UPXD", "9iww", "mY1a", "uuoT"), start=1):
        table.install(name, f"test{i}")
    definition = table.lookup("TEST")
    if definition is None:
        print("Error: hash value not found.")
        return 0
    print(f"TEST: {definition}")
    if table.undef("TEST") and table.lookup("TEST") is None:
        print("'TEST' was undefined successfully.")
    else:
        print("Error: failed to undefine 'TEST'.")
    return 0