"""A hash table of integers resolving collisions by separate chaining."""

from __future__ import annotations


class ChainedHashTable:
    """Each bucket holds a list of ``(key, value)`` pairs in insertion order."""

    def __init__(self, table_size: int = 23) -> None:
        if table_size < 1:
            raise ValueError("table_size must be positive")
        self._size = table_size
        self._buckets: list[list[tuple[int, int]]] = [[] for _ in range(table_size)]

    def _bucket(self, key: int) -> list[tuple[int, int]]:
        return self._buckets[key % self._size]

    def add(self, key: int, value: int | None = None) -> None:
        """Append ``(key, value)``; ``value`` defaults to ``key``. Existing keys are not replaced."""
        self._bucket(key).append((key, key if value is None else value))

    def remove(self, key: int) -> bool:
        """Delete the first entry for ``key``; tell whether one was found."""
        bucket = self._bucket(key)
        for index, (stored, _) in enumerate(bucket):
            if stored == key:
                del bucket[index]
                return True
        return False

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and any(k == key for k, _ in self._bucket(key))

    def get(self, key: int) -> int:
        """Return the value of the first entry for ``key``."""
        for stored, value in self._bucket(key):
            if stored == key:
                return value
        raise KeyError(key)

    def items(self) -> list[tuple[int, int]]:
        """Return every ``(key, value)`` pair, bucket by bucket."""
        return [pair for bucket in self._buckets for pair in bucket]