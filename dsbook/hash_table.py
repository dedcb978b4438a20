"""A hash table of integers with open addressing and lazy deletion."""

from __future__ import annotations

from enum import Enum


class _Slot(Enum):
    EMPTY = 0
    LAZY_DELETED = 1
    FILLED = 2


class HashTable:
    """Fixed-size table; collisions are resolved by growing probe steps."""

    def __init__(self, table_size: int) -> None:
        if table_size < 1:
            raise ValueError("table_size must be positive")
        self._size = table_size
        self._keys = [0] * table_size
        self._values = [0] * table_size
        self._flags = [_Slot.EMPTY] * table_size

    def _probe(self, key: int):
        """Yield the slot indices visited for ``key``."""
        index = key % self._size
        for step in range(self._size):
            yield index
            index = (index + step) % self._size

    def add(self, key: int, value: int | None = None) -> bool:
        """Store ``value`` (``key`` itself when omitted); False when no slot is free."""
        if value is None:
            value = key
        for index in self._probe(key):
            if self._flags[index] is not _Slot.FILLED:
                self._keys[index] = key
                self._values[index] = value
                self._flags[index] = _Slot.FILLED
                return True
        return False

    def _find(self, key: int) -> int | None:
        for index in self._probe(key):
            flag = self._flags[index]
            if flag is _Slot.EMPTY:
                return None
            if flag is _Slot.FILLED and self._keys[index] == key:
                return index
        return None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self._find(key) is not None

    def get(self, key: int) -> int:
        """Return the value stored under ``key``."""
        index = self._find(key)
        if index is None:
            raise KeyError(key)
        return self._values[index]

    def remove(self, key: int) -> bool:
        """Delete ``key``; tell whether it was present."""
        index = self._find(key)
        if index is None:
            return False
        self._flags[index] = _Slot.LAZY_DELETED
        return True

    def items(self) -> list[tuple[int, int]]:
        """Return the stored ``(key, value)`` pairs in slot order."""
        return [
            (self._keys[i], self._values[i])
            for i, flag in enumerate(self._flags)
            if flag is _Slot.FILLED
        ]