"""A map that counts how often each key has been added."""

from __future__ import annotations

from collections.abc import Hashable


class CountMap:
    """Counts keys; a key whose count falls to zero disappears."""

    def __init__(self) -> None:
        self._counts: dict[Hashable, int] = {}

    def add(self, key: Hashable) -> None:
        """Increase the count of ``key`` by one."""
        self._counts[key] = self._counts.get(key, 0) + 1

    def remove(self, key: Hashable) -> None:
        """Decrease the count of ``key`` by one; absent keys are ignored."""
        count = self._counts.get(key)
        if count is None:
            return
        if count == 1:
            del self._counts[key]
        else:
            self._counts[key] = count - 1

    def get(self, key: Hashable) -> int:
        """Return the count of ``key``, zero when absent."""
        return self._counts.get(key, 0)

    def __contains__(self, key: object) -> bool:
        return key in self._counts

    def __len__(self) -> int:
        return len(self._counts)