"""Running median kept with a max-heap and a min-heap."""

from __future__ import annotations

import heapq

from dsbook.heap import HeapEmptyError


class MedianHeap:
    """Keeps the lower half in a max-heap and the upper half in a min-heap."""

    def __init__(self) -> None:
        self._lower: list[int] = []  # negated values: a max-heap
        self._upper: list[int] = []

    def insert(self, value: int) -> None:
        """Add ``value`` and rebalance the two halves."""
        if not self._lower or -self._lower[0] >= value:
            heapq.heappush(self._lower, -value)
        else:
            heapq.heappush(self._upper, value)
        if len(self._lower) > len(self._upper) + 1:
            heapq.heappush(self._upper, -heapq.heappop(self._lower))
        if len(self._upper) > len(self._lower) + 1:
            heapq.heappush(self._lower, -heapq.heappop(self._upper))

    def median(self) -> int:
        """Return the median; the mean of two middles is truncated toward zero."""
        if not self._lower and not self._upper:
            raise HeapEmptyError("no values inserted")
        if len(self._lower) == len(self._upper):
            total = -self._lower[0] + self._upper[0]
            half = abs(total) // 2
            return half if total >= 0 else -half
        if len(self._lower) > len(self._upper):
            return -self._lower[0]
        return self._upper[0]