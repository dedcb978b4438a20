"""A binary heap of integers that is either a min-heap or a max-heap."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence


class HeapEmptyError(IndexError):
    """Raised when taking from an empty heap."""


class Heap:
    """An array-backed binary heap; ``is_min`` chooses which end comes out first."""

    def __init__(self, values: Iterable[int] = (), is_min: bool = True) -> None:
        self._is_min = is_min
        self._data = list(values)
        for parent in range(len(self._data) // 2, -1, -1):
            self._sift_down(parent)

    def _out_of_order(self, parent: int, child: int) -> bool:
        if self._is_min:
            return parent > child
        return parent < child

    def _sift_down(self, parent: int) -> None:
        data = self._data
        size = len(data)
        while True:
            left = 2 * parent + 1
            right = left + 1
            if left >= size:
                return
            child = left
            if right < size and self._out_of_order(data[left], data[right]):
                child = right
            if not self._out_of_order(data[parent], data[child]):
                return
            data[parent], data[child] = data[child], data[parent]
            parent = child

    def _sift_up(self, child: int) -> None:
        data = self._data
        while child > 0:
            parent = (child - 1) // 2
            if not self._out_of_order(data[parent], data[child]):
                return
            data[parent], data[child] = data[child], data[parent]
            child = parent

    def add(self, value: int) -> None:
        """Insert ``value``."""
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def remove(self) -> int:
        """Remove and return the top value."""
        if not self._data:
            raise HeapEmptyError("heap is empty")
        top = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._sift_down(0)
        return top

    def peek(self) -> int:
        """Return the top value without removing it."""
        if not self._data:
            raise HeapEmptyError("heap is empty")
        return self._data[0]

    def __len__(self) -> int:
        return len(self._data)

    def to_list(self) -> list[int]:
        """Return the contents in storage order."""
        return list(self._data)


def heap_sort(values: MutableSequence[int], increasing: bool = True) -> None:
    """Sort ``values`` in place using a heap."""
    heap = Heap(values, not increasing)
    for i in range(len(values) - 1, -1, -1):
        values[i] = heap.remove()


def _holds(values: Sequence[int], before) -> bool:
    size = len(values)
    for parent in range(size):
        for child in (2 * parent + 1, 2 * parent + 2):
            if child < size and not before(values[parent], values[child]):
                return False
    return True


def is_min_heap(values: Sequence[int]) -> bool:
    """Tell whether ``values`` satisfies the min-heap property."""
    return _holds(values, lambda parent, child: parent <= child)


def is_max_heap(values: Sequence[int]) -> bool:
    """Tell whether ``values`` satisfies the max-heap property."""
    return _holds(values, lambda parent, child: parent >= child)