import pytest

from dsbook.heap import Heap, HeapEmptyError, heap_sort, is_max_heap, is_min_heap


def _drain(heap):
    out = []
    while len(heap):
        out.append(heap.remove())
    return out


def test_min_heap_by_adding():
    heap = Heap(is_min=True)
    for value in (1, 9, 6, 7):
        heap.add(value)
    assert heap.to_list() == [1, 7, 6, 9]
    assert _drain(heap) == [1, 6, 7, 9]


def test_min_heap_built_from_values():
    heap = Heap([1, 0, 2, 4, 5, 3], True)
    assert heap.to_list() == [0, 1, 2, 4, 5, 3]
    assert heap.peek() == 0
    assert _drain(heap) == [0, 1, 2, 3, 4, 5]


def test_max_heap_built_from_values():
    heap = Heap([1, 0, 2, 4, 5, 3], False)
    assert is_max_heap(heap.to_list())
    assert heap.peek() == 5
    assert _drain(heap) == [5, 4, 3, 2, 1, 0]


def test_heap_property_kept_after_each_removal():
    values = [1, 9, 6, 7, 8, -1, 2, 4, 5, 3]
    heap = Heap(values, True)
    while len(heap):
        assert is_min_heap(heap.to_list())
        heap.remove()
    assert heap.to_list() == []


def test_heap_sort_increasing():
    values = [1, 9, 6, 7, 8, -1, 2, 4, 5, 3]
    heap_sort(values, True)
    assert values == [-1, 1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_heap_sort_decreasing():
    values = [1, 9, 6, 7, 8, -1, 2, 4, 5, 3]
    heap_sort(values, False)
    assert values == sorted(values, reverse=True)


def test_empty_heap_raises():
    heap = Heap()
    with pytest.raises(HeapEmptyError):
        heap.remove()
    with pytest.raises(HeapEmptyError):
        heap.peek()


def test_heap_checks():
    values = [8, 7, 6, 5, 7, 5, 2, 1]
    assert is_max_heap(values) is True
    assert is_min_heap(values) is False
    assert is_min_heap(sorted(values)) is True
    assert is_min_heap([]) and is_max_heap([])