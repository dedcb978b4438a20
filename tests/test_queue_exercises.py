import pytest

from dsbook.queue_exercises import (
    circular_tour,
    convert_xy,
    first_neg_sliding_windows,
    max_of_min_sliding_windows,
    max_sliding_windows,
    min_of_max_sliding_windows,
)

ARR = [11, 2, 75, 92, 59, 90, 55]


def test_circular_tour_source_example():
    assert circular_tour([(8, 6), (1, 4), (7, 6)]) == 2


def test_circular_tour_impossible():
    assert circular_tour([(1, 5), (1, 5)]) is None


def test_circular_tour_empty():
    with pytest.raises(ValueError):
        circular_tour([])


def test_convert_xy_source_example():
    path = convert_xy(2, 7)
    assert path == [2, 4, 8, 7]
    assert len(path) - 1 == 3


def test_convert_xy_invariants():
    path = convert_xy(3, 20)
    assert path[0] == 3
    assert path[-1] == 20
    for a, b in zip(path, path[1:]):
        assert b == a * 2 or b == a - 1


def test_convert_xy_unreachable():
    with pytest.raises(ValueError):
        convert_xy(0, 5)


def test_max_sliding_windows_source_example():
    assert max_sliding_windows(ARR, 3) == [75, 92, 92, 92, 90]


def test_min_of_max_source_example():
    assert min_of_max_sliding_windows(ARR, 3) == 75


def test_max_of_min_source_example():
    assert max_of_min_sliding_windows(ARR, 3) == 59


def test_first_negative_source_example():
    values = [3, -2, -6, 10, -14, 50, 14, 21]
    assert first_neg_sliding_windows(values, 3) == [-2, -2, -6, -14, -14, None]


def test_window_matches_max_of_slices():
    values = [4, 1, 7, 3, 3, 9, 0, 2]
    for k in range(1, len(values) + 1):
        expected = [max(values[i:i + k]) for i in range(len(values) - k + 1)]
        assert max_sliding_windows(values, k) == expected


def test_bad_window_size():
    with pytest.raises(ValueError):
        max_sliding_windows(ARR, 0)
    with pytest.raises(ValueError):
        min_of_max_sliding_windows([1, 2], 3)