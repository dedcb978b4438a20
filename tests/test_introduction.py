from collections import Counter

import pytest

from dsbook.introduction import (
    array_index_max_diff,
    array_index_max_diff2,
    binary_search,
    binary_search_recursive,
    factorial,
    fibonacci,
    format_int,
    gcd,
    index_array,
    index_array2,
    max_circular_sum,
    max_min_array,
    max_min_array2,
    max_path_sum,
    max_sub_array_sum,
    permutations,
    reverse_array,
    rotate_array,
    sequential_search,
    smallest_positive_missing_number,
    smallest_positive_missing_number2,
    smallest_positive_missing_number3,
    smallest_positive_missing_number4,
    sort_1_to_n,
    sort_1_to_n2,
    sum_array,
    tower_of_hanoi,
    wave_array,
    wave_array2,
)


def test_sum_array():
    assert sum_array([1, 2, 3, 4, 5, 6, 7, 8, 9]) == 45


def test_searches():
    data = [1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert sequential_search(data, 7) == 6
    assert binary_search(data, 7) == 6
    assert sequential_search(data, 42) == -1
    assert binary_search(data, 42) == -1


def test_binary_search_recursive():
    data = [1, 2, 3, 4, 5, 6, 7, 9]
    assert binary_search_recursive(data, 0, len(data) - 1, 6) is True
    assert binary_search_recursive(data, 0, len(data) - 1, 16) is False


def test_binary_search_agrees_with_sequential():
    data = list(range(0, 40, 3))
    for value in data:
        assert binary_search(data, value) == sequential_search(data, value)


def test_reverse_array_twice_is_identity():
    data = [5, 3, 8, 1, 9]
    reverse_array(data)
    assert data == [9, 1, 8, 3, 5]
    reverse_array(data)
    assert data == [5, 3, 8, 1, 9]


def test_rotate_array():
    data = [1, 2, 3, 4, 5, 6]
    rotate_array(data, 2)
    assert data == [3, 4, 5, 6, 1, 2]
    rotate_array(data, 4)
    assert data == [1, 2, 3, 4, 5, 6]


def test_max_sub_array_sum():
    assert max_sub_array_sum([1, -2, 3, 4, -4, 6, -4, 8, 2]) == 15
    assert max_sub_array_sum([-1, -2]) == 0


def test_wave_arrays():
    data = [8, 1, 2, 3, 4, 5, 6, 4, 2]
    wave_array(data)
    assert data == [2, 1, 3, 2, 4, 4, 6, 5, 8]
    data2 = [8, 1, 2, 3, 4, 5, 6, 4, 2]
    wave_array2(data2)
    assert data2 == [8, 1, 3, 2, 5, 4, 6, 2, 4]


@pytest.mark.parametrize("func", [index_array, index_array2])
def test_index_array(func):
    original = [8, -1, 6, 1, 9, 3, 2, 7, 4, -1]
    data = list(original)
    func(data)
    assert Counter(data) == Counter(original)
    for index, value in enumerate(data):
        assert value in (index, -1)


@pytest.mark.parametrize("func", [sort_1_to_n, sort_1_to_n2])
def test_sort_1_to_n(func):
    data = [8, 5, 6, 1, 9, 3, 2, 7, 4, 10]
    func(data)
    assert data == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


@pytest.mark.parametrize(
    "func",
    [
        smallest_positive_missing_number,
        smallest_positive_missing_number2,
        smallest_positive_missing_number3,
        smallest_positive_missing_number4,
    ],
)
def test_smallest_positive_missing(func):
    data = [8, 5, 6, 1, 9, 11, 2, 7, 4, 10]
    assert func(data) == 3
    assert data == [8, 5, 6, 1, 9, 11, 2, 7, 4, 10]
    assert func([3, 1, 2]) == -1


@pytest.mark.parametrize("func", [max_min_array, max_min_array2])
def test_max_min_array(func):
    data = [1, 2, 3, 4, 5, 6, 7]
    func(data)
    assert data == [7, 1, 6, 2, 5, 3, 4]


def test_max_circular_sum():
    assert max_circular_sum([10, 9, 8, 7, 6, 5, 4, 3, 2, 1]) == 290


@pytest.mark.parametrize("func", [array_index_max_diff, array_index_max_diff2])
def test_array_index_max_diff(func):
    assert func([33, 9, 10, 3, 2, 60, 30, 33, 1]) == 6
    assert func([5, 4, 3]) == -1


def test_array_index_max_diff2_empty():
    with pytest.raises(ValueError):
        array_index_max_diff2([])


def test_max_path_sum():
    first = [12, 13, 18, 20, 22, 26, 70]
    second = [11, 15, 18, 19, 20, 26, 30, 31]
    assert max_path_sum(first, second) == 201
    assert max_path_sum(first, second) == max_path_sum(second, first)


def test_factorial():
    assert factorial(0) == 1
    assert factorial(1) == 1
    for n in range(2, 10):
        assert factorial(n) == n * factorial(n - 1)


def test_format_int():
    assert format_int(255, 16) == "FF"
    for number in (0, 7, 100, 12345):
        assert int(format_int(number, 2), 2) == number
        assert format_int(number) == str(number)


def test_format_int_errors():
    with pytest.raises(ValueError):
        format_int(-1)
    with pytest.raises(ValueError):
        format_int(10, 17)


def test_tower_of_hanoi():
    moves = list(tower_of_hanoi(3))
    assert moves == [
        (1, "A", "C"),
        (2, "A", "B"),
        (1, "C", "B"),
        (3, "A", "C"),
        (1, "B", "A"),
        (2, "B", "C"),
        (1, "A", "C"),
    ]
    assert len(list(tower_of_hanoi(6))) == 2**6 - 1
    assert list(tower_of_hanoi(0)) == []


def test_gcd():
    for m, n in [(12, 18), (7, 13), (100, 75)]:
        g = gcd(m, n)
        assert m % g == 0 and n % g == 0
        assert gcd(n, m) == g


def test_gcd_zero():
    with pytest.raises(ZeroDivisionError):
        gcd(5, 0)


def test_fibonacci():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1
    for n in range(2, 15):
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_permutations():
    assert list(permutations([0, 1, 2])) == [
        [0, 1, 2],
        [0, 2, 1],
        [1, 0, 2],
        [1, 2, 0],
        [2, 1, 0],
        [2, 0, 1],
    ]
    perms = list(permutations([1, 2, 3, 4]))
    assert len({tuple(p) for p in perms}) == factorial(4)