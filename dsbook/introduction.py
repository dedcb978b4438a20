"""Introductory array and recursion routines."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence

_DIGITS = "0123456789ABCDEF"


def sum_array(data: Sequence[int]) -> int:
    """Return the sum of all values."""
    total = 0
    for value in data:
        total += value
    return total


def sequential_search(data: Sequence[int], value: int) -> int:
    """Return the index of the first occurrence of ``value``, or -1."""
    for index, item in enumerate(data):
        if item == value:
            return index
    return -1


def binary_search(data: Sequence[int], value: int) -> int:
    """Return an index of ``value`` in sorted ``data``, or -1."""
    low, high = 0, len(data) - 1
    while low <= high:
        mid = (low + high) // 2
        if data[mid] == value:
            return mid
        if data[mid] < value:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def binary_search_recursive(data: Sequence[int], low: int, high: int, value: int) -> bool:
    """Tell whether ``value`` lies in ``data[low:high + 1]``, which is sorted."""
    if low > high:
        return False
    mid = (low + high) // 2
    if data[mid] == value:
        return True
    if data[mid] < value:
        return binary_search_recursive(data, mid + 1, high, value)
    return binary_search_recursive(data, low, mid - 1, value)


def reverse_array(data: MutableSequence[int], start: int = 0, end: int | None = None) -> None:
    """Reverse ``data[start..end]`` (inclusive) in place."""
    if end is None:
        end = len(data) - 1
    while start < end:
        data[start], data[end] = data[end], data[start]
        start += 1
        end -= 1


def rotate_array(data: MutableSequence[int], k: int) -> None:
    """Rotate ``data`` left by ``k`` positions in place."""
    n = len(data)
    reverse_array(data, 0, k - 1)
    reverse_array(data, k, n - 1)
    reverse_array(data, 0, n - 1)


def max_sub_array_sum(data: Sequence[int]) -> int:
    """Return the largest sum of a contiguous run, never below zero."""
    max_so_far = max_ending_here = 0
    for value in data:
        max_ending_here = max(max_ending_here + value, 0)
        max_so_far = max(max_so_far, max_ending_here)
    return max_so_far


def wave_array(data: MutableSequence[int]) -> None:
    """Arrange ``data`` in place as a wave by sorting and swapping pairs."""
    data[:] = sorted(data)
    for i in range(0, len(data) - 1, 2):
        data[i], data[i + 1] = data[i + 1], data[i]


def wave_array2(data: MutableSequence[int]) -> None:
    """Arrange ``data`` in place so odd positions are not above their neighbours."""
    size = len(data)
    for i in range(1, size, 2):
        if data[i] > data[i - 1]:
            data[i], data[i - 1] = data[i - 1], data[i]
        if i + 1 < size and data[i] > data[i + 1]:
            data[i], data[i + 1] = data[i + 1], data[i]


def index_array(data: MutableSequence[int]) -> None:
    """Place each value v at index v in place; -1 marks empty slots."""
    for i in range(len(data)):
        curr = i
        value = -1
        while data[curr] != -1 and data[curr] != curr:
            moved = data[curr]
            data[curr] = value
            value = curr = moved
        if value != -1:
            data[curr] = value


def index_array2(data: MutableSequence[int]) -> None:
    """Place each value v at index v in place by swapping; -1 marks empty slots."""
    for i in range(len(data)):
        while data[i] != -1 and data[i] != i:
            target = data[i]
            data[i], data[target] = data[target], target


def sort_1_to_n(data: MutableSequence[int]) -> None:
    """Sort a permutation of 1..n in place by following cycles."""
    size = len(data)
    for i in range(size):
        curr = i
        value = -1
        while 0 <= curr < size and data[curr] != curr + 1:
            following = data[curr]
            data[curr] = value
            value = following
            curr = following - 1


def sort_1_to_n2(data: MutableSequence[int]) -> None:
    """Sort a permutation of 1..n in place by swapping."""
    for i in range(len(data)):
        while data[i] != i + 1 and data[i] > 1:
            target = data[i]
            data[i], data[target - 1] = data[target - 1], target


def smallest_positive_missing_number(data: Sequence[int]) -> int:
    """Return the smallest missing value in 1..n by scanning, or -1."""
    for candidate in range(1, len(data) + 1):
        if candidate not in data:
            return candidate
    return -1


def smallest_positive_missing_number2(data: Sequence[int]) -> int:
    """Return the smallest missing value in 1..n using a set, or -1."""
    seen = set(data)
    for candidate in range(1, len(data) + 1):
        if candidate not in seen:
            return candidate
    return -1


def smallest_positive_missing_number3(data: Sequence[int]) -> int:
    """Return the smallest missing value in 1..n using an auxiliary list, or -1."""
    size = len(data)
    aux = [-1] * size
    for value in data:
        if 0 < value <= size:
            aux[value - 1] = value
    for index, value in enumerate(aux):
        if value != index + 1:
            return index + 1
    return -1


def smallest_positive_missing_number4(data: Sequence[int]) -> int:
    """Return the smallest missing value in 1..n by placing values, or -1."""
    work = list(data)
    size = len(work)
    for i in range(size):
        while work[i] != i + 1 and 0 < work[i] <= size:
            target = work[i]
            if work[target - 1] == target:
                break
            work[i], work[target - 1] = work[target - 1], target
    for index, value in enumerate(work):
        if value != index + 1:
            return index + 1
    return -1


def max_min_array(data: MutableSequence[int]) -> None:
    """Rearrange sorted ``data`` in place as max, min, second max, second min..."""
    aux = list(data)
    start, stop = 0, len(aux) - 1
    for i in range(len(aux)):
        if i % 2 == 0:
            data[i] = aux[stop]
            stop -= 1
        else:
            data[i] = aux[start]
            start += 1


def max_min_array2(data: MutableSequence[int]) -> None:
    """Same rearrangement as :func:`max_min_array`, by repeated reversal."""
    size = len(data)
    for i in range(size - 1):
        reverse_array(data, i, size - 1)


def max_circular_sum(data: Sequence[int]) -> int:
    """Return the maximum of sum(i * data[i]) over all rotations."""
    size = len(data)
    sum_all = sum(data)
    curr = sum(i * value for i, value in enumerate(data))
    best = curr
    for i in range(1, size):
        curr = curr + sum_all - size * data[size - i]
        best = max(best, curr)
    return best


def array_index_max_diff(data: Sequence[int]) -> int:
    """Return the largest j - i with data[j] > data[i], or -1."""
    size = len(data)
    max_diff = -1
    for i in range(size):
        for j in range(size - 1, i, -1):
            if data[j] > data[i]:
                max_diff = max(max_diff, j - i)
                break
    return max_diff


def array_index_max_diff2(data: Sequence[int]) -> int:
    """Return the largest j - i with data[j] > data[i], or -1, in linear time."""
    if not data:
        raise ValueError("data must not be empty")
    size = len(data)
    left_min = list(data)
    for i in range(1, size):
        left_min[i] = min(left_min[i - 1], data[i])
    right_max = list(data)
    for i in range(size - 2, -1, -1):
        right_max[i] = max(right_max[i + 1], data[i])
    i = j = 0
    max_diff = -1
    while i < size and j < size:
        if left_min[i] < right_max[j]:
            max_diff = max(max_diff, j - i)
            j += 1
        else:
            i += 1
    return max_diff


def max_path_sum(first: Sequence[int], second: Sequence[int]) -> int:
    """Return the largest sum of a path through two sorted lists, switching at common values."""
    i = j = 0
    result = sum1 = sum2 = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            sum1 += first[i]
            i += 1
        elif first[i] > second[j]:
            sum2 += second[j]
            j += 1
        else:
            result += max(sum1, sum2) + first[i]
            sum1 = sum2 = 0
            i += 1
            j += 1
    sum1 += sum(first[i:])
    sum2 += sum(second[j:])
    return result + max(sum1, sum2)


def factorial(n: int) -> int:
    """Return n!, with 1 for any n <= 1."""
    if n <= 1:
        return 1
    return n * factorial(n - 1)


def format_int(number: int, base: int = 10) -> str:
    """Return the digits of a non-negative ``number`` in ``base`` (2 to 16)."""
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"base must be between 2 and {len(_DIGITS)}")
    if number < 0:
        raise ValueError("number must not be negative")
    digit = _DIGITS[number % base]
    rest = number // base
    if rest:
        return format_int(rest, base) + digit
    return digit


def tower_of_hanoi(
    num: int, src: str = "A", dst: str = "C", temp: str = "B"
) -> Iterator[tuple[int, str, str]]:
    """Yield the moves ``(disk, from_peg, to_peg)`` that carry ``num`` disks."""
    if num < 1:
        return
    yield from tower_of_hanoi(num - 1, src, temp, dst)
    yield (num, src, dst)
    yield from tower_of_hanoi(num - 1, temp, dst, src)


def gcd(m: int, n: int) -> int:
    """Return the greatest common divisor of two positive integers."""
    if m < n:
        return gcd(n, m)
    if m % n == 0:
        return n
    return gcd(n, m % n)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(0) == 0."""
    if n <= 1:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def permutations(data: Sequence[int]) -> Iterator[list[int]]:
    """Yield every ordering of ``data``, produced by recursive swapping."""
    work = list(data)

    def _permute(i: int) -> Iterator[list[int]]:
        if i == len(work):
            yield list(work)
            return
        for j in range(i, len(work)):
            work[i], work[j] = work[j], work[i]
            yield from _permute(i + 1)
            work[i], work[j] = work[j], work[i]

    yield from _permute(0)