"""Problems solved with queues and double-ended queues."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def circular_tour(stations: Sequence[tuple[int, int]]) -> int | None:
    """Return the index of a pump from which a full circle can be driven, or ``None``.

    Each station is ``(petrol, distance to the next station)``.
    """
    n = len(stations)
    if n == 0:
        raise ValueError("stations must not be empty")
    que: deque[int] = deque()
    next_pump = 0
    petrol = 0
    rounds = 0
    while len(que) != n:
        while petrol >= 0 and len(que) != n:
            que.append(next_pump)
            fuel, distance = stations[next_pump]
            petrol += fuel - distance
            next_pump = (next_pump + 1) % n
        while petrol < 0 and que:
            fuel, distance = stations[que.popleft()]
            petrol -= fuel - distance
        rounds += 1
        if rounds == n:
            return None
    return que[0] if petrol >= 0 else None


def convert_xy(src: int, dst: int) -> list[int]:
    """Return the values passed turning ``src`` into ``dst`` by doubling or subtracting one.

    A value below ``dst`` is doubled, any other loses one. The number of
    steps is one less than the length of the result.
    """
    if src <= 0 and dst > src:
        raise ValueError(f"{dst} cannot be reached from {src}")
    path = [src]
    value = src
    while value != dst:
        value = value * 2 if value < dst else value - 1
        path.append(value)
    return path


def _check_window(k: int) -> None:
    if k < 1:
        raise ValueError("window size must be positive")


def _window_extremes(values: Sequence[int], k: int, largest: bool) -> list[int]:
    _check_window(k)
    que: deque[int] = deque()
    result: list[int] = []
    for i, value in enumerate(values):
        if que and que[0] <= i - k:
            que.popleft()
        while que and (values[que[-1]] <= value if largest else values[que[-1]] >= value):
            que.pop()
        que.append(i)
        if i >= k - 1:
            result.append(values[que[0]])
    return result


def max_sliding_windows(values: Sequence[int], k: int) -> list[int]:
    """Return the largest value of every window of ``k`` consecutive values."""
    return _window_extremes(values, k, largest=True)


def min_of_max_sliding_windows(values: Sequence[int], k: int) -> int:
    """Return the smallest of the window maxima."""
    maxima = _window_extremes(values, k, largest=True)
    if not maxima:
        raise ValueError("fewer values than the window size")
    return min(maxima)


def max_of_min_sliding_windows(values: Sequence[int], k: int) -> int:
    """Return the largest of the window minima."""
    minima = _window_extremes(values, k, largest=False)
    if not minima:
        raise ValueError("fewer values than the window size")
    return max(minima)


def first_neg_sliding_windows(values: Sequence[int], k: int) -> list[int | None]:
    """Return the first negative value of every window, ``None`` where there is none."""
    _check_window(k)
    que: deque[int] = deque()
    result: list[int | None] = []
    for i, value in enumerate(values):
        if que and que[0] <= i - k:
            que.popleft()
        if value < 0:
            que.append(i)
        if i >= k - 1:
            result.append(values[que[0]] if que else None)
    return result