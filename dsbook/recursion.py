"""Backtracking and recursion examples."""

from __future__ import annotations

from collections.abc import Iterator


def n_queens(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement of ``n`` queens, one column index per row."""
    queens = [0] * n

    def feasible(k: int) -> bool:
        return all(
            queens[k] != queens[i] and abs(queens[i] - queens[k]) != abs(i - k)
            for i in range(k)
        )

    def place(k: int) -> Iterator[tuple[int, ...]]:
        if k == n:
            yield tuple(queens)
            return
        for column in range(n):
            queens[k] = column
            if feasible(k):
                yield from place(k + 1)

    yield from place(0)


def _hanoi(num: int, src: str, dst: str, temp: str) -> Iterator[tuple[int, str, str]]:
    if num < 1:
        return
    yield from _hanoi(num - 1, src, temp, dst)
    yield (num, src, dst)
    yield from _hanoi(num - 1, temp, dst, src)


def towers_of_hanoi(num: int) -> Iterator[tuple[int, str, str]]:
    """Yield the moves ``(disk, from_peg, to_peg)`` from peg A to peg C."""
    return _hanoi(num, "A", "C", "B")


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number counting from 1, with fibonacci(1) == 0."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        return 0
    if n == 2:
        return 1
    return fibonacci(n - 1) + fibonacci(n - 2)


def fibonacci_iterative(n: int) -> int:
    """Iterative form of :func:`fibonacci`."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        return 0
    first, second = 0, 1
    for _ in range(2, n):
        first, second = second, first + second
    return second


def is_prime(n: int) -> bool:
    """Tell whether ``n`` has no divisor between 2 and its square root; 1 counts."""
    if n < 1:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True