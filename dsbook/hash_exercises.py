"""Small problems solved with hash sets and counting maps."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence

from dsbook.count_map import CountMap


def is_anagram(first: str, second: str) -> bool:
    """Tell whether the two strings hold the same characters with the same counts."""
    if len(first) != len(second):
        return False
    counts = CountMap()
    for ch in first:
        counts.add(ch)
    for ch in second:
        counts.remove(ch)
    return len(counts) == 0


def remove_duplicate(text: str) -> str:
    """Return ``text`` keeping only the first occurrence of each character."""
    seen: set[str] = set()
    kept: list[str] = []
    for ch in text:
        if ch not in seen:
            seen.add(ch)
            kept.append(ch)
    return "".join(kept)


def find_missing(values: Iterable[int], start: int, end: int) -> int | None:
    """Return the first number in ``start..end`` absent from ``values``, or ``None``."""
    present = set(values)
    return next((n for n in range(start, end + 1) if n not in present), None)


def repeating(values: Iterable[Hashable]) -> list[Hashable]:
    """Return every value that repeats an earlier one, in the order seen."""
    seen: set[Hashable] = set()
    repeats: list[Hashable] = []
    for value in values:
        if value in seen:
            repeats.append(value)
        else:
            seen.add(value)
    return repeats


def first_repeating(values: Sequence[Hashable]) -> Hashable | None:
    """Return the earliest value that occurs again later, or ``None``."""
    counts = CountMap()
    for value in values:
        counts.add(value)
    for value in values:
        counts.remove(value)
        if value in counts:
            return value
    return None


def horner_hash(key: str | bytes, table_size: int) -> int:
    """Hash ``key`` by Horner's rule with multiplier 32, reduced modulo ``table_size``."""
    if table_size < 1:
        raise ValueError("table_size must be positive")
    codes = key if isinstance(key, bytes) else (ord(ch) for ch in key)
    h = 0
    for code in codes:
        h = (32 * h + code) % table_size
    return h