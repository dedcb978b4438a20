"""Queues and stacks built from arrays, nodes, stacks and deques."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class QueueEmptyError(IndexError):
    """Raised when taking from an empty queue."""


class QueueFullError(OverflowError):
    """Raised when adding to a full queue."""


class StackEmptyError(IndexError):
    """Raised when popping from an empty stack."""


class StackFullError(OverflowError):
    """Raised when pushing onto a full stack."""


class ArrayQueue:
    """A fixed-capacity queue kept in a circular array."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._data: list[int] = [0] * capacity
        self._front = 0
        self._length = 0

    def add(self, value: int) -> None:
        """Append ``value`` at the back."""
        capacity = len(self._data)
        if self._length >= capacity:
            raise QueueFullError("queue is full")
        self._data[(self._front + self._length) % capacity] = value
        self._length += 1

    def remove(self) -> int:
        """Remove and return the front value."""
        if self._length == 0:
            raise QueueEmptyError("queue is empty")
        value = self._data[self._front]
        self._front = (self._front + 1) % len(self._data)
        self._length -= 1
        return value

    def __len__(self) -> int:
        return self._length


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: int) -> None:
        self.value = value
        self.next: _Node | None = None


class LinkedQueue:
    """An unbounded queue of linked nodes."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._length = 0

    def add(self, value: int) -> None:
        """Append ``value`` at the back."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def remove(self) -> int:
        """Remove and return the front value."""
        if self._head is None:
            raise QueueEmptyError("queue is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._length -= 1
        return node.value

    def front(self) -> int:
        """Return the front value without removing it."""
        if self._head is None:
            raise QueueEmptyError("queue is empty")
        return self._head.value

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next


class StackQueue:
    """A queue made of two stacks: one for arrivals, one for departures."""

    def __init__(self) -> None:
        self._incoming: list[int] = []
        self._outgoing: list[int] = []

    def add(self, value: int) -> None:
        """Append ``value`` at the back."""
        self._incoming.append(value)

    def remove(self) -> int:
        """Remove and return the front value."""
        if not self._outgoing:
            while self._incoming:
                self._outgoing.append(self._incoming.pop())
        if not self._outgoing:
            raise QueueEmptyError("queue is empty")
        return self._outgoing.pop()

    def __len__(self) -> int:
        return len(self._incoming) + len(self._outgoing)


class TwoStack:
    """Two stacks sharing one array, growing towards each other."""

    def __init__(self, max_size: int = 5000) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self._max_size = max_size
        self._data: list[int] = [0] * max_size
        self._top1 = -1
        self._top2 = max_size

    def push1(self, value: int) -> None:
        """Push onto the first stack."""
        if self._top1 >= self._top2 - 1:
            raise StackFullError("stack is full")
        self._top1 += 1
        self._data[self._top1] = value

    def push2(self, value: int) -> None:
        """Push onto the second stack."""
        if self._top1 >= self._top2 - 1:
            raise StackFullError("stack is full")
        self._top2 -= 1
        self._data[self._top2] = value

    def pop1(self) -> int:
        """Pop from the first stack."""
        if self._top1 < 0:
            raise StackEmptyError("stack is empty")
        value = self._data[self._top1]
        self._top1 -= 1
        return value

    def pop2(self) -> int:
        """Pop from the second stack."""
        if self._top2 >= self._max_size:
            raise StackEmptyError("stack is empty")
        value = self._data[self._top2]
        self._top2 += 1
        return value


class DequeQueue(Generic[T]):
    """A first-in first-out queue over a deque."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def enqueue(self, value: T) -> None:
        """Append ``value`` at the back."""
        self._items.append(value)

    def dequeue(self) -> T:
        """Remove and return the front value."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def peek(self) -> T:
        """Return the front value without removing it."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)


class DequeStack(Generic[T]):
    """A last-in first-out stack over a deque."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def push(self, value: T) -> None:
        """Push ``value`` on top."""
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def top(self) -> T:
        """Return the top value without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)