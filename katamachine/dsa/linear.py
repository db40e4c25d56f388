"""Queue, stack and ring buffer."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Node(Generic[T]):
    value: T
    link: Optional[_Node[T]] = None


class Queue(Generic[T]):
    """First-in, first-out queue of linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def enqueue(self, item: T) -> None:
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.link = node
        self._tail = node
        self._length += 1

    def deque(self) -> T:
        """Remove and return the oldest item; raise IndexError if empty."""
        if self._head is None:
            raise IndexError("deque from an empty queue")
        removed = self._head
        self._head = removed.link
        if self._head is None:
            self._tail = None
        removed.link = None
        self._length -= 1
        return removed.value

    def peek(self) -> T:
        """Return the oldest item without removing it."""
        if self._head is None:
            raise IndexError("peek at an empty queue")
        return self._head.value


class Stack(Generic[T]):
    """Last-in, first-out stack of linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def push(self, item: T) -> None:
        self._head = _Node(item, self._head)
        self._length += 1

    def pop(self) -> T:
        """Remove and return the newest item; raise IndexError if empty."""
        if self._head is None:
            raise IndexError("pop from an empty stack")
        removed = self._head
        self._head = removed.link
        removed.link = None
        self._length -= 1
        return removed.value

    def peek(self) -> T:
        """Return the newest item without removing it."""
        if self._head is None:
            raise IndexError("peek at an empty stack")
        return self._head.value


class RingBuffer(Generic[T]):
    """A growable circular buffer: push at the back, pop from the front."""

    _INITIAL_CAPACITY = 4

    def __init__(self) -> None:
        self._slots: list[Optional[T]] = [None] * self._INITIAL_CAPACITY
        self._head = 0
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        capacity = len(self._slots)
        for offset in range(self._length):
            yield self._slots[(self._head + offset) % capacity]  # type: ignore[misc]

    def _grow(self) -> None:
        items: list[Optional[T]] = list(self)
        self._slots = items + [None] * len(items)
        self._head = 0

    def push(self, item: T) -> None:
        if self._length == len(self._slots):
            self._grow()
        self._slots[(self._head + self._length) % len(self._slots)] = item
        self._length += 1

    def get(self, idx: int) -> T:
        """Return the item ``idx`` places from the front."""
        if not 0 <= idx < self._length:
            raise IndexError(f"index {idx} out of range for length {self._length}")
        return self._slots[(self._head + idx) % len(self._slots)]  # type: ignore[return-value]

    def pop(self) -> T:
        """Remove and return the front item; raise IndexError if empty."""
        if self._length == 0:
            raise IndexError("pop from an empty ring buffer")
        item = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % len(self._slots)
        self._length -= 1
        return item  # type: ignore[return-value]