"""List implementations sharing one interface: array-backed and linked."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


def _check_index(idx: int, size: int) -> None:
    if not 0 <= idx < size:
        raise IndexError(f"index {idx} out of range for length {size}")


def _check_insert_index(idx: int, size: int) -> None:
    if not 0 <= idx <= size:
        raise IndexError(f"insert index {idx} out of range for length {size}")


class List(ABC, Generic[T]):
    """The operations every list offers."""

    @abstractmethod
    def __len__(self) -> int: ...

    @abstractmethod
    def __iter__(self) -> Iterator[T]: ...

    @abstractmethod
    def prepend(self, item: T) -> None: ...

    @abstractmethod
    def insert_at(self, item: T, idx: int) -> None: ...

    @abstractmethod
    def append(self, item: T) -> None: ...

    @abstractmethod
    def remove(self, item: T) -> T:
        """Remove the first occurrence of ``item``; raise ValueError if absent."""

    @abstractmethod
    def get(self, idx: int) -> T:
        """Return the item at ``idx``; raise IndexError if out of range."""

    @abstractmethod
    def remove_at(self, idx: int) -> T:
        """Remove and return the item at ``idx``; raise IndexError if out of range."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class ArrayList(List[T]):
    """A list stored in a fixed block of slots that doubles when full."""

    def __init__(self, capacity: int = 8) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._slots: list[Optional[T]] = [None] * capacity
        self._length = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        return iter(self._slots[: self._length])  # type: ignore[arg-type]

    def _ensure_room(self) -> None:
        if self._length == len(self._slots):
            self._slots.extend([None] * max(1, len(self._slots)))

    def prepend(self, item: T) -> None:
        self.insert_at(item, 0)

    def insert_at(self, item: T, idx: int) -> None:
        _check_insert_index(idx, self._length)
        self._ensure_room()
        self._slots[idx + 1 : self._length + 1] = self._slots[idx : self._length]
        self._slots[idx] = item
        self._length += 1

    def append(self, item: T) -> None:
        self.insert_at(item, self._length)

    def remove(self, item: T) -> T:
        try:
            idx = self._slots.index(item, 0, self._length)
        except ValueError:
            raise ValueError(f"{item!r} is not in the list") from None
        return self.remove_at(idx)

    def get(self, idx: int) -> T:
        _check_index(idx, self._length)
        return self._slots[idx]  # type: ignore[return-value]

    def remove_at(self, idx: int) -> T:
        _check_index(idx, self._length)
        removed = self._slots[idx]
        self._slots[idx : self._length - 1] = self._slots[idx + 1 : self._length]
        self._length -= 1
        self._slots[self._length] = None
        return removed  # type: ignore[return-value]


@dataclass(eq=False)
class _SinglyNode(Generic[T]):
    value: T
    next: Optional[_SinglyNode[T]] = None


class SinglyLinkedList(List[T]):
    """A list of nodes linked forward, with head and tail references."""

    def __init__(self) -> None:
        self._head: Optional[_SinglyNode[T]] = None
        self._tail: Optional[_SinglyNode[T]] = None
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def _node_at(self, idx: int) -> _SinglyNode[T]:
        node = self._head
        for _ in range(idx):
            node = node.next  # type: ignore[union-attr]
        return node  # type: ignore[return-value]

    def prepend(self, item: T) -> None:
        self._head = _SinglyNode(item, self._head)
        if self._tail is None:
            self._tail = self._head
        self._length += 1

    def insert_at(self, item: T, idx: int) -> None:
        _check_insert_index(idx, self._length)
        if idx == 0:
            self.prepend(item)
        elif idx == self._length:
            self.append(item)
        else:
            previous = self._node_at(idx - 1)
            previous.next = _SinglyNode(item, previous.next)
            self._length += 1

    def append(self, item: T) -> None:
        node = _SinglyNode(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def _unlink_after(self, previous: Optional[_SinglyNode[T]]) -> T:
        removed = self._head if previous is None else previous.next
        assert removed is not None
        if previous is None:
            self._head = removed.next
        else:
            previous.next = removed.next
        if removed is self._tail:
            self._tail = previous
        removed.next = None
        self._length -= 1
        return removed.value

    def remove(self, item: T) -> T:
        previous: Optional[_SinglyNode[T]] = None
        node = self._head
        while node is not None:
            if node.value == item:
                return self._unlink_after(previous)
            previous, node = node, node.next
        raise ValueError(f"{item!r} is not in the list")

    def get(self, idx: int) -> T:
        _check_index(idx, self._length)
        return self._node_at(idx).value

    def remove_at(self, idx: int) -> T:
        _check_index(idx, self._length)
        previous = None if idx == 0 else self._node_at(idx - 1)
        return self._unlink_after(previous)


@dataclass(eq=False)
class _DoublyNode(Generic[T]):
    value: T
    prev: Optional[_DoublyNode[T]] = None
    next: Optional[_DoublyNode[T]] = None


class DoublyLinkedList(List[T]):
    """A list of nodes linked in both directions."""

    def __init__(self) -> None:
        self._head: Optional[_DoublyNode[T]] = None
        self._tail: Optional[_DoublyNode[T]] = None
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def _node_at(self, idx: int) -> _DoublyNode[T]:
        if idx < self._length // 2:
            node = self._head
            for _ in range(idx):
                node = node.next  # type: ignore[union-attr]
        else:
            node = self._tail
            for _ in range(self._length - 1 - idx):
                node = node.prev  # type: ignore[union-attr]
        return node  # type: ignore[return-value]

    def prepend(self, item: T) -> None:
        node = _DoublyNode(item, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._length += 1

    def insert_at(self, item: T, idx: int) -> None:
        _check_insert_index(idx, self._length)
        if idx == 0:
            self.prepend(item)
        elif idx == self._length:
            self.append(item)
        else:
            following = self._node_at(idx)
            node = _DoublyNode(item, prev=following.prev, next=following)
            following.prev.next = node  # type: ignore[union-attr]
            following.prev = node
            self._length += 1

    def append(self, item: T) -> None:
        node = _DoublyNode(item, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def _unlink(self, node: _DoublyNode[T]) -> T:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._length -= 1
        return node.value

    def remove(self, item: T) -> T:
        node = self._head
        while node is not None:
            if node.value == item:
                return self._unlink(node)
            node = node.next
        raise ValueError(f"{item!r} is not in the list")

    def get(self, idx: int) -> T:
        _check_index(idx, self._length)
        return self._node_at(idx).value

    def remove_at(self, idx: int) -> T:
        _check_index(idx, self._length)
        return self._unlink(self._node_at(idx))