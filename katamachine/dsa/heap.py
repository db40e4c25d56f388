"""Binary min-heap."""

from __future__ import annotations

import heapq


class MinHeap:
    """A min-heap of integers; ``delete`` removes the smallest value."""

    def __init__(self) -> None:
        self._data: list[int] = []

    def __len__(self) -> int:
        return len(self._data)

    def insert(self, value: int) -> None:
        heapq.heappush(self._data, value)

    def delete(self) -> int:
        """Remove and return the smallest value; raise IndexError if empty."""
        if not self._data:
            raise IndexError("delete from an empty heap")
        return heapq.heappop(self._data)