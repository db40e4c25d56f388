"""Hash map with separate chaining and automatic resizing."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class HashMap(Generic[K, V]):
    """A key-value map built on buckets of ``[key, value]`` pairs."""

    def __init__(self) -> None:
        self._buckets: list[list[list]] = [[] for _ in range(8)]
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def _bucket(self, key: object) -> list[list]:
        return self._buckets[hash(key) % len(self._buckets)]

    def get(self, key: K) -> Optional[V]:
        """Return the value for ``key``, or None if it is absent."""
        return next((v for k, v in self._bucket(key) if k == key), None)

    def set(self, key: K, value: V) -> None:
        bucket = self._bucket(key)
        for entry in bucket:
            if entry[0] == key:
                entry[1] = value
                return
        bucket.append([key, value])
        self._length += 1
        if self._length > 0.75 * len(self._buckets):
            entries = [entry for b in self._buckets for entry in b]
            self._buckets = [[] for _ in range(len(self._buckets) * 2)]
            for entry in entries:
                self._bucket(entry[0]).append(entry)

    def delete(self, key: K) -> bool:
        """Remove ``key``; return whether it was present."""
        bucket = self._bucket(key)
        for position, (k, _) in enumerate(bucket):
            if k == key:
                del bucket[position]
                self._length -= 1
                return True
        return False