"""Prefix tree of strings."""

from __future__ import annotations

from collections.abc import Iterator

_END = ""


def _words(node: dict, prefix: str) -> Iterator[str]:
    for char in sorted(node):
        if char == _END:
            yield prefix
        else:
            yield from _words(node[char], prefix + char)


class Trie:
    """A set of strings that can be searched by prefix."""

    def __init__(self) -> None:
        self._root: dict = {}

    def insert(self, item: str) -> None:
        node = self._root
        for char in item:
            node = node.setdefault(char, {})
        node[_END] = True

    def delete(self, item: str) -> None:
        """Remove ``item`` if present, pruning branches left empty."""
        path = []
        node = self._root
        for char in item:
            if char not in node:
                return
            path.append((node, char))
            node = node[char]
        if node.pop(_END, None) is None:
            return
        for parent, char in reversed(path):
            if parent[char]:
                break
            del parent[char]

    def find(self, partial: str) -> list[str]:
        """Return every stored word that starts with ``partial``, sorted."""
        node = self._root
        for char in partial:
            if char not in node:
                return []
            node = node[char]
        return list(_words(node, partial))