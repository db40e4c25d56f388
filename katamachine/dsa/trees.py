"""Searches and traversals over binary trees."""

from __future__ import annotations

from collections import deque
from typing import Optional, TypeVar

from katamachine.dsa.fixtures import BinaryNode

T = TypeVar("T")


def bfs(head: BinaryNode[T], needle: T) -> bool:
    """Return whether ``needle`` is in the tree, visiting level by level."""
    queue = deque([head])
    while queue:
        node = queue.popleft()
        if node is None:
            continue
        if node.value == needle:
            return True
        queue.extend((node.left, node.right))
    return False


def in_order_search(head: Optional[BinaryNode[T]]) -> list[T]:
    """Return the values in left, node, right order."""
    if head is None:
        return []
    return [*in_order_search(head.left), head.value, *in_order_search(head.right)]


def pre_order_search(head: Optional[BinaryNode[T]]) -> list[T]:
    """Return the values in node, left, right order."""
    if head is None:
        return []
    return [head.value, *pre_order_search(head.left), *pre_order_search(head.right)]


def post_order_search(head: Optional[BinaryNode[T]]) -> list[T]:
    """Return the values in left, right, node order."""
    if head is None:
        return []
    return [*post_order_search(head.left), *post_order_search(head.right), head.value]


def compare(a: Optional[BinaryNode[T]], b: Optional[BinaryNode[T]]) -> bool:
    """Return whether two trees have the same shape and values."""
    if a is None or b is None:
        return a is b
    return a.value == b.value and compare(a.left, b.left) and compare(a.right, b.right)


def dfs(head: Optional[BinaryNode[T]], needle: T) -> bool:
    """Return whether ``needle`` is in the binary search tree rooted at ``head``."""
    node = head
    while node is not None and node.value != needle:
        node = node.left if needle < node.value else node.right  # type: ignore[operator]
    return node is not None