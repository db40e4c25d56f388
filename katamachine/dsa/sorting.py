"""In-place sorting algorithms over mutable sequences of integers."""

from __future__ import annotations

import heapq
from collections.abc import MutableSequence


def bubble_sort(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` in place by repeatedly swapping adjacent pairs."""
    for end in range(len(arr) - 1, 0, -1):
        for j in range(end):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]


def insertion_sort(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` in place by inserting each item into the sorted prefix."""
    for i in range(1, len(arr)):
        value = arr[i]
        j = i
        while j > 0 and arr[j - 1] > value:
            arr[j] = arr[j - 1]
            j -= 1
        arr[j] = value


def merge_sort(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` in place with a stable merge sort."""
    if len(arr) <= 1:
        return
    middle = len(arr) // 2
    left, right = list(arr[:middle]), list(arr[middle:])
    merge_sort(left)
    merge_sort(right)
    arr[:] = list(heapq.merge(left, right))


def _partition(arr: MutableSequence[int], lo: int, hi: int) -> int:
    boundary = lo
    for i in range(lo, hi):
        if arr[i] <= arr[hi]:
            arr[i], arr[boundary] = arr[boundary], arr[i]
            boundary += 1
    arr[boundary], arr[hi] = arr[hi], arr[boundary]
    return boundary


def _quick_sort(arr: MutableSequence[int], lo: int, hi: int) -> None:
    if lo >= hi:
        return
    pivot = _partition(arr, lo, hi)
    _quick_sort(arr, lo, pivot - 1)
    _quick_sort(arr, pivot + 1, hi)


def quick_sort(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` in place with quicksort, pivoting on the last element."""
    _quick_sort(arr, 0, len(arr) - 1)