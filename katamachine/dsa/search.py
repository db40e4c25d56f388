"""Searching a sequence: linear, binary and the two-crystal-balls jump search."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from math import isqrt


def linear_search(haystack: Sequence[int], needle: int) -> bool:
    """Return whether ``needle`` occurs in ``haystack``, checking every item."""
    return any(value == needle for value in haystack)


def binary_search(haystack: Sequence[int], needle: int) -> bool:
    """Return whether ``needle`` occurs in the ascending ``haystack``."""
    position = bisect_left(haystack, needle)
    return position < len(haystack) and haystack[position] == needle


def two_crystal_balls(breaks: Sequence[bool]) -> int:
    """Return the first index at which ``breaks`` turns true, or -1.

    ``breaks`` must be false up to some point and true from there on; it is
    probed in steps of the square root of its length, then walked linearly.
    """
    size = len(breaks)
    if size == 0:
        return -1
    jump = max(1, isqrt(size))

    probe = jump
    while probe < size and not breaks[probe]:
        probe += jump

    for idx in range(probe - jump, min(probe + 1, size)):
        if breaks[idx]:
            return idx
    return -1