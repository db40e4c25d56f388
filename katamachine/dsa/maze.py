"""Finding a path through a maze of text rows."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from katamachine.dsa.fixtures import Point


def _open(maze: Sequence[str], wall: str, point: Point) -> bool:
    return (
        0 <= point.y < len(maze)
        and 0 <= point.x < len(maze[point.y])
        and maze[point.y][point.x] != wall
    )


def solve(maze: Sequence[str], wall: str, start: Point, end: Point) -> list[Point]:
    """Return the shortest path of points from ``start`` to ``end``, or [].

    Each row is a string; a cell equal to ``wall`` cannot be entered.
    """
    if not _open(maze, wall, start):
        return []
    parents: dict[Point, Point] = {}
    queue = deque([start])
    seen = {start}
    while queue:
        current = queue.popleft()
        if current == end:
            path = [end]
            while path[-1] != start:
                path.append(parents[path[-1]])
            return path[::-1]
        for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nxt = Point(current.x + dx, current.y + dy)
            if nxt not in seen and _open(maze, wall, nxt):
                seen.add(nxt)
                parents[nxt] = current
                queue.append(nxt)
    return []