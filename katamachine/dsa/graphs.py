"""Path finding and spanning trees over weighted graphs."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Callable, Iterable

from katamachine.dsa.fixtures import (
    GraphEdge,
    WeightedAdjacencyList,
    WeightedAdjacencyMatrix,
)


def _walk_back(parents: dict[int, int], source: int, target: int) -> list[int]:
    path = [target]
    while path[-1] != source:
        path.append(parents[path[-1]])
    return path[::-1]


def _bfs(neighbours: Callable[[int], Iterable[int]], source: int, needle: int) -> list[int]:
    parents: dict[int, int] = {}
    seen = {source}
    queue = deque([source])
    while queue:
        current = queue.popleft()
        if current == needle:
            return _walk_back(parents, source, needle)
        for nxt in neighbours(current):
            if nxt not in seen:
                seen.add(nxt)
                parents[nxt] = current
                queue.append(nxt)
    return []


def bfs_list(graph: WeightedAdjacencyList, source: int, needle: int) -> list[int]:
    """Return the fewest-edge path from ``source`` to ``needle``, or []."""
    return _bfs(lambda v: (edge.to for edge in graph[v]), source, needle)


def bfs_matrix(graph: WeightedAdjacencyMatrix, source: int, needle: int) -> list[int]:
    """Return the fewest-edge path in a matrix graph (0 means no edge), or []."""
    return _bfs(lambda v: (to for to, w in enumerate(graph[v]) if w != 0), source, needle)


def dfs_list(graph: WeightedAdjacencyList, source: int, needle: int) -> list[int]:
    """Return the first path depth-first search finds to ``needle``, or []."""
    seen: set[int] = set()
    path: list[int] = []

    def walk(vertex: int) -> bool:
        if vertex in seen:
            return False
        seen.add(vertex)
        path.append(vertex)
        if vertex == needle or any(walk(edge.to) for edge in graph[vertex]):
            return True
        path.pop()
        return False

    return path if walk(source) else []


def dijkstra_list(source: int, sink: int, graph: WeightedAdjacencyList) -> list[int]:
    """Return the lowest-weight path from ``source`` to ``sink``, or []."""
    distances = {source: 0}
    parents: dict[int, int] = {}
    done: set[int] = set()
    heap = [(0, source)]
    while heap and sink not in done:
        distance, vertex = heapq.heappop(heap)
        if vertex in done:
            continue
        done.add(vertex)
        for edge in graph[vertex]:
            candidate = distance + edge.weight
            if candidate < distances.get(edge.to, candidate + 1):
                distances[edge.to] = candidate
                parents[edge.to] = vertex
                heapq.heappush(heap, (candidate, edge.to))
    return _walk_back(parents, source, sink) if sink in done else []


def prims(graph: WeightedAdjacencyList) -> WeightedAdjacencyList:
    """Return a minimum spanning tree grown from vertex 0, edges in both directions."""
    tree: WeightedAdjacencyList = [[] for _ in graph]
    if not graph:
        return tree
    visited = {0}
    heap = [(edge.weight, n, 0, edge.to) for n, edge in enumerate(graph[0])]
    heapq.heapify(heap)
    order = len(heap)
    while heap:
        weight, _, origin, target = heapq.heappop(heap)
        if target in visited:
            continue
        visited.add(target)
        tree[origin].append(GraphEdge(target, weight))
        tree[target].append(GraphEdge(origin, weight))
        for edge in graph[target]:
            if edge.to not in visited:
                heapq.heappush(heap, (edge.weight, order, target, edge.to))
                order += 1
    return tree