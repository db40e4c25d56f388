"""Shared graph, tree and maze types with the sample data the exercises use."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class GraphEdge:
    """A directed, weighted edge to vertex ``to``."""

    to: int
    weight: int


WeightedAdjacencyList = list[list[GraphEdge]]
WeightedAdjacencyMatrix = list[list[int]]


@dataclass
class BinaryNode(Generic[T]):
    """A node of a binary tree; equality compares whole subtrees."""

    value: T
    left: Optional[BinaryNode[T]] = None
    right: Optional[BinaryNode[T]] = None


@dataclass(frozen=True)
class Point:
    """A position in a maze: ``x`` is the column, ``y`` the row."""

    x: int
    y: int


ADJ_LIST_1: WeightedAdjacencyList = [
    [GraphEdge(1, 3), GraphEdge(2, 1)],
    [GraphEdge(0, 3), GraphEdge(2, 4), GraphEdge(4, 1)],
    [GraphEdge(1, 4), GraphEdge(3, 7), GraphEdge(0, 1)],
    [GraphEdge(2, 7), GraphEdge(4, 5), GraphEdge(6, 1)],
    [GraphEdge(1, 1), GraphEdge(3, 5), GraphEdge(5, 2)],
    [GraphEdge(6, 1), GraphEdge(4, 2), GraphEdge(2, 18)],
    [GraphEdge(3, 1), GraphEdge(5, 1)],
]

ADJ_LIST_2: WeightedAdjacencyList = [
    [GraphEdge(1, 3), GraphEdge(2, 1)],
    [GraphEdge(4, 1)],
    [GraphEdge(3, 7)],
    [],
    [GraphEdge(1, 1), GraphEdge(3, 5), GraphEdge(5, 2)],
    [GraphEdge(2, 18), GraphEdge(6, 1)],
    [GraphEdge(3, 1)],
]

ADJ_MATRIX_1: WeightedAdjacencyMatrix = [
    [0, 3, 1, 0, 0, 0, 0],
    [0, 0, 0, 0, 1, 0, 0],
    [0, 0, 7, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0],
    [0, 1, 0, 5, 0, 2, 0],
    [0, 0, 18, 0, 0, 0, 1],
    [0, 0, 0, 1, 0, 0, 1],
]

TREE_1: BinaryNode[int] = BinaryNode(
    20,
    left=BinaryNode(
        10,
        left=BinaryNode(5, right=BinaryNode(7)),
        right=BinaryNode(15),
    ),
    right=BinaryNode(
        50,
        left=BinaryNode(30, left=BinaryNode(29), right=BinaryNode(45)),
        right=BinaryNode(100),
    ),
)

TREE_2: BinaryNode[int] = BinaryNode(
    20,
    left=BinaryNode(
        10,
        left=BinaryNode(5, right=BinaryNode(7)),
        right=BinaryNode(15),
    ),
    right=BinaryNode(
        50,
        left=BinaryNode(
            30,
            left=BinaryNode(29, left=BinaryNode(21)),
            right=BinaryNode(45, right=BinaryNode(49)),
        ),
    ),
)