import copy
import dataclasses

import pytest

from katamachine.dsa.fixtures import (
    ADJ_LIST_1,
    ADJ_LIST_2,
    ADJ_MATRIX_1,
    TREE_1,
    TREE_2,
    BinaryNode,
    GraphEdge,
    Point,
)


def _in_order(node):
    if node is None:
        return []
    return _in_order(node.left) + [node.value] + _in_order(node.right)


@pytest.mark.parametrize("tree", [TREE_1, TREE_2])
def test_trees_are_binary_search_trees(tree):
    values = _in_order(tree)
    assert values == sorted(values)
    assert tree.value == 20


def test_tree_equality_is_structural():
    left = BinaryNode(10, BinaryNode(5, None, BinaryNode(7)), BinaryNode(15))
    assert TREE_1.left == left
    assert TREE_2.left == left
    assert TREE_1 == copy.deepcopy(TREE_1)
    assert TREE_1.right != TREE_2.right
    assert TREE_1 != TREE_2


def test_binary_node_defaults_to_leaf():
    leaf = BinaryNode(45)
    assert leaf.left is None and leaf.right is None
    assert TREE_1.right.left.right == leaf


@pytest.mark.parametrize("graph", [ADJ_LIST_1, ADJ_LIST_2])
def test_adjacency_lists_are_well_formed(graph):
    assert len(graph) == len(ADJ_MATRIX_1)
    for edges in graph:
        for edge in edges:
            assert 0 <= edge.to < len(graph)
            assert edge.weight > 0


def test_adjacency_list_values_pinned():
    assert ADJ_LIST_1[0] == [GraphEdge(1, 3), GraphEdge(2, 1)]
    assert ADJ_LIST_2[3] == []
    assert ADJ_LIST_2[5] == [GraphEdge(to=2, weight=18), GraphEdge(to=6, weight=1)]


@pytest.mark.parametrize("row", [0, 1, 4, 5])
def test_matrix_rows_match_list(row):
    assert all(len(r) == len(ADJ_MATRIX_1) for r in ADJ_MATRIX_1)
    edges = [GraphEdge(to, weight) for to, weight in enumerate(ADJ_MATRIX_1[row]) if weight]
    assert edges == ADJ_LIST_2[row]


def test_point_is_hashable_value():
    assert {Point(10, 0), Point(10, 0), Point(1, 5)} == {Point(1, 5), Point(10, 0)}
    assert Point(x=1, y=5).y == 5


def test_frozen_types_cannot_change():
    with pytest.raises(dataclasses.FrozenInstanceError):
        GraphEdge(1, 3).weight = 4
    with pytest.raises(dataclasses.FrozenInstanceError):
        Point(1, 5).x = 2