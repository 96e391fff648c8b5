"""Pytest fixtures for traversal tests."""

import pytest


@pytest.fixture
def cyclic_graph() -> list[list[int]]:
    """Nine-node graph with tree, forward, back and cross edges under DFS.

    0 -> 1, 8; 1 -> 2, 3; 2 -> 3; 3 -> 4, 5; 4 -> 6; 5 -> 6; 6 -> 7, 2;
    7 -> 8. Node 8 is the exit.
    """
    return [
        [1, 8],
        [2, 3],
        [3],
        [4, 5],
        [6],
        [6],
        [7, 2],
        [8],
        [],
    ]


@pytest.fixture
def dirty_cyclic_graph() -> list:
    """Same graph as cyclic_graph with bare numbers and a None entry."""
    return [
        [1, 8],
        [2, 3],
        3,
        [4, 5],
        6,
        6,
        [7, 2],
        [8],
        None,
    ]


@pytest.fixture
def bfs_back_edge_graph() -> list[list[int]]:
    """cyclic_graph with 6 -> 4, 7, 2 so that BFS finds a back edge."""
    return [
        [1, 8],
        [2, 3],
        [3],
        [4, 5],
        [6],
        [6],
        [4, 7, 2],
        [8],
        [],
    ]


@pytest.fixture
def forest_graph() -> list[list[int]]:
    """Three components reachable from 0, 2 and 4: 0 -> 1, 2 -> 0, 3, 4 -> 4."""
    return [
        [1],
        [],
        [0, 3],
        [],
        [4],
    ]


@pytest.fixture
def dag() -> list[list[int]]:
    """Diamond: 0 -> 1, 2; 1 -> 3; 2 -> 3."""
    return [
        [1, 2],
        [3],
        [3],
        [],
    ]


@pytest.fixture
def cyclic_pre_order() -> list[int]:
    return [0, 1, 2, 3, 4, 6, 7, 8, 5]


@pytest.fixture
def cyclic_post_order() -> list[int]:
    return [8, 7, 6, 4, 5, 3, 2, 1, 0]
