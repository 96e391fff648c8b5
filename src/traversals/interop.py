"""Conversion between networkx graphs and integer adjacency lists."""

import sys
from collections.abc import Hashable, Sequence
from typing import Any

import networkx as nx

from .driver import TraversalResult
from .errors import InvalidInputError
from .options import normalize_graph
from .walkers import EdgeType


def from_networkx(graph: nx.Graph) -> tuple[list[list[int]], list[Hashable]]:
    """Number the nodes of a networkx graph and build its adjacency list.

    Nodes are numbered in ``graph.nodes`` order; neighbours keep networkx's
    insertion order, which fixes the traversal order.

    Args:
        graph: Directed or undirected networkx graph.

    Returns:
        Tuple of (adjacency, labels) where ``labels[i]`` is the original
        node numbered ``i``.
    """
    labels = list(graph.nodes)
    index = {label: i for i, label in enumerate(labels)}

    if graph.is_directed():
        neighbours = graph.successors
    else:
        print(
            "Warning: undirected graph, each edge becomes an arc in both directions",
            file=sys.stderr,
        )
        neighbours = graph.neighbors

    adjacency = [[index[target] for target in neighbours(label)] for label in labels]
    return adjacency, labels


def to_networkx(
    adjacency: Sequence[Any],
    labels: Sequence[Hashable] | None = None,
) -> nx.DiGraph:
    """Build a DiGraph holding every node and arc of an adjacency list.

    The adjacency list is normalized first, so bare numbers and None entries
    are accepted. Duplicate arcs collapse into one networkx edge.
    """
    nodes = normalize_graph(adjacency)
    name = labels.__getitem__ if labels is not None else (lambda i: i)

    G = nx.DiGraph()
    G.add_nodes_from(name(i) for i in range(len(nodes)))
    for u, targets in enumerate(nodes):
        for v in targets:
            G.add_edge(name(u), name(v))
    return G


def spanning_forest(
    result: TraversalResult,
    labels: Sequence[Hashable] | None = None,
) -> nx.DiGraph:
    """Build the DFS/BFS spanning forest of a traversal as a DiGraph.

    Contains every root and every node of the pre-order (when it was kept),
    plus the tree edges, each tagged with ``edge_type="tree"``.

    Raises:
        InvalidInputError: If the traversal ran with ``edges=False``.
    """
    if result.edges is None:
        raise InvalidInputError("The traversal result has no edges; run it with edges=True")

    name = labels.__getitem__ if labels is not None else (lambda i: i)

    G = nx.DiGraph()
    G.add_nodes_from(name(root) for root in result.roots)
    if result.pre_order is not None:
        G.add_nodes_from(name(node) for node in result.pre_order)
    for u, v in result.edges[EdgeType.TREE]:
        G.add_edge(name(u), name(v), edge_type=EdgeType.TREE.value)
    return G
