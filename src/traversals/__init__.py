"""Depth-first and breadth-first traversal of integer adjacency lists.

    >>> from traversals import dfs
    >>> dfs([[1, 8], [2, 3], [3], [4, 5], [6], [6], [7, 2], [8], []]).pre_order
    [0, 1, 2, 3, 4, 6, 7, 8, 5]
"""

from .driver import TraversalResult, bfs, dfs, walk
from .errors import InvalidInputError
from .interop import from_networkx, spanning_forest, to_networkx
from .options import TraversalOptions, normalize_graph, resolve_options
from .simple import STOP, Stop, post_order, pre_order, r_post_order, r_pre_order
from .visitor import CallbackVisitor, TraversalVisitor
from .walkers import BFSWalker, DFSWalker, EdgeType, FlatDFSWalker, NodeState

__version__ = "0.1.0"

__all__ = [
    "dfs",
    "bfs",
    "walk",
    "TraversalResult",
    "TraversalOptions",
    "resolve_options",
    "normalize_graph",
    "TraversalVisitor",
    "CallbackVisitor",
    "EdgeType",
    "NodeState",
    "DFSWalker",
    "FlatDFSWalker",
    "BFSWalker",
    "pre_order",
    "post_order",
    "r_pre_order",
    "r_post_order",
    "Stop",
    "STOP",
    "from_networkx",
    "to_networkx",
    "spanning_forest",
    "InvalidInputError",
]
