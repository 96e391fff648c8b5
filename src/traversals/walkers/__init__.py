"""Traversal engines operating on a shared per-call context."""

from .bfs import BFSWalker
from .classify import EdgeType, NodeState, classify_bfs_edge, classify_dfs_edge
from .context import TraversalContext
from .dfs import DFSWalker, FlatDFSWalker

__all__ = [
    "EdgeType",
    "NodeState",
    "classify_dfs_edge",
    "classify_bfs_edge",
    "TraversalContext",
    "DFSWalker",
    "FlatDFSWalker",
    "BFSWalker",
]
