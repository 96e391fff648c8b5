"""Mutable state shared by the walkers of one traversal call."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .classify import EdgeType, NodeState

if TYPE_CHECKING:
    from ..visitor import TraversalVisitor


@dataclass
class TraversalContext:
    """Per-call traversal state, passed explicitly to every walker step.

    One context is created for each top-level ``dfs``/``bfs`` call and
    dropped when it returns. All roots of a spanning forest share it, which
    is how later roots see nodes finished by earlier ones.
    """

    graph: Sequence[Sequence[int]]
    state: list[NodeState] = field(default_factory=list)
    pre_order: list[int] = field(default_factory=list)
    post_order: list[int] = field(default_factory=list)
    pre_number: list[int | None] = field(default_factory=list)
    parents: list[int | None] = field(default_factory=list)
    levels: list[int | None] = field(default_factory=list)
    edges: dict[EdgeType, list[tuple[int, int]]] | None = None  # None: not collected
    visitors: list["TraversalVisitor"] = field(default_factory=list)

    @classmethod
    def for_graph(
        cls,
        graph: Sequence[Sequence[int]],
        edge_types: Sequence[EdgeType] | None = None,
        visitors: list["TraversalVisitor"] | None = None,
    ) -> "TraversalContext":
        """Allocate fresh state for a graph of ``len(graph)`` nodes.

        Args:
            graph: Normalized adjacency list.
            edge_types: Edge buckets to collect, or None to skip collection.
            visitors: Visitors notified of every classified edge.
        """
        n = len(graph)
        return cls(
            graph=graph,
            state=[NodeState.UNVISITED] * n,
            pre_number=[None] * n,
            parents=[None] * n,
            levels=[None] * n,
            edges={t: [] for t in edge_types} if edge_types is not None else None,
            visitors=visitors or [],
        )

    def discover(self, node: int) -> None:
        """Mark a node discovered and append it to the pre-order."""
        self.state[node] = NodeState.DISCOVERED
        self.pre_number[node] = len(self.pre_order)
        self.pre_order.append(node)

    def finish(self, node: int) -> None:
        """Mark a node finished and append it to the post-order."""
        self.state[node] = NodeState.FINISHED
        self.post_order.append(node)

    def add_edge(self, u: int, v: int, edge_type: EdgeType) -> None:
        """Record a classified edge and notify visitors synchronously."""
        if self.edges is not None:
            self.edges[edge_type].append((u, v))
        for visitor in self.visitors:
            visitor.visit_edge(u, v, edge_type)
