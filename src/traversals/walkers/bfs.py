"""Breadth-first (level-order) walker."""

from collections import deque

from .classify import EdgeType, NodeState, classify_bfs_edge
from .context import TraversalContext


class BFSWalker:
    """Level-order walker producing pre-order, levels and classified edges.

    Levels and parents are assigned once, at first discovery, so a level is
    the minimum edge count from the root of the node's BFS tree. There is no
    post-order and no forward edge.
    """

    produces_post_order = False
    produces_levels = True
    edge_types = (EdgeType.TREE, EdgeType.BACK, EdgeType.CROSS)

    def __init__(self, context: TraversalContext):
        self.context = context

    def __call__(self, root: int) -> None:
        ctx = self.context

        ctx.parents[root] = None
        ctx.levels[root] = 0
        ctx.discover(root)
        queue: deque[int] = deque([root])

        while queue:
            u = queue.popleft()
            for v in ctx.graph[u]:
                if ctx.levels[v] is None:
                    ctx.parents[v] = u
                    ctx.levels[v] = ctx.levels[u] + 1
                    ctx.add_edge(u, v, EdgeType.TREE)
                    ctx.discover(v)
                    queue.append(v)
                else:
                    ctx.add_edge(u, v, classify_bfs_edge(ctx.levels, ctx.parents, u, v))
            ctx.state[u] = NodeState.FINISHED
