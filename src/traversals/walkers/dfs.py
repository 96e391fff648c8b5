"""Depth-first walkers: recursive and explicit-stack variants."""

from .classify import EdgeType, NodeState, classify_dfs_edge
from .context import TraversalContext


class DFSWalker:
    """Recursive depth-first walker.

    Calling the walker with a root visits every node reachable from it that
    the shared context has not seen yet, recording pre-order, post-order and
    classified edges. Neighbours are taken in adjacency order.
    """

    produces_post_order = True
    produces_levels = False
    edge_types = (EdgeType.TREE, EdgeType.FORWARD, EdgeType.BACK, EdgeType.CROSS)

    def __init__(self, context: TraversalContext):
        self.context = context

    def __call__(self, root: int) -> None:
        self._visit(root)

    def _visit(self, u: int) -> None:
        ctx = self.context
        ctx.discover(u)

        for v in ctx.graph[u]:
            if ctx.state[v] is NodeState.UNVISITED:
                ctx.add_edge(u, v, EdgeType.TREE)
                self._visit(v)
            else:
                ctx.add_edge(u, v, classify_dfs_edge(ctx.state, ctx.pre_number, u, v))

        ctx.finish(u)


class FlatDFSWalker(DFSWalker):
    """Depth-first walker driven by an explicit stack.

    Produces the same pre-order, post-order and edge events (in the same
    order) as ``DFSWalker`` but is not bounded by the interpreter's
    recursion limit.

    Stack entries are ``(node, parent, leaving)``. An edge is classified
    when its entry is popped, which is exactly when the recursive walker
    would reach it. A node pushed by several parents becomes a tree child of
    whichever entry pops first; later pops only classify.
    """

    def __call__(self, root: int) -> None:
        ctx = self.context
        stack: list[tuple[int, int | None, bool]] = [(root, None, False)]

        while stack:
            v, u, leaving = stack.pop()

            if leaving:
                ctx.finish(v)
                continue

            if u is not None:
                if ctx.state[v] is not NodeState.UNVISITED:
                    ctx.add_edge(u, v, classify_dfs_edge(ctx.state, ctx.pre_number, u, v))
                    continue
                ctx.add_edge(u, v, EdgeType.TREE)

            ctx.discover(v)
            # Exit marker sits below the children so it pops after them
            stack.append((v, None, True))
            stack.extend((w, v, False) for w in reversed(ctx.graph[v]))
