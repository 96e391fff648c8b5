"""Edge classification for depth-first and breadth-first walks."""

from collections.abc import Sequence
from enum import Enum


class EdgeType(Enum):
    """Classification of an edge at the moment it is traversed."""

    TREE = "tree"  # first discovery of the target
    FORWARD = "forward"  # target is a finished descendant (DFS only)
    BACK = "back"  # target is an ancestor of the source
    CROSS = "cross"  # no ancestor/descendant relation


class NodeState(Enum):
    """Visitation status of a node during one traversal call."""

    UNVISITED = 0
    DISCOVERED = 1  # DFS: open on the current path, BFS: queued
    FINISHED = 2


def classify_dfs_edge(
    state: Sequence[NodeState],
    pre_number: Sequence[int | None],
    u: int,
    v: int,
) -> EdgeType:
    """Classify a non-tree edge (u, v) found while u is open.

    Args:
        state: Visitation status per node.
        pre_number: Pre-order discovery index per node.
        u: Source node, currently on the DFS path.
        v: Target node, already discovered.

    Returns:
        BACK if v is still open, FORWARD if v was discovered after u,
        CROSS otherwise.
    """
    if state[v] is NodeState.DISCOVERED:
        return EdgeType.BACK
    if pre_number[u] < pre_number[v]:
        return EdgeType.FORWARD
    return EdgeType.CROSS


def classify_bfs_edge(
    levels: Sequence[int | None],
    parents: Sequence[int | None],
    u: int,
    v: int,
) -> EdgeType:
    """Classify a non-tree edge (u, v) by climbing BFS parent pointers.

    The deeper endpoint climbs towards the level of the shallower one. If
    the climb reaches the shallower endpoint, one is a tree ancestor of the
    other and the edge is BACK. The climb ends at a tree root, so an edge
    between two trees of a spanning forest is CROSS.

    Args:
        levels: BFS level per node.
        parents: BFS tree parent per node (None for roots).
        u: Source node.
        v: Target node, already discovered.

    Returns:
        BACK or CROSS.
    """
    if levels[u] < levels[v]:
        shallow, deep = u, v
    else:
        shallow, deep = v, u

    while deep is not None and deep != shallow and levels[deep] > levels[shallow]:
        deep = parents[deep]

    return EdgeType.BACK if deep == shallow else EdgeType.CROSS
