"""Generic traversal driver and the ``dfs``/``bfs`` entry points."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .options import TraversalOptions, normalize_graph, resolve_options, root_sequence
from .visitor import TraversalVisitor
from .walkers import BFSWalker, DFSWalker, EdgeType, FlatDFSWalker, NodeState, TraversalContext

WalkerFactory = Callable[[TraversalContext], Callable[[int], None]]


@dataclass
class TraversalResult:
    """Output of a traversal; fields whose option is off stay None."""

    pre_order: list[int] | None = None
    post_order: list[int] | None = None
    r_pre_order: list[int] | None = None
    r_post_order: list[int] | None = None
    levels: list[int | None] | None = None  # BFS only, indexed by node
    edges: dict[EdgeType, list[tuple[int, int]]] | None = None
    roots: list[int] = field(default_factory=list)  # Sub-traversal roots, in walk order


def _dispatch_node_hooks(
    visitors: list[TraversalVisitor],
    sequences: dict[str, list[int] | None],
    skip: set[int],
) -> None:
    """Fire node hooks in order: pre, post, rpre, rpost."""
    for hook in ("pre", "post", "rpre", "rpost"):
        sequence = sequences[hook]
        if sequence is None:
            continue
        for position, node in enumerate(sequence):
            if node in skip:
                continue
            for visitor in visitors:
                getattr(visitor, hook)(node, position, sequence)


def walk(
    graph: Any = None,
    options: TraversalOptions | Mapping | None = None,
    walker_factory: WalkerFactory | None = None,
    **overrides: Any,
) -> TraversalResult:
    """Run a walker over one root or over every unvisited root.

    Args:
        graph: Adjacency list, or options carrying ``nodes`` (see
            ``resolve_options`` for the accepted shapes).
        options: TraversalOptions, mapping of option names, or None.
        walker_factory: Walker class (DFSWalker, FlatDFSWalker, BFSWalker)
            or any callable building a walker from a TraversalContext. None
            picks a depth-first walker, FlatDFSWalker when ``flat`` is set.
        **overrides: Option values applied on top of ``options``.

    Returns:
        TraversalResult shaped by the options.

    Raises:
        InvalidInputError: If the graph is not a list or tuple (unless
            ``trusted``) or an option is invalid.
    """
    opts = resolve_options(graph, options, **overrides)
    if walker_factory is None:
        walker_factory = FlatDFSWalker if opts.flat else DFSWalker
    nodes = opts.nodes if opts.trusted else normalize_graph(opts.nodes)
    visitors = opts.build_visitors()

    produces_post_order = getattr(walker_factory, "produces_post_order", True)
    produces_levels = getattr(walker_factory, "produces_levels", False)
    edge_types = getattr(walker_factory, "edge_types", tuple(EdgeType))

    context = TraversalContext.for_graph(
        nodes,
        edge_types=edge_types if opts.edges else None,
        visitors=visitors,
    )
    walker = walker_factory(context)

    roots: list[int] = []
    for root in root_sequence(len(nodes), opts.start_index, opts.spanning_tree):
        if context.state[root] is NodeState.UNVISITED:
            roots.append(root)
            walker(root)

    pre_order = context.pre_order
    post_order = context.post_order if produces_post_order else None

    # Reversed views are built once and shared by the result and the hooks
    r_pre_order = pre_order[::-1] if opts.r_pre_order or visitors else None
    r_post_order = None
    if post_order is not None and (opts.r_post_order or visitors):
        r_post_order = post_order[::-1]

    result = TraversalResult(roots=roots)
    if opts.pre_order:
        result.pre_order = pre_order
    if opts.post_order and post_order is not None:
        result.post_order = post_order
    if opts.r_pre_order:
        result.r_pre_order = r_pre_order
    if opts.r_post_order and r_post_order is not None:
        result.r_post_order = r_post_order
    if opts.levels and produces_levels:
        result.levels = context.levels
    if opts.edges:
        result.edges = context.edges

    if visitors:
        skip = set(roots) if opts.exclude_root and not opts.spanning_tree else set()
        _dispatch_node_hooks(
            visitors,
            {"pre": pre_order, "post": post_order, "rpre": r_pre_order, "rpost": r_post_order},
            skip,
        )

    return result


def dfs(
    graph: Any = None,
    options: TraversalOptions | Mapping | None = None,
    **overrides: Any,
) -> TraversalResult:
    """Depth-first traversal with pre/post order and four-way edge classification.

    Example:
        >>> dfs([[1, 2], [2], []]).pre_order
        [0, 1, 2]
    """
    return walk(graph, options, **overrides)


def bfs(
    graph: Any = None,
    options: TraversalOptions | Mapping | None = None,
    **overrides: Any,
) -> TraversalResult:
    """Breadth-first traversal with pre-order, levels and tree/back/cross edges."""
    return walk(graph, options, walker_factory=BFSWalker, **overrides)
