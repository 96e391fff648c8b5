"""Traversal options and input normalization.

Every public entry point funnels its arguments through ``resolve_options``,
which turns the accepted call shapes into a single ``TraversalOptions``
whose ``nodes`` field holds the graph.
"""

import numbers
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any

from .errors import InvalidInputError
from .visitor import CallbackVisitor, EdgeHook, NodeHook, TraversalVisitor, TypedEdgeHook


@dataclass(frozen=True)
class TraversalOptions:
    """Configuration for ``dfs``/``bfs``."""

    nodes: Any = field(default_factory=list)
    start_index: int = 0
    spanning_tree: bool = True  # False: also walk every unvisited node (spanning forest)
    pre_order: bool = True
    post_order: bool = True
    r_pre_order: bool = False
    r_post_order: bool = False
    edges: bool = True
    levels: bool = True  # BFS only
    exclude_root: bool = False
    trusted: bool = False
    flat: bool = False  # DFS only: explicit-stack walker
    pre: NodeHook | None = None
    post: NodeHook | None = None
    rpre: NodeHook | None = None
    rpost: NodeHook | None = None
    edge: EdgeHook | None = None
    edge_callbacks: Mapping[Any, TypedEdgeHook] | None = None
    visitor: TraversalVisitor | None = None

    def build_visitors(self) -> list[TraversalVisitor]:
        """Return the visitors to notify: callbacks first, then ``visitor``.

        Raises:
            InvalidInputError: If a callback is not callable or ``visitor`` is
                not a TraversalVisitor.
        """
        visitors: list[TraversalVisitor] = []
        callbacks = CallbackVisitor(
            pre=self.pre,
            post=self.post,
            rpre=self.rpre,
            rpost=self.rpost,
            edge=self.edge,
            edge_callbacks=self.edge_callbacks,
        )
        if not callbacks.is_empty():
            visitors.append(callbacks)
        if self.visitor is not None:
            if not isinstance(self.visitor, TraversalVisitor):
                raise InvalidInputError(
                    f"visitor must be a TraversalVisitor, got {type(self.visitor).__name__}"
                )
            visitors.append(self.visitor)
        return visitors


OPTION_NAMES = frozenset(f.name for f in fields(TraversalOptions))


def _check_option_names(names) -> None:
    unknown = sorted(set(names) - OPTION_NAMES)
    if unknown:
        raise InvalidInputError(f"Unknown traversal option(s): {', '.join(unknown)}")


def _is_options(value: object) -> bool:
    return isinstance(value, (TraversalOptions, Mapping))


def _coerce_options(options: TraversalOptions | Mapping | None) -> TraversalOptions:
    if options is None:
        return TraversalOptions()
    if isinstance(options, TraversalOptions):
        return options
    if isinstance(options, Mapping):
        _check_option_names(options)
        return TraversalOptions(**options)
    raise InvalidInputError(
        f"Options must be a TraversalOptions or a mapping, got {type(options).__name__}"
    )


def resolve_options(
    graph: Any = None,
    options: TraversalOptions | Mapping | None = None,
    **overrides: Any,
) -> TraversalOptions:
    """Resolve the accepted call shapes into one TraversalOptions.

    Shapes:
        ``(graph, options)``: graph is the adjacency list, options may be a
        TraversalOptions, a mapping of option names, or None.
        ``(options_with_nodes,)``: the first argument carries ``nodes``.
        ``(None,)``: defaults (an empty graph).

    Keyword overrides are applied last. Inputs are never mutated.

    Raises:
        InvalidInputError: On an unknown option name, on options given in
            both positions, or on options of an unsupported type.
    """
    if _is_options(graph):
        if options is not None:
            raise InvalidInputError("Options were given both as the graph argument and separately")
        resolved = _coerce_options(graph)
    elif graph is None:
        resolved = _coerce_options(options)
    else:
        resolved = replace(_coerce_options(options), nodes=graph)

    if overrides:
        _check_option_names(overrides)
        resolved = replace(resolved, **overrides)

    return resolved


def _is_node_number(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _coerce_adjacency(entry: Any) -> list[int]:
    if isinstance(entry, (list, tuple)):
        return list(entry)
    if _is_node_number(entry):
        return [int(entry)]
    return []


def _check_targets(node: int, targets: list[int], num_nodes: int) -> list[int]:
    checked = []
    for target in targets:
        if not _is_node_number(target) or not 0 <= int(target) < num_nodes:
            raise InvalidInputError(
                f"Node {node} has an edge to {target!r}, expected a node number in [0, {num_nodes})"
            )
        checked.append(int(target))
    return checked


def normalize_graph(graph: Any) -> list[list[int]]:
    """Return a clean copy of an adjacency list.

    A list or tuple entry is kept, a bare integer becomes a one-element
    list, anything else (None included) becomes an empty list. Every target
    must then be a node number in ``[0, len(graph))``.

    Args:
        graph: List or tuple of adjacency entries.

    Returns:
        New list of adjacency lists; the input is left untouched.

    Raises:
        InvalidInputError: If the graph itself is not a list or tuple, or a
            target is not a node number in range.
    """
    if not isinstance(graph, (list, tuple)):
        raise InvalidInputError(f"The list of nodes must be a list or tuple, got {type(graph).__name__}")
    num_nodes = len(graph)
    return [
        _check_targets(node, _coerce_adjacency(entry), num_nodes)
        for node, entry in enumerate(graph)
    ]


def root_sequence(num_nodes: int, start_index: Any, spanning_tree: bool) -> list[int]:
    """Candidate roots in the order the driver tries them.

    ``start_index`` wraps modulo ``num_nodes`` (negative values wrap from the
    end); a non-integer start index means 0. Spanning tree mode yields only
    the start; otherwise every node once, starting at the start and wrapping.
    """
    if num_nodes == 0:
        return []
    start_index = int(start_index) if _is_node_number(start_index) else 0
    start = start_index % num_nodes
    if spanning_tree:
        return [start]
    return [(start + offset) % num_nodes for offset in range(num_nodes)]
