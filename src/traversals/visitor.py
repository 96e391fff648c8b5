"""Visitor interface for node and edge hooks."""

from collections.abc import Callable, Mapping, Sequence

from .errors import InvalidInputError
from .walkers.classify import EdgeType

NodeHook = Callable[[int, int, Sequence[int]], object]
EdgeHook = Callable[[int, int, EdgeType], object]
TypedEdgeHook = Callable[[int, int], object]


class TraversalVisitor:
    """Base class for traversal hooks; every method is a no-op.

    Override only the hooks you need. Node hooks run after the walk, once
    per position of the relevant sequence, and receive
    ``(node, position, sequence)``. Edge hooks run during the walk, when the
    edge is classified.
    """

    def pre(self, node: int, position: int, sequence: Sequence[int]) -> None:
        """Called for each node of the pre-order."""

    def post(self, node: int, position: int, sequence: Sequence[int]) -> None:
        """Called for each node of the post-order (DFS only)."""

    def rpre(self, node: int, position: int, sequence: Sequence[int]) -> None:
        """Called for each node of the reversed pre-order."""

    def rpost(self, node: int, position: int, sequence: Sequence[int]) -> None:
        """Called for each node of the reversed post-order (DFS only)."""

    def edge(self, u: int, v: int, edge_type: EdgeType) -> None:
        """Called for every classified edge."""

    def tree_edge(self, u: int, v: int) -> None:
        pass

    def forward_edge(self, u: int, v: int) -> None:
        pass

    def back_edge(self, u: int, v: int) -> None:
        pass

    def cross_edge(self, u: int, v: int) -> None:
        pass

    def visit_edge(self, u: int, v: int, edge_type: EdgeType) -> None:
        """Dispatch an edge to ``edge`` and then to its per-type hook."""
        self.edge(u, v, edge_type)
        getattr(self, f"{edge_type.value}_edge")(u, v)


def _check_callable(name: str, fn: object) -> None:
    if fn is not None and not callable(fn):
        raise InvalidInputError(f"The '{name}' callback must be callable, got {type(fn).__name__}")


class CallbackVisitor(TraversalVisitor):
    """Visitor built from plain callables.

    ``edge_callbacks`` maps an ``EdgeType`` (or its string value, e.g.
    ``"back"``) to a callable taking ``(u, v)``; it runs after the general
    ``edge`` callback for edges of that type.
    """

    def __init__(
        self,
        pre: NodeHook | None = None,
        post: NodeHook | None = None,
        rpre: NodeHook | None = None,
        rpost: NodeHook | None = None,
        edge: EdgeHook | None = None,
        edge_callbacks: Mapping[EdgeType | str, TypedEdgeHook] | None = None,
    ):
        for name, fn in (("pre", pre), ("post", post), ("rpre", rpre), ("rpost", rpost), ("edge", edge)):
            _check_callable(name, fn)

        self._node_hooks = {"pre": pre, "post": post, "rpre": rpre, "rpost": rpost}
        self._edge = edge
        self._typed: dict[EdgeType, TypedEdgeHook] = {}
        for key, fn in (edge_callbacks or {}).items():
            try:
                edge_type = EdgeType(key)
            except ValueError as err:
                raise InvalidInputError(f"Unknown edge type: {key!r}") from err
            _check_callable(edge_type.value, fn)
            self._typed[edge_type] = fn

    def is_empty(self) -> bool:
        """True when no callback was supplied at all."""
        return not (any(self._node_hooks.values()) or self._edge or self._typed)

    def _node(self, hook: str, node: int, position: int, sequence: Sequence[int]) -> None:
        fn = self._node_hooks[hook]
        if fn is not None:
            fn(node, position, sequence)

    def pre(self, node, position, sequence):
        self._node("pre", node, position, sequence)

    def post(self, node, position, sequence):
        self._node("post", node, position, sequence)

    def rpre(self, node, position, sequence):
        self._node("rpre", node, position, sequence)

    def rpost(self, node, position, sequence):
        self._node("rpost", node, position, sequence)

    def visit_edge(self, u: int, v: int, edge_type: EdgeType) -> None:
        if self._edge is not None:
            self._edge(u, v, edge_type)
        fn = self._typed.get(edge_type)
        if fn is not None:
            fn(u, v)
