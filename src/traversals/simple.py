"""Single-root walkers with early abort.

These bypass the driver: no normalization, no edge classification and no
spanning forest. The callback is called as ``callback(node, index)`` and may
return a ``Stop`` to end the walk::

    >>> pre_order([[1], [2], []], lambda node, index: Stop() if node == 1 else None)
    1
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from .errors import InvalidInputError

_NO_VALUE = object()


@dataclass(frozen=True)
class Stop:
    """Returned by a callback to abort the walk.

    ``Stop()`` makes the walker return the node it stopped at,
    ``Stop(value)`` makes it return ``value``.
    """

    value: Any = _NO_VALUE

    def result_for(self, node: int) -> Any:
        return node if self.value is _NO_VALUE else self.value


STOP = Stop()

WalkCallback = Callable[[int, int], Any]


def _require_callable(callback: Any) -> None:
    if not callable(callback):
        raise InvalidInputError(f"callback must be callable, got {type(callback).__name__}")


def _depth_first(
    graph: Sequence[Sequence[int]],
    callback: WalkCallback,
    root: int,
    post: bool,
) -> Any:
    """One recursive walk, calling back at pre- or post-visit time."""
    visited: set[int] = set()
    index = 0
    outcome: Any = None

    def notify(node: int) -> bool:
        nonlocal index, outcome
        signal = callback(node, index)
        index += 1
        if isinstance(signal, Stop):
            outcome = signal.result_for(node)
            return True
        return False

    def visit(node: int) -> bool:
        visited.add(node)
        if not post and notify(node):
            return True
        for child in graph[node]:
            if child not in visited and visit(child):
                return True
        return post and notify(node)

    visit(root)
    return outcome


def _replay(nodes: list[int], callback: WalkCallback) -> Any:
    """Invoke the callback over buffered nodes from last to first."""
    for index, node in enumerate(reversed(nodes)):
        signal = callback(node, index)
        if isinstance(signal, Stop):
            return signal.result_for(node)
    return None


def pre_order(graph: Sequence[Sequence[int]], callback: WalkCallback, root: int = 0) -> Any:
    """Depth-first walk calling back when a node is first entered.

    Args:
        graph: Adjacency list (used as is).
        callback: Called as ``callback(node, index)``; return ``Stop`` to abort.
        root: Start node.

    Returns:
        The Stop value (or the node stopped at), or None if never stopped.

    Raises:
        InvalidInputError: If callback is not callable.
    """
    _require_callable(callback)
    return _depth_first(graph, callback, root, post=False)


def post_order(graph: Sequence[Sequence[int]], callback: WalkCallback, root: int = 0) -> Any:
    """Depth-first walk calling back when a node's children are done."""
    _require_callable(callback)
    return _depth_first(graph, callback, root, post=True)


def r_pre_order(graph: Sequence[Sequence[int]], callback: WalkCallback, root: int = 0) -> Any:
    """Reverse pre-order: the full pre-order walk, replayed from the end.

    The forward walk runs to completion first; aborting only affects the
    replay. Indices count replay calls from 0.
    """
    _require_callable(callback)
    buffered: list[int] = []
    _depth_first(graph, lambda node, index: buffered.append(node), root, post=False)
    return _replay(buffered, callback)


def r_post_order(graph: Sequence[Sequence[int]], callback: WalkCallback, root: int = 0) -> Any:
    """Reverse post-order (a topological order for DAGs), replayed from the end."""
    _require_callable(callback)
    buffered: list[int] = []
    _depth_first(graph, lambda node, index: buffered.append(node), root, post=True)
    return _replay(buffered, callback)
