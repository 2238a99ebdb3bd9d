"""Depth-first traversal."""

from typing import Any, Callable, Iterator

import structlog

from ..graph.weighted_graph import Node

logger = structlog.get_logger(__name__)


def iter_depth_first(start: Node) -> Iterator[Node]:
    """Yield nodes reachable from ``start`` in depth-first pre-order.

    Each reachable node is yielded exactly once. Children are explored in
    edge insertion order. An explicit stack replaces recursion, with edges
    pushed in reverse so the order matches the recursive walk.

    Args:
        start: The root node.

    Yields:
        Nodes in pre-order.
    """
    seen: set[str] = set()
    stack: list[Node] = [start]

    while stack:
        node = stack.pop()
        if node.name in seen:
            continue

        yield node
        seen.add(node.name)

        stack.extend(edge.target for edge in reversed(node.edges))


def traverse_depth_first(start: Node, visit: Callable[[Node], Any]) -> None:
    """Call ``visit`` on every node reachable from ``start``, in pre-order.

    The walk always runs to completion; the visitor's return value is
    ignored.

    Args:
        start: The root node.
        visit: Callback invoked once per reachable node.
    """
    visited = 0
    for node in iter_depth_first(start):
        visit(node)
        visited += 1

    logger.debug("depth_first_traversal_completed", start=start.name, visited=visited)
