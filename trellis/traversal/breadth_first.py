"""Breadth-first traversal with early termination."""

from collections import deque
from typing import Callable, Iterator

import structlog

from ..graph.node_types import TraversalSignal
from ..graph.weighted_graph import Edge, Node

logger = structlog.get_logger(__name__)

BreadthFirstVisitor = Callable[[Edge], TraversalSignal | None]


def iter_breadth_first(start: Node) -> Iterator[Edge]:
    """Yield the edges through which nodes are discovered, level by level.

    The walk is seeded with a synthetic zero-weight edge pointing at
    ``start``. Each reachable node is yielded once, in non-decreasing hop
    count, ties broken by edge insertion order. Weights do not affect the
    order. A node's outgoing edges are queued only after the consumer
    resumes the generator, so breaking out of the loop is the same as
    stopping the walk.

    Args:
        start: The root node.

    Yields:
        The edge whose target is the newly discovered node.
    """
    seen: set[str] = set()
    queue: deque[Edge] = deque([Edge(start, 0)])

    while queue:
        edge = queue.popleft()
        node = edge.target
        if node.name in seen:
            continue

        yield edge

        seen.add(node.name)
        queue.extend(node.edges)


def traverse_breadth_first(start: Node, visit: BreadthFirstVisitor) -> bool:
    """Call ``visit`` on each discovered edge until it returns STOP.

    Args:
        start: The root node.
        visit: Callback returning TraversalSignal.CONTINUE or
            TraversalSignal.STOP (or the string "stop"). Anything else,
            including None, is treated as CONTINUE.

    Returns:
        True if the visitor stopped the walk, False if every reachable
        node was visited.
    """
    visited = 0
    for edge in iter_breadth_first(start):
        visited += 1
        if visit(edge) == TraversalSignal.STOP:
            logger.debug(
                "breadth_first_traversal_stopped",
                start=start.name,
                stopped_at=edge.target.name,
                visited=visited,
            )
            return True

    logger.debug("breadth_first_traversal_completed", start=start.name, visited=visited)
    return False
