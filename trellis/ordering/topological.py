"""Topological ordering by depth-first search with cycle detection."""

from collections import deque
from typing import NoReturn

import structlog

from ..errors import CycleError
from ..graph.node_types import Mark
from ..graph.weighted_graph import Node, WeightedGraph

logger = structlog.get_logger(__name__)


def topological_sort(start: Node) -> list[Node]:
    """Order the nodes reachable from ``start`` so every edge points forward.

    Only nodes reachable from ``start`` are ordered. For a graph with
    several roots or disconnected parts use :func:`topological_sort_graph`.

    Args:
        start: The root node.

    Returns:
        Nodes in reverse post-order: for every edge u -> v, u comes before v.

    Raises:
        CycleError: If a cycle is reachable from ``start``.
    """
    marks: dict[str, Mark] = {}
    order: deque[Node] = deque()

    _visit(start, marks, order)

    logger.debug("topological_sort_completed", start=start.name, node_count=len(order))
    return list(order)


def topological_sort_graph(graph: WeightedGraph) -> list[Node]:
    """Order every node of ``graph``, whatever its roots.

    Each node not yet marked starts a new visit, in creation order, and all
    visits share one mark table. Nodes never reached from an earlier root
    are still ordered.

    Args:
        graph: The graph to order.

    Returns:
        All nodes, with every edge pointing forward.

    Raises:
        CycleError: If the graph contains a cycle.
    """
    marks: dict[str, Mark] = {}
    order: deque[Node] = deque()

    for node in graph.nodes():
        if node.name not in marks:
            _visit(node, marks, order)

    logger.debug("topological_sort_completed", node_count=len(order))
    return list(order)


def _visit(root: Node, marks: dict[str, Mark], order: deque[Node]) -> None:
    """Depth-first visit from ``root``, prepending finished nodes to ``order``.

    Iterative form of the recursive visit: ``path`` holds the nodes marked
    temporary and ``pending`` the remaining edges of each of them.
    """
    mark = marks.get(root.name)
    if mark is Mark.PERMANENT:
        return
    if mark is Mark.TEMPORARY:
        _raise_cycle(root.name, [root.name])

    marks[root.name] = Mark.TEMPORARY
    path: list[Node] = [root]
    pending = [iter(root.edges)]

    while pending:
        edge = next(pending[-1], None)

        if edge is None:
            # All children done
            pending.pop()
            node = path.pop()
            marks[node.name] = Mark.PERMANENT
            order.appendleft(node)
            continue

        target = edge.target
        mark = marks.get(target.name)
        if mark is Mark.PERMANENT:
            continue
        if mark is Mark.TEMPORARY:
            names = [node.name for node in path]
            _raise_cycle(target.name, [*names[names.index(target.name):], target.name])

        marks[target.name] = Mark.TEMPORARY
        path.append(target)
        pending.append(iter(target.edges))


def _raise_cycle(name: str, cycle: list[str]) -> NoReturn:
    logger.warning("cycle_detected", node=name, path=cycle)
    raise CycleError(name, cycle)
