"""Reachability search built on breadth-first traversal."""

from typing import Any

from ..graph.node_types import TraversalSignal
from ..graph.weighted_graph import Edge, Node
from ..traversal.breadth_first import iter_breadth_first, traverse_breadth_first


def find_node(start: Node, target_name: str) -> Node | None:
    """Find the node named ``target_name`` among nodes reachable from ``start``.

    Args:
        start: The root node.
        target_name: Name to look for.

    Returns:
        The matching node, or None if it is unreachable or does not exist.
    """
    found: Node | None = None

    def visit(edge: Edge) -> TraversalSignal:
        nonlocal found
        if edge.target.name == target_name:
            found = edge.target
            return TraversalSignal.STOP
        return TraversalSignal.CONTINUE

    traverse_breadth_first(start, visit)
    return found


def breadth_first_search(start: Node, target_name: str) -> Any:
    """Get the payload of the node named ``target_name``.

    Absence is not an error. A found node whose payload is None is
    indistinguishable from a miss here; use :func:`find_node` for that.

    Args:
        start: The root node.
        target_name: Name to look for.

    Returns:
        The node's payload, or None if it is not reachable from ``start``.
    """
    node = find_node(start, target_name)
    if node is None:
        return None
    return node.payload


def reachable_names(start: Node) -> list[str]:
    """Get names of all nodes reachable from ``start`` in breadth-first order."""
    return [edge.target.name for edge in iter_breadth_first(start)]
