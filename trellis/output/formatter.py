"""Diagnostic visitors that describe a node and its outgoing edges."""

import structlog

from ..graph.node_types import TraversalSignal
from ..graph.weighted_graph import Edge, Node

logger = structlog.get_logger(__name__)


def format_node(node: Node) -> str:
    """Format a node name followed by one line per outgoing edge.

    A node without edges is shown with a single `` -> ()`` line.
    """
    lines = [node.name]
    if not node.edges:
        lines.append(" -> ()")
    for edge in node.edges:
        lines.append(f" -> {edge.target.name} ({edge.weight})")
    return "\n".join(lines)


def log_node(node: Node) -> None:
    """Depth-first visitor that logs a node and its edges."""
    logger.info(
        "node_visited",
        node=node.name,
        edges=[(edge.target.name, edge.weight) for edge in node.edges],
    )


def log_edge(edge: Edge) -> TraversalSignal:
    """Breadth-first visitor that logs the discovered node and never stops."""
    log_node(edge.target)
    return TraversalSignal.CONTINUE
