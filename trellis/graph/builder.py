"""Builder for converting a GraphDefinition to a WeightedGraph."""

from typing import Any

import structlog

from ..schema.loader import parse_definition
from ..schema.models import GraphDefinition
from .weighted_graph import WeightedGraph

logger = structlog.get_logger(__name__)


def build_graph(definition: GraphDefinition | dict[str, Any]) -> WeightedGraph:
    """Build a WeightedGraph from a definition.

    Args:
        definition: A GraphDefinition, or a raw mapping to validate first.

    Returns:
        A graph with every defined node and edge, in declaration order.

    Raises:
        DefinitionError: If a raw mapping fails validation.
    """
    if not isinstance(definition, GraphDefinition):
        definition = parse_definition(definition)

    graph = WeightedGraph()

    # Add all nodes first
    for node in definition.nodes:
        graph.create(node.name, node.payload)

    # Edges reference nodes by name (after all nodes exist)
    for edge in definition.edges:
        graph.add_edge(edge.source, edge.target, edge.weight)

    logger.info(
        "graph_built",
        node_count=len(graph),
        edge_count=graph.edge_count,
    )
    return graph
