"""Graph layer: node arena, handles and edges.

``build_graph`` lives in :mod:`trellis.graph.builder`, which depends on the
schema layer and is therefore not imported here.
"""

from .node_types import MAX_WEIGHT, MIN_WEIGHT, Mark, TraversalSignal
from .weighted_graph import Edge, Node, WeightedGraph, add_edge, create

__all__ = [
    "MAX_WEIGHT",
    "MIN_WEIGHT",
    "Mark",
    "TraversalSignal",
    "Edge",
    "Node",
    "WeightedGraph",
    "add_edge",
    "create",
]
