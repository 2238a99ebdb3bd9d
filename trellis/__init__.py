"""Trellis: an in-memory directed, weighted graph library."""

from .errors import (
    CycleError,
    DefinitionError,
    DuplicateNodeError,
    ForeignNodeError,
    GraphError,
    InvalidWeightError,
    UnknownNodeError,
)
from .graph import (
    MAX_WEIGHT,
    MIN_WEIGHT,
    Edge,
    Node,
    TraversalSignal,
    WeightedGraph,
    add_edge,
    create,
)
from .graph.builder import build_graph
from .log_config import configure_logging, get_logger
from .ordering import topological_sort, topological_sort_graph
from .paths import UNREACHABLE, dijkstra
from .schema import GraphDefinition, parse_definition
from .search import breadth_first_search, find_node, reachable_names
from .traversal import (
    iter_breadth_first,
    iter_depth_first,
    traverse_breadth_first,
    traverse_depth_first,
)

__version__ = "0.1.0"

__all__ = [
    "CycleError",
    "DefinitionError",
    "DuplicateNodeError",
    "ForeignNodeError",
    "GraphError",
    "InvalidWeightError",
    "UnknownNodeError",
    "MAX_WEIGHT",
    "MIN_WEIGHT",
    "Edge",
    "Node",
    "TraversalSignal",
    "WeightedGraph",
    "add_edge",
    "create",
    "build_graph",
    "configure_logging",
    "get_logger",
    "topological_sort",
    "topological_sort_graph",
    "UNREACHABLE",
    "dijkstra",
    "GraphDefinition",
    "parse_definition",
    "breadth_first_search",
    "find_node",
    "reachable_names",
    "iter_breadth_first",
    "iter_depth_first",
    "traverse_breadth_first",
    "traverse_depth_first",
]
