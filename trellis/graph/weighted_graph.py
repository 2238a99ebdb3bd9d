"""WeightedGraph arena and node handles backed by networkx."""

from dataclasses import dataclass
from itertools import count
from typing import Any, Iterator, Union

import networkx as nx
import structlog

from ..errors import DuplicateNodeError, ForeignNodeError, InvalidWeightError, UnknownNodeError
from .node_types import MAX_WEIGHT, MIN_WEIGHT

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Edge:
    """A directed, weighted connection to a target node."""

    target: "Node"
    weight: int


class Node:
    """Handle to a node stored in a WeightedGraph.

    A handle only holds the owning graph and the node name. All node data
    lives in the graph, so edges never hold references to other handles
    and cyclic graphs create no reference cycles between nodes.
    """

    __slots__ = ("_graph", "_name")

    def __init__(self, graph: "WeightedGraph", name: str):
        self._graph = graph
        self._name = name

    @property
    def name(self) -> str:
        """Get the node name."""
        return self._name

    @property
    def graph(self) -> "WeightedGraph":
        """Get the graph owning this node."""
        return self._graph

    @property
    def payload(self) -> Any:
        """Get the value associated with the node."""
        return self._graph.payload_of(self._name)

    @property
    def edges(self) -> tuple[Edge, ...]:
        """Get outgoing edges in insertion order."""
        return tuple(self._graph.edges_from(self._name))

    def add_edge(self, target: "Node", weight: int) -> "Node":
        """Append an outgoing edge and return this handle for chaining.

        Args:
            target: The node the edge points to.
            weight: Integer weight in the range 0-255.

        Returns:
            This node.

        Raises:
            InvalidWeightError: If the weight is out of range.
            ForeignNodeError: If the target belongs to another graph.
        """
        self._graph.add_edge(self, target, weight)
        return self

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Node)
            and self._graph is other._graph
            and self._name == other._name
        )

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"Node({self._name!r})"


NodeRef = Union[Node, str]


class WeightedGraph:
    """An arena of named nodes connected by directed, weighted edges.

    Wraps a networkx MultiDiGraph so that parallel edges and self-loops
    are kept as separate entries. Each edge records a graph-wide sequence
    number; outgoing edges are always returned in insertion order.

    Not thread-safe: do not add nodes or edges while an algorithm runs.
    """

    def __init__(self):
        """Initialize an empty graph."""
        self._graph = nx.MultiDiGraph()
        self._seq = count()

    @property
    def networkx(self) -> nx.MultiDiGraph:
        """Get a read-only view of the underlying networkx graph."""
        return self._graph.copy(as_view=True)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def create(self, name: str, payload: Any = None) -> Node:
        """Create a node and return its handle.

        Args:
            name: Unique node name.
            payload: Arbitrary value carried by the node.

        Returns:
            The new node handle.

        Raises:
            DuplicateNodeError: If the name is already used in this graph.
        """
        if self._graph.has_node(name):
            raise DuplicateNodeError(name)

        self._graph.add_node(name, payload=payload)
        logger.debug("node_created", node=name, node_count=len(self._graph))
        return Node(self, name)

    def add_edge(self, source: NodeRef, target: NodeRef, weight: int) -> Node:
        """Append an edge from source to target.

        Args:
            source: Source node handle or name.
            target: Target node handle or name.
            weight: Integer weight in the range 0-255.

        Returns:
            The source node handle.

        Raises:
            UnknownNodeError: If a name does not exist in this graph.
            ForeignNodeError: If a handle belongs to another graph.
            InvalidWeightError: If the weight is out of range.
        """
        source_name = self._resolve(source)
        target_name = self._resolve(target)
        _check_weight(weight)

        self._graph.add_edge(source_name, target_name, weight=weight, seq=next(self._seq))
        logger.debug(
            "edge_added",
            source=source_name,
            target=target_name,
            weight=weight,
        )
        return Node(self, source_name)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def node(self, name: str) -> Node:
        """Get a node handle by name.

        Raises:
            UnknownNodeError: If the name does not exist.
        """
        if not self._graph.has_node(name):
            raise UnknownNodeError(name)
        return Node(self, name)

    def get(self, name: str) -> Node | None:
        """Get a node handle by name, or None if it does not exist."""
        if self._graph.has_node(name):
            return Node(self, name)
        return None

    def nodes(self) -> list[Node]:
        """Get all nodes in creation order."""
        return [Node(self, name) for name in self._graph.nodes]

    def payload_of(self, name: str) -> Any:
        """Get the payload of a node by name."""
        if not self._graph.has_node(name):
            raise UnknownNodeError(name)
        return self._graph.nodes[name]["payload"]

    def edges_from(self, name: str) -> list[Edge]:
        """Get outgoing edges of a node in insertion order."""
        if not self._graph.has_node(name):
            raise UnknownNodeError(name)

        # networkx groups parallel edges by neighbour, so restore insertion order
        out = sorted(
            self._graph.out_edges(name, data=True),
            key=lambda item: item[2]["seq"],
        )
        return [Edge(Node(self, target), data["weight"]) for _, target, data in out]

    @property
    def edge_count(self) -> int:
        """Get the total number of edges."""
        return self._graph.number_of_edges()

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Node):
            return item.graph is self and self._graph.has_node(item.name)
        return self._graph.has_node(item)

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes())

    def __repr__(self) -> str:
        return f"WeightedGraph(nodes={len(self)}, edges={self.edge_count})"

    def _resolve(self, ref: NodeRef) -> str:
        """Get the name behind a handle or name, checking ownership."""
        if isinstance(ref, Node):
            if ref.graph is not self:
                raise ForeignNodeError(ref.name)
            return ref.name
        if not self._graph.has_node(ref):
            raise UnknownNodeError(ref)
        return ref


def _check_weight(weight: object) -> None:
    """Validate that a weight is an integer in the allowed range."""
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise InvalidWeightError(
            f"Edge weight must be an integer, got {type(weight).__name__}", weight
        )
    if not MIN_WEIGHT <= weight <= MAX_WEIGHT:
        raise InvalidWeightError(
            f"Edge weight must be between {MIN_WEIGHT} and {MAX_WEIGHT}, got {weight}",
            weight,
        )


def create(graph: WeightedGraph, name: str, payload: Any = None) -> Node:
    """Create a node in ``graph``. See :meth:`WeightedGraph.create`."""
    return graph.create(name, payload)


def add_edge(handle: Node, target: Node, weight: int) -> Node:
    """Append an edge to ``handle``. See :meth:`Node.add_edge`."""
    return handle.add_edge(target, weight)
