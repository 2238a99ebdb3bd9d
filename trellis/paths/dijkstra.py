"""Single-source shortest path costs (naive Dijkstra)."""

import math
from dataclasses import dataclass, field

import structlog

from ..graph.weighted_graph import Node
from ..traversal.breadth_first import iter_breadth_first

logger = structlog.get_logger(__name__)

# Cost of a node no relaxation has reached yet. Never present in results.
UNREACHABLE = math.inf


@dataclass
class _SolverState:
    """Working tables for one run, keyed by node name in discovery order."""

    nodes: dict[str, Node] = field(default_factory=dict)
    costs: dict[str, float] = field(default_factory=dict)
    parents: dict[str, str | None] = field(default_factory=dict)
    processed: set[str] = field(default_factory=set)


def dijkstra(start: Node) -> dict[str, int]:
    """Compute the minimal total weight from ``start`` to every reachable node.

    Uses a linear scan instead of a priority queue to pick the closest
    undecided node. Costs are Python integers, so long or heavy paths do
    not overflow. Predecessors are tracked but not returned.

    Args:
        start: The source node.

    Returns:
        Mapping from node name to minimal cost, in discovery order.
    """
    state = _discover(start)

    while True:
        name = _closest_undecided(state)
        if name is None:
            break

        cost = state.costs[name]
        for edge in state.nodes[name].edges:
            target = edge.target.name
            candidate = cost + edge.weight
            if candidate < state.costs[target]:
                state.costs[target] = candidate
                state.parents[target] = name

        state.processed.add(name)

    costs = {
        name: int(cost)
        for name, cost in state.costs.items()
        if cost != UNREACHABLE
    }
    logger.debug("dijkstra_completed", start=start.name, node_count=len(costs))
    return costs


def _discover(start: Node) -> _SolverState:
    """Initialize every node reachable from ``start`` as undecided."""
    state = _SolverState()
    for edge in iter_breadth_first(start):
        node = edge.target
        state.nodes[node.name] = node
        state.costs[node.name] = UNREACHABLE
        state.parents[node.name] = None

    state.costs[start.name] = 0
    return state


def _closest_undecided(state: _SolverState) -> str | None:
    """Get the undecided node with the smallest finite cost, first one on ties."""
    closest: str | None = None
    closest_cost = UNREACHABLE
    for name, cost in state.costs.items():
        if cost < closest_cost and name not in state.processed:
            closest = name
            closest_cost = cost
    return closest
