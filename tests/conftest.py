"""Shared fixtures for tests."""

import pytest

from trellis.graph.weighted_graph import Node, WeightedGraph


@pytest.fixture
def scenario_graph() -> WeightedGraph:
    """Return the eight-node DAG with an edge from F back up to A.

    Edges: R->A(1), R->B(9), A->C(6), A->G(3), B->D(2), B->E(5),
    C->D(7), E->F(8), F->A(0), F->G(4). Payloads are 0-7.
    """
    graph = WeightedGraph()
    r = graph.create("R", 0)
    a = graph.create("A", 1)
    b = graph.create("B", 2)
    c = graph.create("C", 3)
    d = graph.create("D", 4)
    e = graph.create("E", 5)
    f = graph.create("F", 6)
    g = graph.create("G", 7)

    r.add_edge(a, 1).add_edge(b, 9)
    a.add_edge(c, 6).add_edge(g, 3)
    b.add_edge(d, 2).add_edge(e, 5)
    c.add_edge(d, 7)
    e.add_edge(f, 8)
    f.add_edge(a, 0).add_edge(g, 4)

    return graph


@pytest.fixture
def root(scenario_graph) -> Node:
    """Return the root of the scenario graph."""
    return scenario_graph.node("R")


@pytest.fixture
def cyclic_graph() -> WeightedGraph:
    """Return a graph with the cycle A -> B -> C -> A and a leaf D."""
    graph = WeightedGraph()
    a = graph.create("A", "a")
    b = graph.create("B", "b")
    c = graph.create("C", "c")
    d = graph.create("D", "d")

    a.add_edge(b, 1).add_edge(d, 1)
    b.add_edge(c, 1)
    c.add_edge(a, 1)

    return graph


@pytest.fixture
def diamond_graph() -> WeightedGraph:
    """Return S -> (L, M) -> T, where the lighter route goes through M."""
    graph = WeightedGraph()
    s = graph.create("S")
    left = graph.create("L")
    middle = graph.create("M")
    t = graph.create("T")

    s.add_edge(left, 1).add_edge(middle, 4)
    left.add_edge(t, 10)
    middle.add_edge(t, 2)

    return graph
