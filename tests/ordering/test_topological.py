"""Tests for topological ordering."""

import sys

import networkx as nx
import pytest

from trellis.errors import CycleError
from trellis.graph.weighted_graph import WeightedGraph
from trellis.ordering.topological import topological_sort, topological_sort_graph


def _names(nodes):
    return [node.name for node in nodes]


def _assert_edges_point_forward(graph, order):
    position = {node.name: i for i, node in enumerate(order)}
    for node in order:
        for edge in node.edges:
            if edge.target.name in position:
                assert position[node.name] < position[edge.target.name]


class TestTopologicalSort:
    def test_scenario_order(self, root):
        assert _names(topological_sort(root)) == ["R", "B", "E", "F", "A", "G", "C", "D"]

    def test_edges_point_forward(self, scenario_graph, root):
        order = topological_sort(root)

        _assert_edges_point_forward(scenario_graph, order)
        assert nx.is_directed_acyclic_graph(scenario_graph.networkx)

    def test_only_reachable_nodes(self, scenario_graph):
        order = topological_sort(scenario_graph.node("E"))

        assert _names(order) == ["E", "F", "A", "G", "C", "D"]

    def test_returns_handles(self, scenario_graph, root):
        order = topological_sort(root)

        assert order[0] == root
        assert order[-1].payload == 4

    def test_cycle_detected(self, cyclic_graph):
        with pytest.raises(CycleError) as exc_info:
            topological_sort(cyclic_graph.node("A"))

        assert exc_info.value.node == "A"
        assert exc_info.value.path == ["A", "B", "C", "A"]
        assert "not a dag" in str(exc_info.value).lower()

    def test_cycle_below_root(self, cyclic_graph):
        root = cyclic_graph.create("R")
        root.add_edge(cyclic_graph.node("D"), 1).add_edge(cyclic_graph.node("B"), 1)

        with pytest.raises(CycleError) as exc_info:
            topological_sort(root)

        assert exc_info.value.node == "B"
        assert exc_info.value.path == ["B", "C", "A", "B"]

    def test_self_loop_is_cycle(self):
        graph = WeightedGraph()
        a = graph.create("A")
        a.add_edge(a, 0)

        with pytest.raises(CycleError) as exc_info:
            topological_sort(a)

        assert exc_info.value.path == ["A", "A"]

    def test_unreachable_cycle_ignored(self, cyclic_graph):
        assert _names(topological_sort(cyclic_graph.node("D"))) == ["D"]

    def test_shared_descendant(self, diamond_graph):
        order = _names(topological_sort(diamond_graph.node("S")))

        assert order == ["S", "M", "L", "T"]

    def test_parallel_edges(self):
        graph = WeightedGraph()
        a = graph.create("A")
        b = graph.create("B")
        a.add_edge(b, 1).add_edge(b, 2)

        assert _names(topological_sort(a)) == ["A", "B"]

    def test_repeatable(self, root):
        assert topological_sort(root) == topological_sort(root)

    def test_deep_chain_does_not_recurse(self):
        graph = WeightedGraph()
        depth = sys.getrecursionlimit() + 100
        previous = graph.create("n0")
        for i in range(1, depth):
            node = graph.create(f"n{i}")
            previous.add_edge(node, 1)
            previous = node

        order = topological_sort(graph.node("n0"))

        assert _names(order) == [f"n{i}" for i in range(depth)]

    def test_deep_cycle_detected(self):
        graph = WeightedGraph()
        depth = sys.getrecursionlimit() + 100
        first = previous = graph.create("n0")
        for i in range(1, depth):
            node = graph.create(f"n{i}")
            previous.add_edge(node, 1)
            previous = node
        previous.add_edge(first, 1)

        with pytest.raises(CycleError) as exc_info:
            topological_sort(first)

        assert exc_info.value.node == "n0"
        assert len(exc_info.value.path) == depth + 1

    def test_cycle_error_repeatable(self, cyclic_graph):
        for _ in range(2):
            with pytest.raises(CycleError):
                topological_sort(cyclic_graph.node("A"))


class TestTopologicalSortGraph:
    def test_disconnected_components(self):
        graph = WeightedGraph()
        a = graph.create("A")
        b = graph.create("B")
        x = graph.create("X")
        y = graph.create("Y")
        a.add_edge(b, 1)
        x.add_edge(y, 1)

        order = topological_sort_graph(graph)

        assert _names(order) == ["X", "Y", "A", "B"]
        _assert_edges_point_forward(graph, order)

    def test_multiple_roots_sharing_nodes(self, scenario_graph):
        late_root = scenario_graph.create("Q")
        late_root.add_edge(scenario_graph.node("R"), 1)

        order = topological_sort_graph(scenario_graph)

        assert len(order) == 9
        assert order[0].name == "Q"
        _assert_edges_point_forward(scenario_graph, order)

    def test_nodes_created_before_their_root(self):
        graph = WeightedGraph()
        leaf = graph.create("leaf")
        root = graph.create("root")
        root.add_edge(leaf, 1)

        order = topological_sort_graph(graph)

        assert _names(order) == ["root", "leaf"]

    def test_cycle_detected(self, cyclic_graph):
        with pytest.raises(CycleError):
            topological_sort_graph(cyclic_graph)

    def test_matches_networkx_dag_check(self, scenario_graph):
        order = topological_sort_graph(scenario_graph)

        assert set(_names(order)) == set(scenario_graph.networkx.nodes)

    def test_empty_graph(self):
        assert topological_sort_graph(WeightedGraph()) == []
