"""Tests for reachability search."""

import pytest

from trellis.graph.weighted_graph import WeightedGraph
from trellis.search.reachability import breadth_first_search, find_node, reachable_names


class TestBreadthFirstSearch:
    def test_found(self, root):
        assert breadth_first_search(root, "F") == 6

    def test_not_found(self, root):
        assert breadth_first_search(root, "Press F") is None

    def test_start_is_target(self, root):
        assert breadth_first_search(root, "R") == 0

    def test_existing_but_unreachable(self, scenario_graph):
        assert breadth_first_search(scenario_graph.node("D"), "R") is None

    @pytest.mark.parametrize(
        "name,payload",
        [("R", 0), ("A", 1), ("B", 2), ("C", 3), ("D", 4), ("E", 5), ("F", 6), ("G", 7)],
    )
    def test_every_reachable_payload(self, root, name, payload):
        assert breadth_first_search(root, name) == payload

    def test_does_not_mutate_graph(self, scenario_graph, root):
        before = [(n.name, n.edges) for n in scenario_graph.nodes()]

        breadth_first_search(root, "F")
        breadth_first_search(root, "nothing")

        assert [(n.name, n.edges) for n in scenario_graph.nodes()] == before

    def test_terminates_on_cycle(self, cyclic_graph):
        assert breadth_first_search(cyclic_graph.node("A"), "Z") is None


class TestFindNode:
    def test_found_handle(self, scenario_graph, root):
        assert find_node(root, "G") == scenario_graph.node("G")

    def test_none_payload_distinguished(self):
        graph = WeightedGraph()
        start = graph.create("S")
        start.add_edge(graph.create("N", None), 1)

        assert breadth_first_search(start, "N") is None
        assert find_node(start, "N") is not None
        assert find_node(start, "missing") is None


class TestReachableNames:
    def test_breadth_first_order(self, root):
        assert reachable_names(root) == ["R", "A", "B", "C", "G", "D", "E", "F"]

    def test_leaf(self, scenario_graph):
        assert reachable_names(scenario_graph.node("G")) == ["G"]
