"""Tests for adjacency queries on directed graphs."""
from __future__ import annotations

from graphcore_lite.graph.adjacency import Graph
from graphcore_lite.graph.edge_id import EdgeDescriptor as E


class TestExampleGraph:
    def test_in_edges(self, directed_example: Graph) -> None:
        edges = list(directed_example.in_edges("b"))
        assert len(edges) == 2
        assert set(edges) == {E("a", "b"), E("e", "b")}

    def test_successors(self, directed_example: Graph) -> None:
        assert list(directed_example.successors("b")) == ["c"]

    def test_neighbors(self, directed_example: Graph) -> None:
        assert sorted(directed_example.neighbors("b")) == ["a", "c", "e"]

    def test_degrees(self, directed_example: Graph) -> None:
        assert directed_example.in_degree("b") == 2
        assert directed_example.out_degree("b") == 1
        assert directed_example.in_degree("missing") == 0


class TestPredecessorsSuccessors:
    def test_missing_node(self, g: Graph) -> None:
        assert list(g.predecessors("a")) == []
        assert list(g.successors("a")) == []
        assert list(g.neighbors("a")) == []

    def test_predecessors(self, g: Graph) -> None:
        g.set_edge("a", "b")
        g.set_edge("b", "c")
        g.set_edge("a", "a")
        assert sorted(g.predecessors("a")) == ["a"]
        assert sorted(g.predecessors("b")) == ["a"]
        assert sorted(g.predecessors("c")) == ["b"]

    def test_successors(self, g: Graph) -> None:
        g.set_edge("a", "b")
        g.set_edge("b", "c")
        g.set_edge("a", "a")
        assert sorted(g.successors("a")) == ["a", "b"]
        assert sorted(g.successors("b")) == ["c"]
        assert sorted(g.successors("c")) == []

    def test_neighbors_deduplicated(self, g: Graph) -> None:
        g.set_edge("a", "b")
        g.set_edge("b", "c")
        g.set_edge("a", "a")
        g.set_edge("c", "b")
        assert sorted(g.neighbors("a")) == ["a", "b"]
        assert sorted(g.neighbors("b")) == ["a", "c"]
        assert sorted(g.neighbors("c")) == ["b"]

    def test_restartable(self, directed_example: Graph) -> None:
        first = list(directed_example.neighbors("b"))
        assert list(directed_example.neighbors("b")) == first


class TestIsLeaf:
    def test_unconnected_directed(self, g: Graph) -> None:
        g.set_node("a")
        assert g.is_leaf("a")

    def test_predecessor_is_not_leaf(self, g: Graph) -> None:
        g.set_edge("a", "b")
        assert not g.is_leaf("a")

    def test_successor_is_leaf(self, g: Graph) -> None:
        g.set_edge("a", "b")
        assert g.is_leaf("b")


class TestInEdges:
    def test_missing_node(self, g: Graph) -> None:
        assert list(g.in_edges("a")) == []

    def test_edges_into_node(self, g: Graph) -> None:
        g.set_edge("a", "b")
        g.set_edge("b", "c")
        assert list(g.in_edges("a")) == []
        assert list(g.in_edges("b")) == [E("a", "b")]
        assert list(g.in_edges("c")) == [E("b", "c")]

    def test_filter_by_source(self, g: Graph) -> None:
        g.set_edge("a", "b")
        g.set_edge("c", "b")
        g.set_edge("z", "a")
        assert list(g.in_edges("b", "a")) == [E("a", "b")]
        assert list(g.in_edges("b", "z")) == []
        assert list(g.in_edges("a", "z")) == [E("z", "a")]


class TestOutEdges:
    def test_missing_node(self, g: Graph) -> None:
        assert list(g.out_edges("a")) == []

    def test_edges_from_node(self, g: Graph) -> None:
        g.set_edge("a", "b")
        g.set_edge("b", "c")
        assert list(g.out_edges("a")) == [E("a", "b")]
        assert list(g.out_edges("b")) == [E("b", "c")]
        assert list(g.out_edges("c")) == []

    def test_filter_by_target(self, g: Graph) -> None:
        g.set_edge("a", "b")
        g.set_edge("a", "c")
        g.set_edge("z", "a")
        assert list(g.out_edges("a", "b")) == [E("a", "b")]
        assert list(g.out_edges("a", "z")) == []
        assert list(g.out_edges("b", "a")) == []


class TestNodeEdges:
    def test_missing_node(self, g: Graph) -> None:
        assert list(g.node_edges("a")) == []

    def test_all_incident_edges(self, g: Graph) -> None:
        g.set_edge("a", "b")
        g.set_edge("b", "c")
        assert list(g.node_edges("a")) == [E("a", "b")]
        assert list(g.node_edges("b")) == [E("a", "b"), E("b", "c")]
        assert list(g.node_edges("c")) == [E("b", "c")]

    def test_filter_by_other_endpoint(self, g: Graph) -> None:
        g.set_edge("a", "b")
        g.set_edge("b", "a")
        g.set_edge("a", "c")
        assert list(g.node_edges("a", "b")) == [E("b", "a"), E("a", "b")]
        assert list(g.node_edges("b", "a")) == [E("a", "b"), E("b", "a")]
