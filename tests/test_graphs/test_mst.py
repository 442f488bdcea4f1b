"""Tests for minimum spanning tree algorithms."""

import pytest

from adjgraph.graphs import (
    SpanningTree,
    UndirectedGraph,
    VertexNotFoundError,
    WeightedEdge,
    connected_components,
    kruskal_mst,
    prim_mst,
)


def edge_pairs(tree):
    """Edges of a spanning tree as a set of unordered endpoint pairs."""
    return {frozenset((e.source, e.target)) for e in tree.edges}


class TestPrim:
    """Tests for Prim's algorithm."""

    def test_square_with_diagonal(self, square_with_diagonal):
        tree = prim_mst(square_with_diagonal)
        assert tree.total_weight == 6
        assert tree.edges == [
            WeightedEdge("A", "B", 1),
            WeightedEdge("B", "C", 2),
            WeightedEdge("C", "D", 3),
        ]

    def test_explicit_start(self, square_with_diagonal):
        """Test that the start vertex changes the edge order, not the weight."""
        tree = prim_mst(square_with_diagonal, start="D")
        assert tree.total_weight == 6
        assert tree.edges[0] == WeightedEdge("D", "C", 3)
        assert edge_pairs(tree) == {frozenset("AB"), frozenset("BC"), frozenset("CD")}

    def test_missing_start_raises(self, square_with_diagonal):
        with pytest.raises(VertexNotFoundError):
            prim_mst(square_with_diagonal, start="Z")

    def test_none_is_a_valid_start(self, make_undirected):
        """Test that None can be used as a vertex and as the start."""
        G = make_undirected(["A", None, "B"], [("A", None, 2), (None, "B", 1), ("A", "B", 5)])
        tree = prim_mst(G, start=None)
        assert tree.total_weight == 3
        assert tree.edges[0] == WeightedEdge(None, "B", 1)
        assert G.find_minimum_spanning_tree(start=None) == tree

    def test_none_start_missing_raises(self, square_with_diagonal):
        with pytest.raises(VertexNotFoundError):
            prim_mst(square_with_diagonal, start=None)

    def test_disconnected_returns_none(self, make_undirected):
        G = make_undirected("ABCD", [("A", "B", 1), ("C", "D", 1)])
        assert prim_mst(G) is None

    def test_empty_graph(self):
        assert prim_mst(UndirectedGraph()) == SpanningTree([], 0)

    def test_single_vertex(self, make_undirected):
        assert prim_mst(make_undirected("A")) == SpanningTree([], 0)

    def test_unweighted_edges_cost_one(self, make_undirected):
        G = make_undirected("ABC", [("A", "B"), ("B", "C"), ("A", "C")])
        tree = prim_mst(G)
        assert tree.total_weight == 2
        assert all(e.weight == 1 for e in tree.edges)

    def test_cheaper_edge_replaces_queued_entry(self, make_undirected):
        """Test that a cheaper crossing edge found later wins."""
        G = make_undirected("ABC", [("A", "C", 10), ("A", "B", 1), ("B", "C", 1)])
        tree = prim_mst(G)
        assert tree.total_weight == 2
        assert WeightedEdge("B", "C", 1) in tree.edges


class TestKruskal:
    """Tests for Kruskal's algorithm."""

    def test_square_with_diagonal(self, square_with_diagonal):
        tree = kruskal_mst(square_with_diagonal)
        assert tree.total_weight == 6
        assert [e.weight for e in tree.edges] == [1, 2, 3]
        assert edge_pairs(tree) == {frozenset("AB"), frozenset("BC"), frozenset("CD")}

    def test_disconnected_returns_none(self, make_undirected):
        G = make_undirected("ABCD", [("A", "B", 1), ("C", "D", 1)])
        assert kruskal_mst(G) is None

    def test_isolated_vertex_returns_none(self, make_undirected):
        G = make_undirected("ABC", [("A", "B", 1)])
        assert kruskal_mst(G) is None

    def test_empty_graph(self):
        assert kruskal_mst(UndirectedGraph()) == SpanningTree([], 0)

    def test_ties_keep_insertion_order(self, make_undirected):
        """Test that among equal weights the first inserted edge is kept."""
        G = make_undirected("ABC", [("A", "B", 1), ("B", "C", 1), ("A", "C", 1)])
        tree = kruskal_mst(G)
        assert edge_pairs(tree) == {frozenset("AB"), frozenset("AC")}

    def test_self_loop_ignored(self, make_undirected):
        G = make_undirected("AB", [("A", "A", 0), ("A", "B", 3)])
        tree = kruskal_mst(G)
        assert tree.total_weight == 3
        assert edge_pairs(tree) == {frozenset("AB")}


class TestAgreement:
    """Prim and Kruskal must agree on total weight."""

    @pytest.mark.parametrize("n,p", [(6, 0.6), (12, 0.35), (25, 0.2)])
    def test_random_graphs(self, make_undirected, random_edges, n, p):
        G = make_undirected(range(n), random_edges(n, p, directed=False))
        prim = prim_mst(G)
        kruskal = kruskal_mst(G)

        if len(connected_components(G)) > 1:
            assert prim is None and kruskal is None
            return

        assert prim.total_weight == kruskal.total_weight
        assert len(prim.edges) == len(kruskal.edges) == n - 1

    def test_disagreeing_edge_sets_have_equal_weight(self, make_undirected):
        """Test that tied weights may pick different edges but the same total."""
        G = make_undirected("ABC", [("B", "C", 1), ("A", "B", 1), ("A", "C", 1)])
        assert prim_mst(G).total_weight == kruskal_mst(G).total_weight == 2
