"""Tests for adjacency-matrix interop."""

import numpy as np
import pytest

from adjgraph.graphs import (
    DirectedGraph,
    UndirectedGraph,
    VertexNotFoundError,
    adjacency_matrix,
    from_adjacency_matrix,
)


class TestAdjacencyMatrix:
    """Tests for graph -> matrix conversion."""

    def test_unweighted_edges_are_one(self, make_directed):
        G = make_directed("ABC", [("A", "B"), ("B", "C")])
        np.testing.assert_array_equal(
            adjacency_matrix(G),
            np.array([[0, 1, 0], [0, 0, 1], [0, 0, 0]], dtype=float),
        )

    def test_custom_vertex_order_drops_outside_edges(self, weighted_digraph):
        W = adjacency_matrix(weighted_digraph, vertices=["C", "B"])
        np.testing.assert_array_equal(W, np.array([[0, 1], [0, 0]], dtype=float))

    def test_unknown_vertex_raises(self, weighted_digraph):
        with pytest.raises(VertexNotFoundError):
            adjacency_matrix(weighted_digraph, vertices=["A", "Z"])

    def test_dtype(self, make_undirected):
        G = make_undirected("AB", [("A", "B", 3)])
        W = adjacency_matrix(G, dtype=np.int64)
        assert W.dtype == np.int64
        assert W.tolist() == [[0, 3], [3, 0]]

    def test_empty_graph(self):
        assert adjacency_matrix(DirectedGraph()).shape == (0, 0)


class TestFromAdjacencyMatrix:
    """Tests for matrix -> graph conversion."""

    def test_directed_with_labels(self):
        G = from_adjacency_matrix([[0, 2.5], [0, 0]], labels=["x", "y"])
        assert isinstance(G, DirectedGraph)
        assert G.get_all_vertices() == ["x", "y"]
        assert G.get_edge_weight("x", "y") == 2.5
        assert not G.has_edge("y", "x")

    def test_default_labels_and_isolated_rows(self):
        G = from_adjacency_matrix(np.zeros((3, 3)))
        assert G.get_all_vertices() == [0, 1, 2]
        assert G.edge_count == 0

    def test_undirected(self):
        W = np.array([[0, 1, 4], [1, 0, 0], [4, 0, 2]])
        G = from_adjacency_matrix(W, labels="ABC", directed=False)
        assert isinstance(G, UndirectedGraph)
        assert G.edge_count == 3
        assert G.get_edge_weight("C", "A") == 4
        assert G.get_edge_weight("C", "C") == 2
        assert G.get_degree("C") == 2

    def test_weights_are_python_numbers(self):
        G = from_adjacency_matrix(np.array([[0, 7], [0, 0]], dtype=np.int32))
        assert type(G.get_edge_weight(0, 1)) is int

    def test_round_trip_preserves_weights(self, weighted_digraph):
        G = from_adjacency_matrix(weighted_digraph.to_adjacency_matrix(), labels="ABCD")
        np.testing.assert_array_equal(G.to_adjacency_matrix(), weighted_digraph.to_adjacency_matrix())

    @pytest.mark.parametrize(
        "matrix,kwargs,message",
        [
            ([[0, 1, 0], [1, 0, 0]], {}, "square"),
            ([0, 1], {}, "square"),
            ([[0, 1], [1, 0]], {"labels": ["a"]}, "labels"),
            ([[0, 1], [1, 0]], {"labels": ["a", "a"]}, "unique"),
            ([[0, 1], [0, 0]], {"directed": False}, "symmetric"),
        ],
    )
    def test_invalid_input(self, matrix, kwargs, message):
        with pytest.raises(ValueError, match=message):
            from_adjacency_matrix(matrix, **kwargs)
