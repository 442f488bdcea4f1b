"""Tests for component algorithms."""

import pytest

from adjgraph.diagnostics import is_partition
from adjgraph.graphs import (
    bipartite_sets,
    connected_components,
    has_undirected_cycle,
    strongly_connected_components,
    transpose_adjacency,
)


@pytest.fixture
def two_loops(make_directed):
    """Cycle A -> B -> C -> A feeding the two-cycle D <-> E."""
    return make_directed(
        "ABCDE",
        [("A", "B"), ("B", "C"), ("C", "A"), ("C", "D"), ("D", "E"), ("E", "D")],
    )


class TestConnectedComponents:
    """Tests for undirected connected components."""

    def test_two_components_and_isolated(self, make_undirected):
        G = make_undirected("ABCDEF", [("A", "B"), ("B", "C"), ("D", "E")])
        assert connected_components(G) == [["A", "B", "C"], ["D", "E"], ["F"]]

    def test_components_are_bfs_ordered(self, make_undirected):
        G = make_undirected("ABCD", [("A", "D"), ("A", "B"), ("D", "C")])
        assert connected_components(G) == [["A", "D", "B", "C"]]

    def test_partition(self, make_undirected, random_edges):
        G = make_undirected(range(30), random_edges(30, 0.05, directed=False))
        assert is_partition(connected_components(G), G.get_all_vertices())

    def test_empty(self, make_undirected):
        assert connected_components(make_undirected()) == []


class TestTranspose:
    """Tests for edge reversal."""

    def test_reverses_edges_and_keeps_weights(self, make_directed):
        G = make_directed("ABC", [("A", "B", 2), ("B", "C")])
        T = transpose_adjacency(G)
        assert T.vertices() == ["A", "B", "C"]
        assert T.has_arc("B", "A") and T.has_arc("C", "B")
        assert not T.has_arc("A", "B")
        assert T.arc_weight("B", "A") == 2
        assert T.arc_count == 2

    def test_does_not_modify_source(self, make_directed):
        G = make_directed("AB", [("A", "B")])
        transpose_adjacency(G)
        assert G.has_edge("A", "B") and not G.has_edge("B", "A")


class TestStronglyConnected:
    """Tests for Kosaraju's algorithm."""

    def test_two_loops(self, two_loops):
        assert strongly_connected_components(two_loops) == [["A", "C", "B"], ["D", "E"]]

    def test_dag_gives_singletons(self, make_directed):
        G = make_directed("ABC", [("A", "B"), ("B", "C")])
        result = strongly_connected_components(G)
        assert sorted(map(tuple, result)) == [("A",), ("B",), ("C",)]

    def test_self_loop_is_singleton(self, make_directed):
        G = make_directed("AB", [("A", "A"), ("A", "B")])
        assert sorted(map(tuple, strongly_connected_components(G))) == [("A",), ("B",)]

    def test_partition_on_random_graphs(self, make_directed, random_edges):
        G = make_directed(range(40), random_edges(40, 0.04, directed=True))
        result = strongly_connected_components(G)
        assert is_partition(result, G.get_all_vertices())

    def test_mutual_reachability(self, make_directed, random_edges):
        """Every pair inside a component reaches each other."""
        G = make_directed(range(15), random_edges(15, 0.12, directed=True))
        for component in strongly_connected_components(G):
            for u in component:
                for v in component:
                    assert G.has_path(u, v)

    def test_precomputed_transpose(self, two_loops):
        T = transpose_adjacency(two_loops)
        assert strongly_connected_components(two_loops, T) == strongly_connected_components(two_loops)

    def test_empty(self, make_directed):
        assert strongly_connected_components(make_directed()) == []


class TestUndirectedCycle:
    """Tests for has_undirected_cycle."""

    def test_tree_has_no_cycle(self, make_undirected):
        G = make_undirected("ABCD", [("A", "B"), ("A", "C"), ("C", "D")])
        assert not has_undirected_cycle(G)

    def test_single_edge_is_not_cycle(self, make_undirected):
        """Test that the mirror arc of an edge is not mistaken for a cycle."""
        assert not has_undirected_cycle(make_undirected("AB", [("A", "B")]))

    def test_triangle(self, make_undirected):
        G = make_undirected("ABC", [("A", "B"), ("B", "C"), ("C", "A")])
        assert has_undirected_cycle(G)

    def test_self_loop(self, make_undirected):
        assert has_undirected_cycle(make_undirected("A", [("A", "A")]))

    def test_cycle_in_second_component(self, make_undirected):
        G = make_undirected("ABCDE", [("A", "B"), ("C", "D"), ("D", "E"), ("E", "C")])
        assert has_undirected_cycle(G)

    def test_square_with_diagonal(self, square_with_diagonal):
        assert has_undirected_cycle(square_with_diagonal)


class TestBipartite:
    """Tests for two-colouring."""

    def test_path(self, make_undirected):
        G = make_undirected("ABCD", [("A", "B"), ("B", "C"), ("C", "D")])
        assert bipartite_sets(G) == (["A", "C"], ["B", "D"])

    def test_even_cycle(self, make_undirected):
        G = make_undirected("ABCD", [("A", "B"), ("B", "C"), ("C", "D"), ("D", "A")])
        assert bipartite_sets(G) == (["A", "C"], ["B", "D"])

    def test_odd_cycle(self, make_undirected):
        G = make_undirected("ABC", [("A", "B"), ("B", "C"), ("C", "A")])
        assert bipartite_sets(G) is None

    def test_self_loop(self, make_undirected):
        assert bipartite_sets(make_undirected("AB", [("A", "B"), ("B", "B")])) is None

    def test_each_component_starts_left(self, make_undirected):
        G = make_undirected("ABCD", [("A", "B"), ("C", "D")])
        assert bipartite_sets(G) == (["A", "C"], ["B", "D"])

    def test_empty(self, make_undirected):
        assert bipartite_sets(make_undirected()) == ([], [])
