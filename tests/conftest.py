"""Pytest configuration and shared fixtures for adjgraph tests.

This module provides:
- A deterministic numpy RNG for randomized property checks
- Factories that build graphs from vertex and edge lists
- Isolation of the global debug-mode switch between tests
"""

import os
from typing import Callable, Iterable, Optional, Sequence, Tuple

import numpy as np
import pytest

from adjgraph.diagnostics import is_debug_enabled, set_debug_enabled
from adjgraph.graphs import DirectedGraph, UndirectedGraph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This keeps randomized graphs reproducible while allowing override for debugging.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode():
    """Auto-use fixture restoring the global debug flag after each test."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)


def _build(graph, vertices: Iterable, edges: Iterable[Tuple]):
    for vertex in vertices:
        graph.add_vertex(vertex)
    for edge in edges:
        graph.add_edge(*edge)
    return graph


@pytest.fixture
def make_directed() -> Callable[..., DirectedGraph]:
    """Factory: make_directed("ABC", [("A", "B", 1), ("B", "C")])."""

    def factory(vertices: Iterable = (), edges: Iterable[Tuple] = ()) -> DirectedGraph:
        return _build(DirectedGraph(), vertices, edges)

    return factory


@pytest.fixture
def make_undirected() -> Callable[..., UndirectedGraph]:
    """Factory: make_undirected("ABC", [("A", "B", 1), ("B", "C")])."""

    def factory(vertices: Iterable = (), edges: Iterable[Tuple] = ()) -> UndirectedGraph:
        return _build(UndirectedGraph(), vertices, edges)

    return factory


@pytest.fixture
def weighted_digraph(make_directed) -> DirectedGraph:
    """A->B(4), A->C(2), C->B(1), B->D(5), C->D(8)."""
    return make_directed(
        "ABCD",
        [("A", "B", 4), ("A", "C", 2), ("C", "B", 1), ("B", "D", 5), ("C", "D", 8)],
    )


@pytest.fixture
def square_with_diagonal(make_undirected) -> UndirectedGraph:
    """A-B(1), B-C(2), C-D(3), D-A(4), A-C(5); MST weight 6."""
    return make_undirected(
        "ABCD",
        [("A", "B", 1), ("B", "C", 2), ("C", "D", 3), ("D", "A", 4), ("A", "C", 5)],
    )


@pytest.fixture
def random_edges(rng: np.random.Generator) -> Callable[..., Sequence[Tuple]]:
    """Factory for Erdos-Renyi style edge lists over vertices 0..n-1 with integer weights."""

    def factory(
        n: int, p: float, directed: bool, max_weight: Optional[int] = 9
    ) -> Sequence[Tuple[int, int, Optional[int]]]:
        edges = []
        for u in range(n):
            for v in range(n) if directed else range(u + 1, n):
                if u != v and rng.random() < p:
                    weight = None if max_weight is None else int(rng.integers(1, max_weight + 1))
                    edges.append((u, v, weight))
        return edges

    return factory
