"""Benchmark Dijkstra and minimum spanning trees on weighted graphs."""

import time
from typing import Dict

import numpy as np

from adjgraph import UndirectedGraph
from adjgraph.graphs import dijkstra, kruskal_mst, prim_mst


def random_weighted_graph(n_vertices: int, avg_degree: float, seed: int = 0) -> UndirectedGraph:
    """Random undirected graph with integer weights in 1..100, made connected by a ring."""
    rng = np.random.default_rng(seed)
    graph = UndirectedGraph()
    for v in range(n_vertices):
        graph.add_vertex(v)
    for v in range(n_vertices):
        graph.add_edge(v, (v + 1) % n_vertices, int(rng.integers(1, 101)))
    n_extra = int(n_vertices * (avg_degree - 2) / 2)
    for _ in range(max(n_extra, 0)):
        u, v = rng.integers(0, n_vertices, 2).tolist()
        graph.add_edge(u, v, int(rng.integers(1, 101)))
    return graph


def benchmark_weighted(n_vertices: int, avg_degree: float = 6.0) -> Dict[str, float]:
    """Benchmark single-source Dijkstra, Prim and Kruskal.

    Args:
        n_vertices: Number of vertices.
        avg_degree: Average degree.

    Returns:
        Dictionary with timing results.
    """
    graph = random_weighted_graph(n_vertices, avg_degree)

    start = time.perf_counter()
    dist, _ = dijkstra(graph, 0)
    dijkstra_time = time.perf_counter() - start

    start = time.perf_counter()
    prim = prim_mst(graph)
    prim_time = time.perf_counter() - start

    start = time.perf_counter()
    kruskal = kruskal_mst(graph)
    kruskal_time = time.perf_counter() - start

    assert prim.total_weight == kruskal.total_weight

    return {
        "n_vertices": n_vertices,
        "n_edges": graph.edge_count,
        "max_distance": max(dist.values()),
        "dijkstra_time_sec": dijkstra_time,
        "prim_time_sec": prim_time,
        "kruskal_time_sec": kruskal_time,
    }


if __name__ == "__main__":
    print("Benchmarking weighted algorithms...")

    results = benchmark_weighted(n_vertices=10000)
    print(f"Weighted (10k vertices, {results['n_edges']} edges):")
    print(f"  Dijkstra: {results['dijkstra_time_sec']*1e3:.2f} ms")
    print(f"  Prim:     {results['prim_time_sec']*1e3:.2f} ms")
    print(f"  Kruskal:  {results['kruskal_time_sec']*1e3:.2f} ms")
