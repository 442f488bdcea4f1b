"""Benchmark BFS and DFS traversal."""

import time
from typing import Dict

import numpy as np

from adjgraph import DirectedGraph


def random_digraph(n_vertices: int, avg_degree: float, seed: int = 0) -> DirectedGraph:
    """Random directed graph with about avg_degree outgoing edges per vertex."""
    rng = np.random.default_rng(seed)
    graph = DirectedGraph()
    for v in range(n_vertices):
        graph.add_vertex(v)
    n_edges = int(n_vertices * avg_degree)
    sources = rng.integers(0, n_vertices, n_edges)
    targets = rng.integers(0, n_vertices, n_edges)
    for u, v in zip(sources.tolist(), targets.tolist()):
        graph.add_edge(u, v)
    return graph


def benchmark_traversal(n_vertices: int, avg_degree: float = 4.0, repeats: int = 10) -> Dict[str, float]:
    """Benchmark full BFS and DFS from vertex 0.

    Args:
        n_vertices: Number of vertices.
        avg_degree: Average out-degree.
        repeats: Number of timed runs per traversal.

    Returns:
        Dictionary with timing results.
    """
    graph = random_digraph(n_vertices, avg_degree)

    # Warmup
    graph.get_bfs_order(0)
    graph.get_dfs_order(0)

    start = time.perf_counter()
    for _ in range(repeats):
        graph.get_bfs_order(0)
    bfs_time = (time.perf_counter() - start) / repeats

    start = time.perf_counter()
    for _ in range(repeats):
        graph.get_dfs_order(0)
    dfs_time = (time.perf_counter() - start) / repeats

    return {
        "n_vertices": n_vertices,
        "n_edges": graph.edge_count,
        "bfs_time_sec": bfs_time,
        "dfs_time_sec": dfs_time,
    }


if __name__ == "__main__":
    print("Benchmarking traversal...")

    results = benchmark_traversal(n_vertices=20000)
    print(f"Traversal (20k vertices, {results['n_edges']} edges):")
    print(f"  BFS: {results['bfs_time_sec']*1e3:.2f} ms")
    print(f"  DFS: {results['dfs_time_sec']*1e3:.2f} ms")
