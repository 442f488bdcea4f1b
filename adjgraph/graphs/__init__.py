"""
Graph engine for adjgraph.

This package provides:
- Graph classes (DirectedGraph, UndirectedGraph) over an ordered adjacency store
- Traversal algorithms (BFS, DFS, finish order)
- Shortest path algorithms (BFS hop count, Dijkstra, Bellman-Ford)
- Ordering algorithms (cycle detection, Kahn and DFS topological sort)
- Components (connected, strongly connected via Kosaraju, bipartite sets)
- Minimum spanning trees (Prim, Kruskal)
- Dense adjacency-matrix interop

Algorithms are free functions over the GraphView protocol; results follow
vertex and edge insertion order, so they are deterministic.
"""

from .components import (
    bipartite_sets,
    connected_components,
    has_undirected_cycle,
    strongly_connected_components,
    transpose_adjacency,
)
from .core import AdjacencyStore, Edge, GraphView, SpanningTree, WeightedEdge, WeightedPath
from .dag import (
    has_directed_cycle,
    in_degrees,
    predecessors,
    sinks,
    sources,
    topological_sort_dfs,
    topological_sort_kahn,
)
from .directed import DirectedGraph
from .errors import GraphError, NegativeCycleError, NegativeWeightError, VertexNotFoundError
from .matrix import adjacency_matrix, from_adjacency_matrix
from .mst import kruskal_mst, prim_mst
from .shortest import (
    bellman_ford,
    dijkstra,
    shortest_path,
    shortest_path_bellman_ford,
    shortest_path_weighted,
)
from .traversal import (
    bfs_order,
    dfs_order,
    dfs_postorder,
    has_path,
    iter_bfs,
    iter_dfs,
    traverse_bfs,
    traverse_dfs,
)
from .undirected import UndirectedGraph
from .utils import reconstruct_path, undirected_edges, vertex_index_map

__all__ = [
    "AdjacencyStore",
    "Edge",
    "GraphView",
    "SpanningTree",
    "WeightedEdge",
    "WeightedPath",
    "DirectedGraph",
    "UndirectedGraph",
    "GraphError",
    "VertexNotFoundError",
    "NegativeWeightError",
    "NegativeCycleError",
    "bfs_order",
    "dfs_order",
    "iter_bfs",
    "iter_dfs",
    "traverse_bfs",
    "traverse_dfs",
    "dfs_postorder",
    "has_path",
    "shortest_path",
    "shortest_path_weighted",
    "shortest_path_bellman_ford",
    "dijkstra",
    "bellman_ford",
    "has_directed_cycle",
    "in_degrees",
    "predecessors",
    "sources",
    "sinks",
    "topological_sort_kahn",
    "topological_sort_dfs",
    "connected_components",
    "strongly_connected_components",
    "transpose_adjacency",
    "has_undirected_cycle",
    "bipartite_sets",
    "prim_mst",
    "kruskal_mst",
    "adjacency_matrix",
    "from_adjacency_matrix",
    "vertex_index_map",
    "reconstruct_path",
    "undirected_edges",
]

# Example usage:
# from adjgraph.graphs import DirectedGraph
#
# G = DirectedGraph()
# for v in "ABCD":
#     G.add_vertex(v)
# G.add_edge('A', 'B', 4)
# G.add_edge('A', 'C', 2)
# G.add_edge('C', 'B', 1)
# G.add_edge('B', 'D', 5)
# G.find_shortest_path_weighted('A', 'D')  # WeightedPath(path=['A', 'C', 'B', 'D'], distance=8)
