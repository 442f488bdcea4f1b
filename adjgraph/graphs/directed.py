"""
Directed graph over an ordered adjacency store.

Both endpoints of an edge must be added with add_vertex() first. The
class owns its store and delegates every algorithm to the free functions
in the sibling modules.
"""

from typing import Callable, Hashable, Iterator, List, Optional, Tuple

import numpy as np

from adjgraph.diagnostics import check_components

from . import components, dag, shortest, traversal
from .core import AdjacencyStore, Edge, WeightedPath
from .matrix import adjacency_matrix
from .utils import format_edge


class DirectedGraph:
    """
    Directed graph with optional edge weights.

    Vertices may be any hashable value. Vertex insertion order and the
    order of each vertex's outgoing edges are preserved and decide
    traversal tie-breaking. An edge u -> v says nothing about v -> u.

    Example:
        >>> g = DirectedGraph()
        >>> for v in "ABC":
        ...     g.add_vertex(v)
        >>> g.add_edge('A', 'B', 4)
        >>> g.add_edge('B', 'C')
        >>> g.topological_sort()
        ['A', 'B', 'C']
    """

    def __init__(self) -> None:
        self._store = AdjacencyStore()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_vertex(self, vertex: Hashable) -> None:
        """Add a vertex; adding an existing vertex does nothing."""
        self._store.add_vertex(vertex)

    def remove_vertex(self, vertex: Hashable) -> bool:
        """Remove a vertex and every edge into or out of it."""
        return self._store.remove_vertex(vertex)

    def add_edge(self, source: Hashable, target: Hashable, weight: Optional[float] = None) -> None:
        """
        Add edge source -> target, or update its weight if it already exists.

        Raises:
            VertexNotFoundError: If either vertex was never added.
        """
        self._store.add_arc(source, target, weight)

    def remove_edge(self, source: Hashable, target: Hashable) -> bool:
        """Remove edge source -> target only. Returns False if absent."""
        return self._store.remove_arc(source, target)

    def clear(self) -> None:
        self._store.clear()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_vertex(self, vertex: Hashable) -> bool:
        return self._store.has_vertex(vertex)

    def has_edge(self, source: Hashable, target: Hashable) -> bool:
        return self._store.has_arc(source, target)

    def get_neighbors(self, vertex: Hashable) -> List[Edge]:
        """
        Outgoing edges of a vertex, as a copy.

        Raises:
            VertexNotFoundError: If vertex is not in graph.
        """
        return self._store.arcs(vertex)

    def get_edge_weight(self, source: Hashable, target: Hashable) -> Optional[float]:
        return self._store.arc_weight(source, target)

    def get_all_vertices(self) -> List[Hashable]:
        return self._store.vertices()

    @property
    def vertex_count(self) -> int:
        return len(self._store)

    @property
    def edge_count(self) -> int:
        return self._store.arc_count

    def get_degree(self, vertex: Hashable) -> int:
        """Out-degree of vertex."""
        return self.get_out_degree(vertex)

    def get_out_degree(self, vertex: Hashable) -> int:
        return len(self._store.require(vertex))

    def get_in_degree(self, vertex: Hashable) -> int:
        """
        Number of edges into vertex.

        Raises:
            VertexNotFoundError: If vertex is not in graph.
        """
        self._store.require(vertex)
        return len(dag.predecessors(self, vertex))

    def get_predecessors(self, vertex: Hashable) -> List[Hashable]:
        """
        Vertices with an edge into vertex.

        Raises:
            VertexNotFoundError: If vertex is not in graph.
        """
        self._store.require(vertex)
        return dag.predecessors(self, vertex)

    # ------------------------------------------------------------------
    # Traversal and paths
    # ------------------------------------------------------------------

    def get_bfs_order(self, start: Hashable) -> List[Hashable]:
        return traversal.bfs_order(self, start)

    def get_dfs_order(self, start: Hashable) -> List[Hashable]:
        return traversal.dfs_order(self, start)

    def traverse_bfs(self, start: Hashable, callback: Callable[[Hashable], None]) -> None:
        traversal.traverse_bfs(self, start, callback)

    def traverse_dfs(self, start: Hashable, callback: Callable[[Hashable], None]) -> None:
        traversal.traverse_dfs(self, start, callback)

    def has_path(self, source: Hashable, target: Hashable) -> bool:
        return traversal.has_path(self, source, target)

    def find_shortest_path(self, source: Hashable, target: Hashable) -> Optional[List[Hashable]]:
        """Fewest-edge path, or None if unreachable."""
        return shortest.shortest_path(self, source, target)

    def find_shortest_path_weighted(self, source: Hashable, target: Hashable) -> Optional[WeightedPath]:
        """Minimum-cost path by Dijkstra; negative weights raise NegativeWeightError."""
        return shortest.shortest_path_weighted(self, source, target)

    def find_shortest_path_bellman_ford(
        self, source: Hashable, target: Hashable
    ) -> Optional[WeightedPath]:
        """Minimum-cost path allowing negative weights."""
        return shortest.shortest_path_bellman_ford(self, source, target)

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def has_cycle(self) -> bool:
        return dag.has_directed_cycle(self)

    def is_dag(self) -> bool:
        return not self.has_cycle()

    def topological_sort(self) -> Optional[List[Hashable]]:
        """Kahn's algorithm; None if the graph has a cycle."""
        return dag.topological_sort_kahn(self)

    def topological_sort_dfs(self) -> Optional[List[Hashable]]:
        """DFS finish-order sort; None if the graph has a cycle."""
        return dag.topological_sort_dfs(self)

    def get_strongly_connected_components(self) -> List[List[Hashable]]:
        return check_components(
            components.strongly_connected_components(self, self.transpose()),
            self.get_all_vertices(),
        )

    def get_connected_components(self) -> List[List[Hashable]]:
        """Strongly connected components."""
        return self.get_strongly_connected_components()

    def transpose(self) -> "DirectedGraph":
        """New graph with the same vertices and every edge reversed."""
        reversed_graph = DirectedGraph()
        reversed_graph._store = components.transpose_adjacency(self)
        return reversed_graph

    def get_sources(self) -> List[Hashable]:
        return dag.sources(self)

    def get_sinks(self) -> List[Hashable]:
        return dag.sinks(self)

    def to_adjacency_matrix(self, vertices: Optional[List[Hashable]] = None) -> np.ndarray:
        return adjacency_matrix(self, vertices)

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Tuple[Hashable, Tuple[Edge, ...]]]:
        return self._store.items()

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, vertex: Hashable) -> bool:
        return vertex in self._store

    def __repr__(self) -> str:
        return f"DirectedGraph(vertices={self.vertex_count}, edges={self.edge_count})"

    def to_string(self) -> str:
        lines = [repr(self)]
        for vertex, edges in self:
            targets = ", ".join(format_edge(edge) for edge in edges)
            lines.append(f"  {vertex} -> {targets}".rstrip())
        return "\n".join(lines)

    __str__ = to_string
