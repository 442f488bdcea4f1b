"""
Undirected graph over a symmetric adjacency store.

Every edge {u, v} is stored as arcs u -> v and v -> u with the same weight;
a self-loop is a single arc, counts as one edge and adds 1 to its degree.
Both endpoints must be added with add_vertex() first.
"""

from typing import Callable, Hashable, Iterator, List, Optional, Tuple

import numpy as np

from adjgraph.diagnostics import check_components, check_undirected_store

from . import components, mst, shortest, traversal
from .core import AdjacencyStore, Edge, SpanningTree, WeightedEdge, WeightedPath
from .matrix import adjacency_matrix
from .utils import format_edge, undirected_edges


class UndirectedGraph:
    """
    Undirected graph with optional edge weights.

    edge_count counts each undirected edge once. When debug mode is on,
    every mutation re-checks that the store is symmetric.

    Example:
        >>> g = UndirectedGraph()
        >>> for v in "ABC":
        ...     g.add_vertex(v)
        >>> g.add_edge('A', 'B', 1)
        >>> g.add_edge('B', 'C', 2)
        >>> g.find_minimum_spanning_tree().total_weight
        3
    """

    def __init__(self) -> None:
        self._store = AdjacencyStore()
        self._edge_count = 0

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_vertex(self, vertex: Hashable) -> None:
        """Add a vertex; adding an existing vertex does nothing."""
        self._store.add_vertex(vertex)

    def remove_vertex(self, vertex: Hashable) -> bool:
        """Remove a vertex and every edge touching it."""
        if not self._store.has_vertex(vertex):
            return False
        self._edge_count -= len(self._store.require(vertex))
        self._store.remove_vertex(vertex)
        check_undirected_store(self._store)
        return True

    def add_edge(self, u: Hashable, v: Hashable, weight: Optional[float] = None) -> None:
        """
        Add edge {u, v}, or update its weight on both sides if it exists.

        Raises:
            VertexNotFoundError: If either vertex was never added.
        """
        self._store.require(u, "source")
        self._store.require(v, "target")

        created = self._store.add_arc(u, v, weight)
        if u != v:
            self._store.add_arc(v, u, weight)
        if created:
            self._edge_count += 1
        check_undirected_store(self._store)

    def remove_edge(self, u: Hashable, v: Hashable) -> bool:
        """Remove edge {u, v}. Returns False if absent."""
        if not self._store.remove_arc(u, v):
            return False
        if u != v:
            self._store.remove_arc(v, u)
        self._edge_count -= 1
        check_undirected_store(self._store)
        return True

    def clear(self) -> None:
        self._store.clear()
        self._edge_count = 0

    def clone(self) -> "UndirectedGraph":
        """Independent copy with the same vertices, edges and weights."""
        copy = UndirectedGraph()
        copy._store = self._store.copy()
        copy._edge_count = self._edge_count
        return copy

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_vertex(self, vertex: Hashable) -> bool:
        return self._store.has_vertex(vertex)

    def has_edge(self, u: Hashable, v: Hashable) -> bool:
        return self._store.has_arc(u, v)

    def get_neighbors(self, vertex: Hashable) -> List[Edge]:
        """
        Edges incident to a vertex, as a copy.

        Raises:
            VertexNotFoundError: If vertex is not in graph.
        """
        return self._store.arcs(vertex)

    def get_edge_weight(self, u: Hashable, v: Hashable) -> Optional[float]:
        return self._store.arc_weight(u, v)

    def get_all_vertices(self) -> List[Hashable]:
        return self._store.vertices()

    def get_all_edges(self) -> List[WeightedEdge]:
        """Each edge once, reported from the endpoint added first."""
        return undirected_edges(self)

    @property
    def vertex_count(self) -> int:
        return len(self._store)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def get_degree(self, vertex: Hashable) -> int:
        """
        Number of incident edges (a self-loop counts once).

        Raises:
            VertexNotFoundError: If vertex is not in graph.
        """
        return len(self._store.require(vertex))

    def get_density(self) -> float:
        """Edge count over the V(V-1)/2 possible edges; 0 below two vertices."""
        n = self.vertex_count
        if n < 2:
            return 0.0
        return 2 * self._edge_count / (n * (n - 1))

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

    def has_path(self, u: Hashable, v: Hashable) -> bool:
        return traversal.has_path(self, u, v)

    def find_shortest_path(self, source: Hashable, target: Hashable) -> Optional[List[Hashable]]:
        return shortest.shortest_path(self, source, target)

    def find_shortest_path_weighted(self, source: Hashable, target: Hashable) -> Optional[WeightedPath]:
        return shortest.shortest_path_weighted(self, source, target)

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def has_cycle(self) -> bool:
        return components.has_undirected_cycle(self)

    def get_connected_components(self) -> List[List[Hashable]]:
        return check_components(components.connected_components(self), self.get_all_vertices())

    def is_connected(self) -> bool:
        """True if there is at most one component (an empty graph is connected)."""
        return len(components.connected_components(self)) <= 1

    def is_tree(self) -> bool:
        """Connected, acyclic and exactly V-1 edges; an empty graph is not a tree."""
        return (
            self._edge_count == self.vertex_count - 1
            and self.is_connected()
            and not self.has_cycle()
        )

    def is_bipartite(self) -> Optional[Tuple[List[Hashable], List[Hashable]]]:
        """
        Two-colour partition (left, right), or None if not bipartite.

        The returned tuple is truthy even for an empty graph, so the result
        can be used directly as a condition.
        """
        return components.bipartite_sets(self)

    def find_minimum_spanning_tree(self, start: Hashable = mst._FIRST_VERTEX) -> Optional[SpanningTree]:
        """Prim's algorithm from start (default: first vertex added); None if disconnected."""
        return mst.prim_mst(self, start)

    def find_minimum_spanning_tree_kruskal(self) -> Optional[SpanningTree]:
        """Kruskal's algorithm; None if the graph is disconnected."""
        return mst.kruskal_mst(self)

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
        return f"UndirectedGraph(vertices={self.vertex_count}, edges={self.edge_count})"

    def to_string(self) -> str:
        lines = [repr(self)]
        for vertex, edges in self:
            targets = ", ".join(format_edge(edge) for edge in edges)
            lines.append(f"  {vertex} -- {targets}".rstrip())
        return "\n".join(lines)

    __str__ = to_string
