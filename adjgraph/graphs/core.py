"""
Core graph data types and the shared adjacency store.

The store maps each vertex to an ordered list of outgoing edges. Vertex
insertion order and per-vertex edge order are preserved, so every
traversal built on top of it is deterministic without sorting.
"""

from dataclasses import dataclass
from typing import Dict, Hashable, Iterator, List, Optional, Protocol, Tuple

from .errors import VertexNotFoundError


@dataclass(frozen=True)
class Edge:
    """
    Outgoing edge stored in an adjacency list.

    Attributes:
        target: Vertex the edge points to.
        weight: Optional numeric weight. ``None`` means unweighted.
    """

    target: Hashable
    weight: Optional[float] = None

    @property
    def cost(self) -> float:
        """Weight used by shortest-path and MST algorithms (1 when unweighted)."""
        return 1 if self.weight is None else self.weight


@dataclass(frozen=True)
class WeightedEdge:
    """Edge with both endpoints, as listed by get_all_edges() and MST results."""

    source: Hashable
    target: Hashable
    weight: Optional[float] = None


@dataclass(frozen=True)
class WeightedPath:
    """Vertex path from source to target together with its total cost."""

    path: List[Hashable]
    distance: float


@dataclass(frozen=True)
class SpanningTree:
    """Edges of a minimum spanning tree and their summed cost."""

    edges: List[WeightedEdge]
    total_weight: float


class GraphView(Protocol):
    """
    Minimal read capability the algorithm modules depend on.

    Both DirectedGraph and UndirectedGraph satisfy it.
    """

    def has_vertex(self, vertex: Hashable) -> bool:
        ...

    def get_neighbors(self, vertex: Hashable) -> List[Edge]:
        ...

    def get_all_vertices(self) -> List[Hashable]:
        ...


class AdjacencyStore:
    """
    Ordered adjacency-list storage of directed arcs.

    Each arc u -> v appears at most once; re-adding it replaces the weight
    in place and keeps its position. Undirected graphs store each edge as
    two arcs (one for a self-loop).

    Complexity:
        - add_vertex / has_vertex: O(1) amortized
        - add_arc / remove_arc / has_arc: O(deg(u))
        - remove_vertex: O(V + E)
    """

    def __init__(self) -> None:
        self._adj: Dict[Hashable, List[Edge]] = {}
        self._arc_count = 0

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, vertex: Hashable) -> bool:
        return vertex in self._adj

    @property
    def arc_count(self) -> int:
        """Number of stored arcs (directed entries)."""
        return self._arc_count

    def require(self, vertex: Hashable, role: Optional[str] = None) -> List[Edge]:
        """
        Return the live arc list of a vertex.

        Raises:
            VertexNotFoundError: If the vertex is not in the store.
        """
        try:
            return self._adj[vertex]
        except KeyError:
            raise VertexNotFoundError(vertex, role) from None

    def add_vertex(self, vertex: Hashable) -> bool:
        """Add a vertex. Returns False if it was already present."""
        if vertex in self._adj:
            return False
        self._adj[vertex] = []
        return True

    def remove_vertex(self, vertex: Hashable) -> bool:
        """Remove a vertex with its outgoing and incoming arcs."""
        if vertex not in self._adj:
            return False

        self._arc_count -= len(self._adj.pop(vertex))
        for arcs in self._adj.values():
            index = self._find(arcs, vertex)
            if index is not None:
                del arcs[index]
                self._arc_count -= 1
        return True

    def add_arc(self, source: Hashable, target: Hashable, weight: Optional[float] = None) -> bool:
        """
        Add arc source -> target, or update its weight if it exists.

        Returns:
            True if a new arc was created, False if an existing one was updated.

        Raises:
            VertexNotFoundError: If either endpoint is missing.
        """
        arcs = self.require(source, "source")
        self.require(target, "target")

        index = self._find(arcs, target)
        if index is not None:
            arcs[index] = Edge(target, weight)
            return False

        arcs.append(Edge(target, weight))
        self._arc_count += 1
        return True

    def remove_arc(self, source: Hashable, target: Hashable) -> bool:
        """Remove arc source -> target. Returns False if absent."""
        arcs = self._adj.get(source)
        if arcs is None:
            return False

        index = self._find(arcs, target)
        if index is None:
            return False

        del arcs[index]
        self._arc_count -= 1
        return True

    def has_vertex(self, vertex: Hashable) -> bool:
        return vertex in self._adj

    def has_arc(self, source: Hashable, target: Hashable) -> bool:
        arcs = self._adj.get(source)
        return arcs is not None and self._find(arcs, target) is not None

    def arc_weight(self, source: Hashable, target: Hashable) -> Optional[float]:
        """Weight of arc source -> target, or None if absent or unweighted."""
        arcs = self._adj.get(source)
        if arcs is None:
            return None
        index = self._find(arcs, target)
        return None if index is None else arcs[index].weight

    def arcs(self, vertex: Hashable) -> List[Edge]:
        """
        Return a copy of the outgoing arcs of a vertex.

        Raises:
            VertexNotFoundError: If vertex is not in the store.
        """
        return list(self.require(vertex))

    def vertices(self) -> List[Hashable]:
        """Vertices in insertion order."""
        return list(self._adj)

    # GraphView aliases, so a bare store can be handed to the algorithms.
    get_neighbors = arcs
    get_all_vertices = vertices

    def items(self) -> Iterator[Tuple[Hashable, Tuple[Edge, ...]]]:
        """Iterate (vertex, arcs) pairs; arcs are returned as tuples."""
        for vertex, arcs in self._adj.items():
            yield vertex, tuple(arcs)

    def clear(self) -> None:
        self._adj.clear()
        self._arc_count = 0

    def copy(self) -> "AdjacencyStore":
        clone = AdjacencyStore()
        clone._adj = {vertex: list(arcs) for vertex, arcs in self._adj.items()}
        clone._arc_count = self._arc_count
        return clone

    @staticmethod
    def _find(arcs: List[Edge], target: Hashable) -> Optional[int]:
        for index, edge in enumerate(arcs):
            if edge.target == target:
                return index
        return None
