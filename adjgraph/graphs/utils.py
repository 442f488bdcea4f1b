"""
Utility functions for graph algorithms.

Provides helpers for vertex indexing, edge listing and path reconstruction.
"""

from typing import Dict, Hashable, Iterable, List, Optional, Set, Tuple

from .core import Edge, GraphView, WeightedEdge


def vertex_index_map(vertices: Iterable[Hashable]) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Map vertices to indices 0..n-1 in first-seen order.

    Duplicates are ignored, so the mapping is stable for any iterable.

    Args:
        vertices: Iterable of hashable vertices.

    Returns:
        Tuple of (vertex_to_index dict, index_to_vertex list).

    Example:
        >>> vertex_to_idx, idx_to_vertex = vertex_index_map(['c', 'a', 'c', 'b'])
        >>> vertex_to_idx
        {'c': 0, 'a': 1, 'b': 2}
        >>> idx_to_vertex
        ['c', 'a', 'b']
    """
    vertex_to_index: Dict[Hashable, int] = {}
    for vertex in vertices:
        if vertex not in vertex_to_index:
            vertex_to_index[vertex] = len(vertex_to_index)
    return vertex_to_index, list(vertex_to_index)


def reconstruct_path(
    parent: Dict[Hashable, Optional[Hashable]], source: Hashable, target: Hashable
) -> Optional[List[Hashable]]:
    """
    Walk a parent map back from target to source.

    The parent map must come from a search rooted at ``source``: every
    discovered vertex maps to the vertex it was reached from.

    Args:
        parent: Dictionary mapping vertex -> predecessor on the search tree.
        source: Root of the search.
        target: Vertex to reconstruct the path to.

    Returns:
        List of vertices from source to target (inclusive), or None if
        target was never discovered.

    Example:
        >>> parent = {'B': 'A', 'C': 'B'}
        >>> reconstruct_path(parent, 'A', 'C')
        ['A', 'B', 'C']
        >>> reconstruct_path(parent, 'A', 'D') is None
        True
    """
    if target == source:
        return [source]
    if target not in parent:
        return None

    path = [target]
    current = target
    seen = {target}
    while current != source:
        if current not in parent:
            return None
        current = parent[current]
        if current in seen:
            # Cyclic parent chain; no path to report.
            return None
        seen.add(current)
        path.append(current)

    path.reverse()
    return path


def undirected_edges(graph: GraphView) -> List[WeightedEdge]:
    """
    List each undirected edge once, from a symmetric adjacency view.

    Vertices are scanned in insertion order; an edge is reported from the
    endpoint seen first. Self-loops are reported once.

    Args:
        graph: Graph whose adjacency is symmetric.

    Returns:
        List of WeightedEdge(source, target, weight) with the stored weight
        (None for unweighted edges).
    """
    edges: List[WeightedEdge] = []
    done: Set[Hashable] = set()

    for u in graph.get_all_vertices():
        for edge in graph.get_neighbors(u):
            if edge.target not in done:
                edges.append(WeightedEdge(u, edge.target, edge.weight))
        done.add(u)

    return edges


def format_edge(edge: Edge) -> str:
    """Render an adjacency entry as ``target`` or ``target(weight)``."""
    if edge.weight is None:
        return str(edge.target)
    return f"{edge.target}({edge.weight})"
