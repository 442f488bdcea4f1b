"""
Directed-graph ordering algorithms: cycle detection and topological sort.

Kahn's algorithm repeatedly removes zero in-degree vertices; the DFS
variant reverses the finish order. Both report a cyclic graph as None
rather than returning a partial ordering.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.4 (Topological sort).
    - Kahn, A. B. "Topological sorting of large networks" (1962).
"""

from typing import Dict, Hashable, List, Optional

from adjgraph.logging import get_logger
from adjgraph.structures import Queue

from .core import GraphView
from .traversal import dfs_postorder

logger = get_logger(__name__)


def in_degrees(graph: GraphView) -> Dict[Hashable, int]:
    """
    Count incoming edges of every vertex.

    Returns:
        Dictionary vertex -> in-degree, in vertex insertion order.

    Complexity: O(V + E).
    """
    degree = {vertex: 0 for vertex in graph.get_all_vertices()}
    for vertex in degree:
        for edge in graph.get_neighbors(vertex):
            degree[edge.target] += 1
    return degree


def predecessors(graph: GraphView, vertex: Hashable) -> List[Hashable]:
    """Vertices with an edge into vertex, in insertion order."""
    return [
        u
        for u in graph.get_all_vertices()
        if any(edge.target == vertex for edge in graph.get_neighbors(u))
    ]


def has_directed_cycle(graph: GraphView) -> bool:
    """
    Whether a directed graph contains a cycle (self-loops included).

    Three-colour DFS; stops at the first back edge.

    Complexity: O(V + E).
    """
    _, found = dfs_postorder(graph, stop_at_back_edge=True)
    return found


def topological_sort_kahn(graph: GraphView) -> Optional[List[Hashable]]:
    """
    Topological order by Kahn's algorithm.

    Zero in-degree vertices are queued in insertion order; each dequeued
    vertex decrements its neighbors and enqueues those that reach zero.

    Returns:
        List with every edge u -> v having u before v, or None if the graph
        has a cycle.

    Complexity: O(V + E).

    Example:
        >>> g = DirectedGraph()
        >>> for v in "ABC":
        ...     g.add_vertex(v)
        >>> g.add_edge('A', 'C')
        >>> g.add_edge('B', 'C')
        >>> topological_sort_kahn(g)
        ['A', 'B', 'C']
    """
    degree = in_degrees(graph)
    queue = Queue(vertex for vertex, d in degree.items() if d == 0)
    order: List[Hashable] = []

    while not queue.is_empty():
        vertex = queue.dequeue()
        order.append(vertex)

        for edge in graph.get_neighbors(vertex):
            degree[edge.target] -= 1
            if degree[edge.target] == 0:
                queue.enqueue(edge.target)

    if len(order) < len(degree):
        logger.debug("Kahn's algorithm stalled after %d of %d vertices: cycle", len(order), len(degree))
        return None

    return order


def topological_sort_dfs(graph: GraphView) -> Optional[List[Hashable]]:
    """
    Topological order by reversed DFS finish order.

    Returns:
        List with every edge u -> v having u before v, or None if the graph
        has a cycle.

    Complexity: O(V + E).
    """
    finish, found = dfs_postorder(graph, stop_at_back_edge=True)
    if found:
        logger.debug("DFS topological sort found a back edge: cycle")
        return None
    finish.reverse()
    return finish


def sources(graph: GraphView) -> List[Hashable]:
    """Vertices with in-degree 0."""
    return [vertex for vertex, d in in_degrees(graph).items() if d == 0]


def sinks(graph: GraphView) -> List[Hashable]:
    """Vertices with out-degree 0."""
    return [vertex for vertex in graph.get_all_vertices() if not graph.get_neighbors(vertex)]
