"""
Shortest path algorithms: BFS (hop count), Dijkstra and Bellman-Ford.

Dijkstra's algorithm for non-negative edge weights.
Bellman-Ford algorithm for graphs with negative weights (detects negative cycles).
Unweighted edges cost 1 in both weighted algorithms.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS), 24.3 (Dijkstra) and 24.1 (Bellman-Ford).
"""

import math
from typing import Dict, Hashable, List, Optional, Tuple

from adjgraph.logging import get_logger
from adjgraph.structures import PriorityQueue, Queue

from .core import GraphView, WeightedPath
from .errors import NegativeCycleError, NegativeWeightError, VertexNotFoundError
from .utils import reconstruct_path

logger = get_logger(__name__)


def shortest_path(graph: GraphView, source: Hashable, target: Hashable) -> Optional[List[Hashable]]:
    """
    Path with the fewest edges from source to target.

    BFS records a parent the first time each vertex is discovered and stops
    as soon as the target is discovered.

    Args:
        graph: Graph to search.
        source: Start vertex.
        target: Destination vertex.

    Returns:
        List of vertices from source to target, ``[source]`` when they are
        equal, or None if target is missing or unreachable.

    Raises:
        VertexNotFoundError: If source is not in graph.

    Complexity: O(V + E).
    """
    if not graph.has_vertex(source):
        raise VertexNotFoundError(source, "source")
    if source == target:
        return [source]
    if not graph.has_vertex(target):
        return None

    parent: Dict[Hashable, Hashable] = {}
    visited = {source}
    queue = Queue([source])

    while not queue.is_empty():
        vertex = queue.dequeue()
        for edge in graph.get_neighbors(vertex):
            if edge.target in visited:
                continue
            visited.add(edge.target)
            parent[edge.target] = vertex
            if edge.target == target:
                return reconstruct_path(parent, source, target)
            queue.enqueue(edge.target)

    logger.debug("No path from %r to %r", source, target)
    return None


def _check_non_negative(graph: GraphView) -> None:
    for u in graph.get_all_vertices():
        for edge in graph.get_neighbors(u):
            if edge.cost < 0:
                raise NegativeWeightError(u, edge.target, edge.cost)


def dijkstra(
    graph: GraphView, source: Hashable, target: Optional[Hashable] = None
) -> Tuple[Dict[Hashable, float], Dict[Hashable, Hashable]]:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Every vertex starts in the priority queue at distance infinity except
    the source at 0. The minimum is extracted repeatedly and its outgoing
    edges are relaxed, lowering neighbor priorities in place.

    Args:
        graph: Graph with non-negative edge weights.
        source: Source vertex.
        target: Optional vertex; the search stops once it is extracted.

    Returns:
        Tuple of:
        - dist: Dictionary mapping vertex -> shortest distance from source
          (``math.inf`` if unreachable or not settled before early stop)
        - parent: Dictionary mapping vertex -> previous vertex on the
          shortest path (absent for the source and unreached vertices)

    Raises:
        VertexNotFoundError: If source is not in graph.
        NegativeWeightError: If graph contains negative edge weights.

    Complexity: O((V + E) log V) using a binary heap.
    """
    if not graph.has_vertex(source):
        raise VertexNotFoundError(source, "source")

    _check_non_negative(graph)

    dist: Dict[Hashable, float] = {}
    parent: Dict[Hashable, Hashable] = {}
    pq: PriorityQueue = PriorityQueue()

    for vertex in graph.get_all_vertices():
        dist[vertex] = math.inf
    dist[source] = 0

    # Remaining vertices follow insertion order, which breaks ties.
    pq.push(source, 0)
    for vertex in graph.get_all_vertices():
        if vertex != source:
            pq.push(vertex, math.inf)

    while pq:
        u, d = pq.pop()
        if d == math.inf or u == target:
            break

        for edge in graph.get_neighbors(u):
            v = edge.target
            if v not in pq:
                continue
            new_dist = d + edge.cost
            if new_dist < dist[v]:
                dist[v] = new_dist
                parent[v] = u
                pq.update(v, new_dist)

    return dist, parent


def shortest_path_weighted(
    graph: GraphView, source: Hashable, target: Hashable
) -> Optional[WeightedPath]:
    """
    Minimum-cost path from source to target (Dijkstra).

    Returns:
        WeightedPath with the vertex list and total distance, or None if
        target is missing or unreachable. ``source == target`` yields
        ``WeightedPath([source], 0)``.

    Raises:
        VertexNotFoundError: If source is not in graph.
        NegativeWeightError: If graph contains negative edge weights.
    """
    if not graph.has_vertex(source):
        raise VertexNotFoundError(source, "source")
    if not graph.has_vertex(target):
        return None

    dist, parent = dijkstra(graph, source, target)
    if dist[target] == math.inf:
        logger.debug("No weighted path from %r to %r", source, target)
        return None

    return WeightedPath(reconstruct_path(parent, source, target), dist[target])


def bellman_ford(
    graph: GraphView, source: Hashable
) -> Tuple[Dict[Hashable, float], Dict[Hashable, Hashable]]:
    """
    Bellman-Ford algorithm for single-source shortest paths.

    Allows negative edge weights. Relaxes every edge V-1 times, stopping
    early once a full pass changes nothing.

    Args:
        graph: Graph (may have negative weights).
        source: Source vertex.

    Returns:
        Tuple of (dist, parent) as for dijkstra().

    Raises:
        VertexNotFoundError: If source is not in graph.
        NegativeCycleError: If a negative cycle is reachable from source.

    Complexity: O(VE).
    """
    if not graph.has_vertex(source):
        raise VertexNotFoundError(source, "source")

    vertices = graph.get_all_vertices()
    edges = [(u, edge.target, edge.cost) for u in vertices for edge in graph.get_neighbors(u)]

    dist: Dict[Hashable, float] = {vertex: math.inf for vertex in vertices}
    parent: Dict[Hashable, Hashable] = {}
    dist[source] = 0

    for _ in range(len(vertices) - 1):
        changed = False
        for u, v, weight in edges:
            if dist[u] != math.inf and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                parent[v] = u
                changed = True
        if not changed:
            break

    for u, v, weight in edges:
        if dist[u] != math.inf and dist[u] + weight < dist[v]:
            raise NegativeCycleError(source)

    return dist, parent


def shortest_path_bellman_ford(
    graph: GraphView, source: Hashable, target: Hashable
) -> Optional[WeightedPath]:
    """
    Minimum-cost path from source to target allowing negative weights.

    Returns:
        WeightedPath, or None if target is missing or unreachable.

    Raises:
        VertexNotFoundError: If source is not in graph.
        NegativeCycleError: If a negative cycle is reachable from source.
    """
    if not graph.has_vertex(source):
        raise VertexNotFoundError(source, "source")
    if not graph.has_vertex(target):
        return None

    dist, parent = bellman_ford(graph, source)
    if dist[target] == math.inf:
        return None

    return WeightedPath(reconstruct_path(parent, source, target), dist[target])
