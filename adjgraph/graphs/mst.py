"""
Minimum spanning tree algorithms: Kruskal and Prim.

Kruskal uses union-find data structure. Prim uses priority queue.
Both treat an unweighted edge as weight 1 and report a disconnected
graph as None. On the same connected graph they agree on total weight,
though tied weights may give different edge sets.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties), 23.2 (Kruskal), 23.2 (Prim).
    - Sedgewick, Wayne. "Algorithms", 4th ed. Section 4.3 (eager Prim).
"""

from typing import Any, Dict, Hashable, List, Optional, Set

from adjgraph.logging import get_logger
from adjgraph.structures import DisjointSet, PriorityQueue

from .core import GraphView, SpanningTree, WeightedEdge
from .errors import VertexNotFoundError
from .utils import undirected_edges, vertex_index_map

logger = get_logger(__name__)

# Default start for prim_mst. None is a valid vertex, so it cannot serve here.
_FIRST_VERTEX: Any = object()


def prim_mst(graph: GraphView, start: Hashable = _FIRST_VERTEX) -> Optional[SpanningTree]:
    """
    Prim's algorithm (eager variant) for minimum spanning tree.

    Keeps, for every vertex outside the tree, the cheapest known edge into
    it, and a priority queue holding one entry per such vertex. The minimum
    entry joins the tree; its neighbors' entries are lowered in place when
    a cheaper crossing edge appears.

    Args:
        graph: Undirected graph.
        start: Starting vertex (defaults to first vertex in insertion order).

    Returns:
        SpanningTree with edges in the order they joined the tree, or None
        if the graph is disconnected. An empty graph yields an empty tree.

    Raises:
        VertexNotFoundError: If start is given and not in graph.

    Complexity: O(E log V) using binary heap.

    Example:
        >>> g = UndirectedGraph()
        >>> for v in "ABC":
        ...     g.add_vertex(v)
        >>> g.add_edge('A', 'B', 1)
        >>> g.add_edge('B', 'C', 2)
        >>> prim_mst(g).total_weight
        3
    """
    vertices = graph.get_all_vertices()
    if start is _FIRST_VERTEX:
        if not vertices:
            return SpanningTree([], 0)
        start = vertices[0]
    elif not graph.has_vertex(start):
        raise VertexNotFoundError(start, "start")

    in_tree: Set[Hashable] = set()
    best: Dict[Hashable, WeightedEdge] = {}
    pq: PriorityQueue = PriorityQueue()
    pq.push(start, 0)

    edges: List[WeightedEdge] = []
    total = 0

    while pq and len(in_tree) < len(vertices):
        vertex, _ = pq.pop()
        if vertex in in_tree:
            continue

        in_tree.add(vertex)
        edge_in = best.pop(vertex, None)
        if edge_in is not None:
            edges.append(edge_in)
            total += edge_in.weight

        for edge in graph.get_neighbors(vertex):
            target = edge.target
            if target in in_tree:
                continue
            known = best.get(target)
            if known is None or edge.cost < known.weight:
                best[target] = WeightedEdge(vertex, target, edge.cost)
                pq.update(target, edge.cost)

    if len(in_tree) < len(vertices):
        logger.debug("Prim reached %d of %d vertices: graph is disconnected", len(in_tree), len(vertices))
        return None

    return SpanningTree(edges, total)


def kruskal_mst(graph: GraphView) -> Optional[SpanningTree]:
    """
    Kruskal's algorithm for minimum spanning tree.

    Collects each undirected edge once, sorts by weight (stable, so ties
    keep insertion order) and keeps every edge that joins two different
    components, stopping once V-1 edges are kept.

    Args:
        graph: Undirected graph.

    Returns:
        SpanningTree with edges in ascending weight order, or None if the
        graph is disconnected. An empty graph yields an empty tree.

    Complexity: O(E log E) = O(E log V) for sorting and union-find operations.
    """
    index, vertices = vertex_index_map(graph.get_all_vertices())
    needed = max(len(vertices) - 1, 0)

    candidates = [
        WeightedEdge(e.source, e.target, 1 if e.weight is None else e.weight)
        for e in undirected_edges(graph)
    ]
    candidates.sort(key=lambda e: e.weight)

    uf = DisjointSet(len(vertices))
    edges: List[WeightedEdge] = []
    total = 0

    for edge in candidates:
        if len(edges) == needed:
            break
        if uf.union(index[edge.source], index[edge.target]):
            edges.append(edge)
            total += edge.weight

    if len(edges) < needed:
        logger.debug("Kruskal kept %d of %d edges: graph is disconnected", len(edges), needed)
        return None

    return SpanningTree(edges, total)
