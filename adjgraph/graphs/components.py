"""
Component algorithms: connected components, strongly connected
components (Kosaraju), undirected cycle detection and bipartite testing.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.5 (Strongly connected components).
    - Sharir, M. "A strong-connectivity algorithm and its applications in
      data flow analysis" (1981).
"""

from typing import Dict, Hashable, List, Optional, Set, Tuple

from adjgraph.logging import get_logger
from adjgraph.structures import Queue

from .core import AdjacencyStore, GraphView
from .traversal import dfs_postorder, iter_bfs, iter_dfs

logger = get_logger(__name__)


def connected_components(graph: GraphView) -> List[List[Hashable]]:
    """
    Connected components of an undirected graph.

    A BFS is started from every vertex not yet reached, in insertion order.

    Returns:
        List of components, each in BFS order, in discovery order.

    Complexity: O(V + E).
    """
    visited: Set[Hashable] = set()
    components: List[List[Hashable]] = []

    for vertex in graph.get_all_vertices():
        if vertex not in visited:
            components.append(list(iter_bfs(graph, vertex, visited)))

    return components


def transpose_adjacency(graph: GraphView) -> AdjacencyStore:
    """
    Build a store with every edge of graph reversed, weights preserved.

    Vertex order is kept; reversed edges are appended in the order their
    sources are scanned.

    Complexity: O(V + E).
    """
    store = AdjacencyStore()
    vertices = graph.get_all_vertices()
    for vertex in vertices:
        store.add_vertex(vertex)
    for u in vertices:
        for edge in graph.get_neighbors(u):
            store.add_arc(edge.target, u, edge.weight)
    return store


def strongly_connected_components(
    graph: GraphView, transpose: Optional[GraphView] = None
) -> List[List[Hashable]]:
    """
    Strongly connected components by Kosaraju's algorithm.

    1. DFS over every vertex, recording finish order.
    2. Reverse every edge.
    3. Take vertices by decreasing finish time; each one not yet assigned
       starts a DFS on the reversed graph whose reach is one component.

    Args:
        graph: Directed graph.
        transpose: Precomputed reversed graph (built from graph if omitted).

    Returns:
        List of components in discovery order; every vertex appears in
        exactly one.

    Complexity: O(V + E).
    """
    finish, _ = dfs_postorder(graph)
    if transpose is None:
        transpose = transpose_adjacency(graph)

    assigned: Set[Hashable] = set()
    components: List[List[Hashable]] = []

    for vertex in reversed(finish):
        if vertex not in assigned:
            components.append(list(iter_dfs(transpose, vertex, assigned)))

    return components


def has_undirected_cycle(graph: GraphView) -> bool:
    """
    Whether an undirected graph contains a cycle.

    DFS that remembers the parent each vertex was reached from; reaching an
    already visited vertex other than that parent closes a cycle. A
    self-loop is always a cycle.

    Complexity: O(V + E).
    """
    visited: Set[Hashable] = set()

    for root in graph.get_all_vertices():
        if root in visited:
            continue

        visited.add(root)
        stack: List[Tuple[Hashable, Optional[Hashable]]] = [(root, None)]

        while stack:
            vertex, parent = stack.pop()
            for edge in graph.get_neighbors(vertex):
                target = edge.target
                if target == vertex:
                    return True
                if target not in visited:
                    visited.add(target)
                    stack.append((target, vertex))
                elif target != parent:
                    return True

    return False


def bipartite_sets(graph: GraphView) -> Optional[Tuple[List[Hashable], List[Hashable]]]:
    """
    Two-colour an undirected graph by BFS, one component at a time.

    Each component's first vertex gets colour 0; neighbors get the opposite
    colour. An edge between equal colours (including a self-loop) means the
    graph is not bipartite.

    Returns:
        Tuple (left, right) of vertex lists in insertion order, or None if
        the graph is not bipartite. An empty graph yields ([], []).

    Complexity: O(V + E).
    """
    color: Dict[Hashable, int] = {}

    for root in graph.get_all_vertices():
        if root in color:
            continue

        color[root] = 0
        queue = Queue([root])

        while not queue.is_empty():
            vertex = queue.dequeue()
            for edge in graph.get_neighbors(vertex):
                target = edge.target
                if target not in color:
                    color[target] = 1 - color[vertex]
                    queue.enqueue(target)
                elif color[target] == color[vertex]:
                    logger.debug("Edge (%r, %r) joins equal colours: not bipartite", vertex, target)
                    return None

    left = [vertex for vertex in graph.get_all_vertices() if color[vertex] == 0]
    right = [vertex for vertex in graph.get_all_vertices() if color[vertex] == 1]
    return left, right
