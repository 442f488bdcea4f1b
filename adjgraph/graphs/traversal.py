"""
Graph traversal algorithms: BFS and DFS.

Works on any GraphView. Neighbors are visited in adjacency-list order, so
results follow vertex and edge insertion order. All traversals use
explicit queues or stacks; none recurse.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from typing import Callable, Dict, Hashable, Iterable, Iterator, List, Optional, Set, Tuple

from adjgraph.structures import Queue

from .core import GraphView
from .errors import VertexNotFoundError

_IN_PROGRESS = 1
_DONE = 2


def _require_start(graph: GraphView, start: Hashable) -> None:
    if not graph.has_vertex(start):
        raise VertexNotFoundError(start, "start")


def iter_bfs(
    graph: GraphView, start: Hashable, visited: Optional[Set[Hashable]] = None
) -> Iterator[Hashable]:
    """
    Lazily yield vertices in breadth-first order.

    Vertices are marked visited when enqueued, so each is enqueued once.

    Args:
        graph: Graph to traverse.
        start: Vertex to start from.
        visited: Optional shared visited set. Vertices already in it are
            skipped and newly reached ones are added, which lets callers
            sweep several components without revisiting.

    Raises:
        VertexNotFoundError: If start is not in the graph (raised eagerly).
    """
    _require_start(graph, start)
    return _bfs(graph, start, set() if visited is None else visited)


def _bfs(graph: GraphView, start: Hashable, visited: Set[Hashable]) -> Iterator[Hashable]:
    if start in visited:
        return
    visited.add(start)
    queue = Queue([start])

    while not queue.is_empty():
        vertex = queue.dequeue()
        yield vertex

        for edge in graph.get_neighbors(vertex):
            if edge.target not in visited:
                visited.add(edge.target)
                queue.enqueue(edge.target)


def iter_dfs(
    graph: GraphView, start: Hashable, visited: Optional[Set[Hashable]] = None
) -> Iterator[Hashable]:
    """
    Lazily yield vertices in depth-first pre-order.

    Neighbors are pushed in reverse so that they are explored left to
    right, matching a recursive DFS. A vertex is emitted when popped for
    the first time; stale duplicate stack entries are skipped.

    Args:
        graph: Graph to traverse.
        start: Vertex to start from.
        visited: Optional shared visited set (see iter_bfs).

    Raises:
        VertexNotFoundError: If start is not in the graph (raised eagerly).
    """
    _require_start(graph, start)
    return _dfs(graph, start, set() if visited is None else visited)


def _dfs(graph: GraphView, start: Hashable, visited: Set[Hashable]) -> Iterator[Hashable]:
    stack: List[Hashable] = [start]

    while stack:
        vertex = stack.pop()
        if vertex in visited:
            continue

        visited.add(vertex)
        yield vertex

        for edge in reversed(graph.get_neighbors(vertex)):
            if edge.target not in visited:
                stack.append(edge.target)


def bfs_order(graph: GraphView, start: Hashable) -> List[Hashable]:
    """
    Breadth-first visitation order from start.

    Complexity: O(V + E).

    Example:
        >>> g = DirectedGraph()
        >>> for v in "ABC":
        ...     g.add_vertex(v)
        >>> g.add_edge('A', 'B')
        >>> g.add_edge('A', 'C')
        >>> bfs_order(g, 'A')
        ['A', 'B', 'C']
    """
    return list(iter_bfs(graph, start))


def dfs_order(graph: GraphView, start: Hashable) -> List[Hashable]:
    """Depth-first pre-order from start. Complexity: O(V + E)."""
    return list(iter_dfs(graph, start))


def traverse_bfs(graph: GraphView, start: Hashable, callback: Callable[[Hashable], None]) -> None:
    """Invoke callback on each vertex in BFS order."""
    for vertex in iter_bfs(graph, start):
        callback(vertex)


def traverse_dfs(graph: GraphView, start: Hashable, callback: Callable[[Hashable], None]) -> None:
    """Invoke callback on each vertex in DFS order."""
    for vertex in iter_dfs(graph, start):
        callback(vertex)


def dfs_postorder(
    graph: GraphView,
    roots: Optional[Iterable[Hashable]] = None,
    stop_at_back_edge: bool = False,
) -> Tuple[List[Hashable], bool]:
    """
    Depth-first finish order over a whole graph, with back-edge detection.

    Uses three-colour marking: unvisited, in progress (on the current DFS
    path) and done. An edge into an in-progress vertex is a back edge,
    which in a directed graph means a cycle (self-loops included). A new
    tree is started from every root that is still unvisited.

    Args:
        graph: Graph to traverse.
        roots: Vertices to start trees from, in order (default: all
            vertices in insertion order).
        stop_at_back_edge: Return as soon as a back edge is seen. The
            finish order is then incomplete.

    Returns:
        Tuple of:
        - finish: Vertices in the order their DFS completed
        - has_back_edge: True if any back edge was found

    Complexity: O(V + E).
    """
    state: Dict[Hashable, int] = {}
    finish: List[Hashable] = []
    has_back_edge = False

    for root in graph.get_all_vertices() if roots is None else roots:
        if root in state:
            continue

        state[root] = _IN_PROGRESS
        stack = [(root, iter(graph.get_neighbors(root)))]

        while stack:
            vertex, edges = stack[-1]
            for edge in edges:
                target_state = state.get(edge.target)
                if target_state is None:
                    state[edge.target] = _IN_PROGRESS
                    stack.append((edge.target, iter(graph.get_neighbors(edge.target))))
                    break
                if target_state == _IN_PROGRESS:
                    has_back_edge = True
                    if stop_at_back_edge:
                        return finish, True
            else:
                stack.pop()
                state[vertex] = _DONE
                finish.append(vertex)

    return finish, has_back_edge


def has_path(graph: GraphView, source: Hashable, target: Hashable) -> bool:
    """
    Whether target is reachable from source.

    Missing endpoints are not an error here: the answer is simply False.
    A vertex always reaches itself.
    """
    if not graph.has_vertex(source) or not graph.has_vertex(target):
        return False
    if source == target:
        return True
    return any(vertex == target for vertex in iter_bfs(graph, source))
