"""
Dense adjacency-matrix interop.

Converts between adjacency-list graphs and square ``numpy`` arrays where
entry ``[i, j]`` holds the weight of edge i -> j (1 for an unweighted
edge, 0 for no edge).
"""

from typing import Hashable, List, Optional, Sequence, Union

import numpy as np

from .core import GraphView
from .errors import VertexNotFoundError
from .utils import vertex_index_map


def adjacency_matrix(
    graph: GraphView,
    vertices: Optional[Sequence[Hashable]] = None,
    dtype: Union[type, np.dtype] = float,
) -> np.ndarray:
    """
    Build the (n, n) adjacency matrix of a graph.

    Args:
        graph: Graph to convert. Undirected graphs give symmetric matrices.
        vertices: Row/column order (defaults to all vertices in insertion
            order). Edges to vertices outside the list are dropped.
        dtype: numpy dtype of the result.

    Returns:
        numpy array of shape (n, n).

    Raises:
        VertexNotFoundError: If a listed vertex is not in graph.

    Example:
        >>> g = DirectedGraph()
        >>> g.add_vertex('A'); g.add_vertex('B')
        >>> g.add_edge('A', 'B', 2.5)
        >>> adjacency_matrix(g)
        array([[0. , 2.5],
               [0. , 0. ]])
    """
    if vertices is None:
        vertices = graph.get_all_vertices()
    else:
        for vertex in vertices:
            if not graph.has_vertex(vertex):
                raise VertexNotFoundError(vertex)

    index, order = vertex_index_map(vertices)
    n = len(order)
    W = np.zeros((n, n), dtype=dtype)

    for u in order:
        i = index[u]
        for edge in graph.get_neighbors(u):
            j = index.get(edge.target)
            if j is not None:
                W[i, j] = edge.cost

    return W


def from_adjacency_matrix(
    matrix: Union[np.ndarray, Sequence[Sequence[float]]],
    labels: Optional[Sequence[Hashable]] = None,
    directed: bool = True,
):
    """
    Build a graph from a square adjacency matrix.

    Every non-zero entry ``[i, j]`` becomes an edge i -> j weighted by the
    entry. Vertices are added for every row, isolated or not.

    Args:
        matrix: Square array-like.
        labels: Vertex identifiers for rows/columns (default 0..n-1).
        directed: Build a DirectedGraph (True) or an UndirectedGraph (False).

    Returns:
        DirectedGraph or UndirectedGraph.

    Raises:
        ValueError: If the matrix is not square, labels have the wrong
            length or contain duplicates, or an undirected matrix is not
            symmetric.
    """
    from .directed import DirectedGraph
    from .undirected import UndirectedGraph

    W = np.asarray(matrix)
    if W.ndim != 2 or W.shape[0] != W.shape[1]:
        raise ValueError(f"Adjacency matrix must be square, got shape {W.shape}")

    n = W.shape[0]
    names: List[Hashable] = list(range(n)) if labels is None else list(labels)
    if len(names) != n:
        raise ValueError(f"Expected {n} labels, got {len(names)}")
    if len(set(names)) != n:
        raise ValueError("Vertex labels must be unique")
    if not directed and not np.array_equal(W, W.T):
        raise ValueError("Undirected graph requires a symmetric adjacency matrix")

    graph = DirectedGraph() if directed else UndirectedGraph()
    for name in names:
        graph.add_vertex(name)

    for i, j in zip(*np.nonzero(W)):
        if directed or i <= j:
            graph.add_edge(names[i], names[j], W[i, j].item())

    return graph
