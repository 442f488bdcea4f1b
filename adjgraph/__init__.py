"""adjgraph - directed and undirected graphs with classic textbook algorithms."""

__version__ = "0.1.0"

from .diagnostics import (
    assert_partition,
    assert_symmetric,
    debug_context,
    is_debug_enabled,
    is_partition,
    is_symmetric,
    set_debug_enabled,
)
from .graphs import (
    DirectedGraph,
    Edge,
    GraphError,
    NegativeCycleError,
    NegativeWeightError,
    SpanningTree,
    UndirectedGraph,
    VertexNotFoundError,
    WeightedEdge,
    WeightedPath,
    adjacency_matrix,
    from_adjacency_matrix,
)
from .logging import configure_logging, get_logger, set_log_level
from .structures import DisjointSet, PriorityQueue, Queue

__all__ = [
    "__version__",
    # Graphs
    "DirectedGraph",
    "UndirectedGraph",
    "Edge",
    "WeightedEdge",
    "WeightedPath",
    "SpanningTree",
    "adjacency_matrix",
    "from_adjacency_matrix",
    # Errors
    "GraphError",
    "VertexNotFoundError",
    "NegativeWeightError",
    "NegativeCycleError",
    # Structures
    "Queue",
    "PriorityQueue",
    "DisjointSet",
    # Diagnostics
    "is_symmetric",
    "assert_symmetric",
    "is_partition",
    "assert_partition",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
