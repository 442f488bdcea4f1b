"""Exceptions raised by graph operations.

Not-found and precondition failures raise; expected absences (no path,
no ordering, no spanning tree) are reported as ``None`` or ``False``
by the operations themselves.
"""

from typing import Hashable, Optional


class GraphError(Exception):
    """Base class for all adjgraph graph errors."""


class VertexNotFoundError(GraphError, KeyError):
    """A vertex was referenced that was never added to the graph."""

    def __init__(self, vertex: Hashable, role: Optional[str] = None):
        self.vertex = vertex
        self.role = role
        label = f"{role} vertex" if role else "Vertex"
        super().__init__(f"{label.capitalize()} {vertex!r} not found in graph")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0])


class NegativeWeightError(GraphError, ValueError):
    """An algorithm requiring non-negative weights met a negative edge."""

    def __init__(self, source: Hashable, target: Hashable, weight: float):
        self.source = source
        self.target = target
        self.weight = weight
        super().__init__(
            f"Non-negative weights required. "
            f"Found negative weight {weight} on edge ({source!r}, {target!r})"
        )


class NegativeCycleError(GraphError, ValueError):
    """A negative-weight cycle is reachable from the search source."""

    def __init__(self, source: Hashable):
        self.source = source
        super().__init__(f"Negative-weight cycle reachable from {source!r}")
