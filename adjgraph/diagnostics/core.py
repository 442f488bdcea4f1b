"""Structural invariant checks for graph stores and algorithm output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Hashable, Iterable, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from adjgraph.graphs.core import AdjacencyStore


def find_asymmetric_arc(store: "AdjacencyStore") -> Optional[Tuple[Hashable, Hashable]]:
    """
    Return the first arc (u, v) whose mirror arc is missing or differs in weight.

    Parameters
    ----------
    store:
        Adjacency store backing an undirected graph.

    Returns
    -------
    tuple or None
        The offending ``(u, v)`` pair, or None if the store is symmetric.
    """
    for u, arcs in store.items():
        for edge in arcs:
            v = edge.target
            if not store.has_arc(v, u) or store.arc_weight(v, u) != edge.weight:
                return u, v
    return None


def is_symmetric(store: "AdjacencyStore") -> bool:
    """Check whether every arc u -> v has a mirror v -> u with equal weight."""
    return find_asymmetric_arc(store) is None


def assert_symmetric(store: "AdjacencyStore") -> None:
    """
    Assert that an undirected adjacency store is symmetric.

    Raises
    ------
    ValueError
        If some arc has no mirror or the mirror's weight differs.
    """
    pair = find_asymmetric_arc(store)
    if pair is not None:
        u, v = pair
        raise ValueError(
            f"Undirected store is not symmetric: arc ({u!r}, {v!r}) "
            f"has no matching ({v!r}, {u!r}) with equal weight."
        )


def is_partition(groups: Iterable[Sequence[Hashable]], vertices: Iterable[Hashable]) -> bool:
    """Check that groups cover every vertex exactly once and nothing else."""
    expected = set(vertices)
    seen = set()
    for group in groups:
        for vertex in group:
            if vertex in seen or vertex not in expected:
                return False
            seen.add(vertex)
    return seen == expected


def assert_partition(groups: Iterable[Sequence[Hashable]], vertices: Iterable[Hashable]) -> None:
    """
    Assert that component output partitions the vertex set.

    Raises
    ------
    ValueError
        If a vertex is missing, repeated, or unknown.
    """
    groups = [list(group) for group in groups]
    vertices = list(vertices)
    if not is_partition(groups, vertices):
        raise ValueError(
            f"Components do not partition the {len(vertices)} vertices: "
            f"got {sum(len(g) for g in groups)} entries in {len(groups)} groups."
        )
