"""Debug mode for adjgraph.

While debug mode is on, graph classes re-validate their adjacency store
after each mutation and check that component output partitions the
vertex set. Checks are skipped entirely when it is off.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import TYPE_CHECKING, Hashable, Iterable, Iterator, List, Sequence

from .core import assert_partition, assert_symmetric

if TYPE_CHECKING:
    from adjgraph.graphs.core import AdjacencyStore

_DEBUG_ENV_VAR = "ADJGRAPH_DEBUG"
_TRUE_VALUES = ("1", "true", "yes", "on")

_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").strip().lower() in _TRUE_VALUES


def is_debug_enabled() -> bool:
    """Return whether invariant checks currently run (``ADJGRAPH_DEBUG`` or set_debug_enabled)."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Globally switch invariant checks on or off."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily switch invariant checks on or off.

    The previous setting is restored on exit, also when the block raises.

    Example
    -------
    >>> with debug_context(True):
    ...     g.add_edge('A', 'B')  # store symmetry verified after the edit
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev


def check_undirected_store(store: "AdjacencyStore") -> None:
    """
    Verify an undirected graph's store after a mutation, in debug mode only.

    Raises
    ------
    ValueError
        If debug mode is on and some arc has no equal-weight mirror.
    """
    if _debug_enabled:
        assert_symmetric(store)


def check_components(
    groups: Sequence[Sequence[Hashable]], vertices: Iterable[Hashable]
) -> List[List[Hashable]]:
    """
    Pass component output through, verifying it partitions vertices in debug mode.

    Returns
    -------
    list
        ``groups`` as a list of lists, unchanged.

    Raises
    ------
    ValueError
        If debug mode is on and the groups miss, repeat, or invent a vertex.
    """
    groups = [list(group) for group in groups]
    if _debug_enabled:
        assert_partition(groups, vertices)
    return groups
