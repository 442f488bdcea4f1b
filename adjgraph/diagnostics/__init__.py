"""Diagnostics and debugging utilities for adjgraph."""

from .core import (
    assert_partition,
    assert_symmetric,
    find_asymmetric_arc,
    is_partition,
    is_symmetric,
)
from .debug_mode import (
    check_components,
    check_undirected_store,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "find_asymmetric_arc",
    "is_symmetric",
    "assert_symmetric",
    "is_partition",
    "assert_partition",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "check_undirected_store",
    "check_components",
]
