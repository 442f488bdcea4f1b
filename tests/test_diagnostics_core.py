"""Tests for structural invariant checks."""

import pytest

from adjgraph.diagnostics import (
    assert_partition,
    assert_symmetric,
    find_asymmetric_arc,
    is_partition,
    is_symmetric,
)
from adjgraph.graphs import AdjacencyStore


@pytest.fixture
def store() -> AdjacencyStore:
    s = AdjacencyStore()
    for vertex in "ABC":
        s.add_vertex(vertex)
    return s


def test_symmetric_store(store):
    store.add_arc("A", "B", 2)
    store.add_arc("B", "A", 2)
    store.add_arc("C", "C")
    assert is_symmetric(store)
    assert find_asymmetric_arc(store) is None
    assert_symmetric(store)


def test_missing_mirror(store):
    store.add_arc("A", "B")
    assert find_asymmetric_arc(store) == ("A", "B")
    with pytest.raises(ValueError, match="'A', 'B'"):
        assert_symmetric(store)


def test_weight_mismatch(store):
    store.add_arc("A", "B", 1)
    store.add_arc("B", "A", 2)
    assert not is_symmetric(store)


def test_empty_store_is_symmetric():
    assert is_symmetric(AdjacencyStore())


def test_partition():
    assert is_partition([["A", "B"], ["C"]], "ABC")
    assert is_partition([], [])


@pytest.mark.parametrize(
    "groups",
    [
        [["A", "B"]],
        [["A", "B"], ["B", "C"]],
        [["A", "B"], ["C", "D"]],
    ],
    ids=["missing", "repeated", "unknown"],
)
def test_not_partition(groups):
    assert not is_partition(groups, "ABC")
    with pytest.raises(ValueError, match="do not partition"):
        assert_partition(groups, "ABC")


def test_assert_partition_accepts_generators():
    assert_partition((group for group in [["A"], ["B", "C"]]), iter("ABC"))
