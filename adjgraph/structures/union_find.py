"""
Disjoint-set (union-find) over the indices 0..n-1.

Used by Kruskal's algorithm to decide whether an edge joins two
different components.
"""

from typing import List


class DisjointSet:
    """
    Union-Find (Disjoint Set) data structure with path compression and union by rank.

    Elements are the integers ``0..n-1``; callers map their own keys to
    indices first (see ``adjgraph.graphs.utils.vertex_index_map``).

    Example:
        >>> ds = DisjointSet(4)
        >>> ds.union(0, 1)
        True
        >>> ds.connected(0, 1)
        True
        >>> ds.set_count
        3
    """

    def __init__(self, size: int):
        """
        Initialize ``size`` singleton sets.

        Args:
            size: Number of elements.

        Raises:
            ValueError: If size is negative.
        """
        if size < 0:
            raise ValueError(f"DisjointSet size must be non-negative, got {size}")
        self.parent: List[int] = list(range(size))
        self.rank: List[int] = [0] * size
        self._set_count = size

    def __len__(self) -> int:
        return len(self.parent)

    @property
    def set_count(self) -> int:
        """Number of disjoint sets currently in the partition."""
        return self._set_count

    def find(self, x: int) -> int:
        """
        Find the root of x, compressing the path behind it.

        Raises:
            IndexError: If x is outside 0..n-1.
        """
        if not 0 <= x < len(self.parent):
            raise IndexError(f"Element {x} out of range for DisjointSet of size {len(self.parent)}")

        root = x
        while self.parent[root] != root:
            root = self.parent[root]

        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]

        return root

    def union(self, x: int, y: int) -> bool:
        """
        Union sets containing x and y using union by rank.

        Returns:
            True if union was performed (x and y were in different sets),
            False if they were already in the same set.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1

        self._set_count -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)
