"""
Min-priority queue with in-place priority updates.

Built on ``heapq`` with lazy invalidation: updating an item marks its old
heap entry as stale and pushes a fresh one. Stale entries are discarded
when they reach the top of the heap.

References:
    - Python documentation, ``heapq`` module, "Priority Queue Implementation Notes".
"""

import heapq
import itertools
from typing import Dict, Generic, Hashable, List, Tuple, TypeVar

T = TypeVar("T", bound=Hashable)

# Heap entry layout: [priority, sequence, item, alive]
_PRIORITY, _SEQ, _ITEM, _ALIVE = 0, 1, 2, 3


class PriorityQueue(Generic[T]):
    """
    Min-priority queue keyed by a numeric priority per item.

    Items must be hashable but need not be orderable: ties on priority are
    broken by insertion sequence, so equal priorities pop first-in first-out.

    Complexity:
        - push / update: O(log n)
        - pop: O(log n) amortized
        - __contains__ / priority: O(1)

    Example:
        >>> pq = PriorityQueue()
        >>> pq.push("a", 3)
        >>> pq.push("b", 1)
        >>> pq.update("a", 0)
        >>> pq.pop()
        ('a', 0)
    """

    def __init__(self) -> None:
        self._heap: List[list] = []
        self._entries: Dict[T, list] = {}
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, item: T) -> bool:
        return item in self._entries

    def is_empty(self) -> bool:
        return not self._entries

    def push(self, item: T, priority: float) -> None:
        """
        Insert an item.

        Raises:
            ValueError: If the item is already queued. Use update() instead.
        """
        if item in self._entries:
            raise ValueError(f"Item {item!r} already in priority queue")
        entry = [priority, next(self._counter), item, True]
        self._entries[item] = entry
        heapq.heappush(self._heap, entry)

    def update(self, item: T, priority: float) -> None:
        """Set the priority of an item, inserting it if absent."""
        entry = self._entries.pop(item, None)
        if entry is not None:
            entry[_ALIVE] = False
        self.push(item, priority)

    def priority(self, item: T) -> float:
        """
        Current priority of a queued item.

        Raises:
            KeyError: If the item is not queued.
        """
        return self._entries[item][_PRIORITY]

    def peek(self) -> Tuple[T, float]:
        """
        Return the minimum (item, priority) without removing it.

        Raises:
            IndexError: If the queue is empty.
        """
        self._drop_stale()
        if not self._heap:
            raise IndexError("peek from empty priority queue")
        top = self._heap[0]
        return top[_ITEM], top[_PRIORITY]

    def pop(self) -> Tuple[T, float]:
        """
        Remove and return the minimum (item, priority).

        Raises:
            IndexError: If the queue is empty.
        """
        self._drop_stale()
        if not self._heap:
            raise IndexError("pop from empty priority queue")
        entry = heapq.heappop(self._heap)
        del self._entries[entry[_ITEM]]
        return entry[_ITEM], entry[_PRIORITY]

    def _drop_stale(self) -> None:
        while self._heap and not self._heap[0][_ALIVE]:
            heapq.heappop(self._heap)
