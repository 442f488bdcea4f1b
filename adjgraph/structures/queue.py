"""FIFO queue used by breadth-first algorithms."""

from collections import deque
from typing import Deque, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class Queue(Generic[T]):
    """
    First-in first-out queue backed by ``collections.deque``.

    Complexity:
        - enqueue / dequeue / peek: O(1)
    """

    def __init__(self, items: Optional[Iterable[T]] = None):
        self._items: Deque[T] = deque(items or ())

    def enqueue(self, item: T) -> None:
        self._items.append(item)

    def dequeue(self) -> T:
        """
        Remove and return the front item.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.popleft()

    def peek(self) -> T:
        """
        Return the front item without removing it.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._items:
            raise IndexError("peek from empty queue")
        return self._items[0]

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"
