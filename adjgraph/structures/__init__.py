"""Auxiliary containers shared by the graph algorithms."""

from .priority_queue import PriorityQueue
from .queue import Queue
from .union_find import DisjointSet

__all__ = ["Queue", "PriorityQueue", "DisjointSet"]
