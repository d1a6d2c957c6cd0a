# -*- coding: utf-8 -*-
"""
Frontier containers shared by the planners.
- FIFOQueue: BFS and both halves of bidirectional search.
- PriorityQueue: Dijkstra, A* and greedy best-first. Min-priority first,
  equal priorities come out in insertion order.
"""

from __future__ import annotations
from typing import Any, Generic, Hashable, List, Tuple, TypeVar
from collections import deque
import heapq
import itertools

T = TypeVar("T")


class FIFOQueue(Generic[T]):
    def __init__(self, items=()):
        self._dq = deque(items)

    def push(self, item: T):
        self._dq.append(item)

    def pop(self) -> T:
        if not self._dq:
            raise IndexError("pop from an empty FIFOQueue")
        return self._dq.popleft()

    def __len__(self) -> int:
        return len(self._dq)

    def __bool__(self) -> bool:
        return bool(self._dq)


class PriorityQueue(Generic[T]):
    """
    Binary heap of (priority, seq, item). `seq` is a running counter, so two
    items with the same priority are returned in the order they were pushed
    and items themselves are never compared.
    """

    def __init__(self):
        self._heap: List[Tuple[Any, int, T]] = []
        self._counter = itertools.count()

    def push(self, item: T, priority):
        heapq.heappush(self._heap, (priority, next(self._counter), item))

    def pop(self) -> T:
        return self.pop_with_priority()[1]

    def pop_with_priority(self) -> Tuple[Any, T]:
        if not self._heap:
            raise IndexError("pop from an empty PriorityQueue")
        priority, _, item = heapq.heappop(self._heap)
        return priority, item

    def peek_priority(self):
        if not self._heap:
            raise IndexError("peek at an empty PriorityQueue")
        return self._heap[0][0]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
