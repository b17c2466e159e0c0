# gridpath/pathfinding/frontier.py
import heapq
from typing import List, Set, Tuple

Coordinate = Tuple[int, int]
WorkItem = Tuple[float, Coordinate]


class Frontier:
    """
    Min-priority queue of (estimated_total_cost, coordinate) work items.

    Behaves like an ordered set: pushing a pair that is already pending is a
    no-op, and pops come out lowest cost first with ties broken by coordinate.
    """

    def __init__(self):
        self._heap: List[WorkItem] = []
        self._pending: Set[WorkItem] = set()

    def push(self, estimated_cost: float, coord: Coordinate) -> bool:
        """Queue a work item. Returns False if the same pair was already pending."""
        item = (estimated_cost, coord)
        if item in self._pending:
            return False
        self._pending.add(item)
        heapq.heappush(self._heap, item)
        return True

    def pop(self) -> WorkItem:
        """Remove and return the smallest work item."""
        item = heapq.heappop(self._heap)
        self._pending.discard(item)
        return item

    def __len__(self):
        return len(self._heap)

    def __bool__(self):
        return bool(self._heap)

    def __contains__(self, item):
        return item in self._pending
