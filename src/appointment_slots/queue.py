"""UrgentQueue: pending urgent requests keyed on priority number.

Lowest priority number comes out first (1 = most urgent). Equal priorities
come out in insertion order; a monotonically increasing counter is the
secondary heap key.
"""

from __future__ import annotations

import heapq
import itertools

from appointment_slots.types import EmptyQueueError, UrgentRequest


class UrgentQueue:
    """Min-heap of urgent requests."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, UrgentRequest]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def insert(self, request: UrgentRequest) -> None:
        heapq.heappush(self._heap, (request.priority, next(self._counter), request))

    def peek(self) -> UrgentRequest:
        """Most urgent request without removing it. Raises EmptyQueueError."""
        if not self._heap:
            raise EmptyQueueError("peek")
        return self._heap[0][2]

    def extract_min(self) -> UrgentRequest:
        """Remove and return the most urgent request. Raises EmptyQueueError."""
        if not self._heap:
            raise EmptyQueueError("extract_min")
        _, _, request = heapq.heappop(self._heap)
        return request

    def is_empty(self) -> bool:
        return not self._heap
