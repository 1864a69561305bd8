"""Tests for UrgentQueue ordering and empty-queue contract.

Test data loaded from: data/fixtures/scenarios/queue.json
"""

from __future__ import annotations

import pytest

from conftest import load_scenarios

_data = load_scenarios("queue")


def _fill(inserted: list[list]):
    from appointment_slots.queue import UrgentQueue
    from appointment_slots.types import UrgentRequest

    queue = UrgentQueue()
    for name, priority in inserted:
        queue.insert(UrgentRequest(name, priority))
    return queue


class TestUrgentQueue:
    """Lowest priority number first; ties in insertion order."""

    @pytest.mark.parametrize("spec", _data["ordering"], ids=lambda s: s["id"])
    def test_extract_order(self, spec):
        queue = _fill(spec["inserted"])
        names = []
        while not queue.is_empty():
            names.append(queue.extract_min().name)
        assert names == spec["expected_names"]

    def test_peek_does_not_remove(self):
        queue = _fill([["Alice", 2], ["Bob", 1]])
        assert queue.peek().name == "Bob"
        assert len(queue) == 2
        assert queue.extract_min().name == "Bob"

    def test_is_empty(self):
        from appointment_slots.queue import UrgentQueue
        from appointment_slots.types import UrgentRequest

        queue = UrgentQueue()
        assert queue.is_empty()
        queue.insert(UrgentRequest("A", 1))
        assert not queue.is_empty()

    def test_same_request_twice(self):
        """Requests are not deduplicated; names are opaque and non-unique."""
        queue = _fill([["Alex", 1], ["Alex", 1]])
        assert len(queue) == 2


class TestEmptyQueue:
    """Extracting from an empty queue is a contract violation."""

    @pytest.mark.parametrize("method", ["extract_min", "peek"])
    def test_raises(self, method):
        from appointment_slots.queue import UrgentQueue
        from appointment_slots.types import EmptyQueueError

        queue = UrgentQueue()
        with pytest.raises(EmptyQueueError, match=method):
            getattr(queue, method)()

    def test_is_index_error(self):
        from appointment_slots.queue import UrgentQueue

        with pytest.raises(IndexError):
            UrgentQueue().extract_min()
