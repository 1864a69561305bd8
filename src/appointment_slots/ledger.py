"""SlotLedger: committed one-hour intervals for a single resource.

Provides has_conflict (read-only start-hour check), commit (unconditional
insert) and chronological (restartable ascending listing).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from appointment_slots.types import ScheduledSlot


@dataclass
class SlotLedger:
    """Mutable slot state for one resource on one day.

    The ledger trusts its caller: commit() does not re-check conflicts.
    The allocation engine performs has_conflict + commit as one unit.
    """

    _slots: list[ScheduledSlot] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[ScheduledSlot]:
        """Slots in commit order."""
        return iter(list(self._slots))

    def has_conflict(self, candidate_start: int) -> bool:
        """Whether `candidate_start` falls inside any committed slot.

        Only the candidate's start hour is tested. A candidate whose own
        interval would reach into a slot starting later is not detected;
        with uniform one-hour slots that case cannot arise.
        """
        return any(slot.contains(candidate_start) for slot in self._slots)

    def commit(self, slot: ScheduledSlot) -> None:
        """Insert a slot. Caller must have checked has_conflict first."""
        self._slots.append(slot)

    def chronological(self) -> Iterator[ScheduledSlot]:
        """Lazily yield slots ascending by start hour. Does NOT mutate."""
        yield from sorted(self._slots, key=lambda slot: slot.start)
