"""AllocationEngine: urgent batch scheduling and standard preferred-time booking.

Both policies write into the same SlotLedger. The engine is the only place
where has_conflict + commit run, so the no-overlap invariant holds as long as
a single caller drives the engine.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from appointment_slots.config import DEFAULT_CONFIG, SchedulerConfig
from appointment_slots.ledger import SlotLedger
from appointment_slots.queue import UrgentQueue
from appointment_slots.types import (
    BookingOutcome,
    HorizonExhaustedError,
    PatientRequest,
    ScheduledSlot,
    ScheduleEntry,
    StandardRequest,
    UrgentConfirmation,
    UrgentRequest,
)

logger = logging.getLogger(__name__)


@dataclass
class RunReport:
    """Everything one run() produced, in the order it was produced."""

    standard_outcomes: list[BookingOutcome] = field(default_factory=list)
    urgent_confirmations: list[UrgentConfirmation] = field(default_factory=list)
    schedule: list[ScheduleEntry] = field(default_factory=list)
    horizon_error: HorizonExhaustedError | None = None


class AllocationEngine:
    """Owns one ledger and one urgent queue for a single scheduling day."""

    def __init__(
        self,
        config: SchedulerConfig | None = None,
        ledger: SlotLedger | None = None,
        queue: UrgentQueue | None = None,
    ) -> None:
        self.config = config if config is not None else DEFAULT_CONFIG
        self.ledger = ledger if ledger is not None else SlotLedger()
        self.queue = queue if queue is not None else UrgentQueue()

    def submit_urgent(self, name: str, priority: int) -> UrgentRequest:
        """Queue an urgent request for the next schedule_urgent() pass."""
        request = UrgentRequest(name=name, priority=priority)
        self.queue.insert(request)
        logger.debug("Queued urgent request %r (priority %d)", name, priority)
        return request

    def submit_standard(self, name: str, preferred_start: int) -> BookingOutcome:
        """Book a standard request immediately. See book_standard()."""
        return self.book_standard(name, preferred_start)

    def book_standard(self, name: str, preferred_start: int) -> BookingOutcome:
        """Commit [preferred_start, preferred_start+1) if free, else reject.

        A rejection is a normal outcome: no alternate hour is searched and
        the ledger is left untouched.
        """
        slot = ScheduledSlot.at(preferred_start, name)
        if self.ledger.has_conflict(preferred_start):
            logger.warning(
                "Standard request %r rejected: %d:00 is taken", name, preferred_start
            )
            return BookingOutcome(name, slot.start, slot.end, booked=False)

        self.ledger.commit(slot)
        logger.info("Standard booked %r at %d:00-%d:00", name, slot.start, slot.end)
        return BookingOutcome(name, slot.start, slot.end, booked=True)

    def schedule_urgent(self) -> list[UrgentConfirmation]:
        """Drain the urgent queue, most urgent first.

        The cursor starts at config.day_start. For each request it skips
        occupied hours and commits the first free one. It then moves past the
        booked hour plus config.urgent_gap more, whether or not anything
        conflicted, so urgent patients never share an hour.

        Raises HorizonExhaustedError when the cursor reaches config.day_end.
        The request that could not be placed stays queued, along with every
        request behind it. Bookings made before it stay committed and are
        carried on the exception as `confirmations`.
        """
        confirmations: list[UrgentConfirmation] = []
        cursor = self.config.day_start

        while not self.queue.is_empty():
            request = self.queue.peek()

            while cursor < self.config.day_end and self.ledger.has_conflict(cursor):
                logger.debug("Hour %d:00 occupied, advancing", cursor)
                cursor += 1
            if cursor >= self.config.day_end:
                raise HorizonExhaustedError(
                    name=request.name,
                    priority=request.priority,
                    day_end=self.config.day_end,
                    confirmations=confirmations,
                )

            self.queue.extract_min()
            slot = ScheduledSlot.at(cursor, request.name)
            self.ledger.commit(slot)
            logger.info(
                "Urgent booked %r at %d:00-%d:00 (priority %d)",
                request.name, slot.start, slot.end, request.priority,
            )
            confirmations.append(
                UrgentConfirmation(request.name, slot.start, slot.end, request.priority)
            )
            cursor = slot.end + self.config.urgent_gap

        return confirmations

    def get_schedule(self) -> list[ScheduleEntry]:
        """All committed slots as (name, start, end), ascending by start."""
        return [
            ScheduleEntry(slot.occupant, slot.start, slot.end)
            for slot in self.ledger.chronological()
        ]

    def run(self, requests: Iterable[PatientRequest]) -> RunReport:
        """Process an explicit request list.

        Standard requests are booked as they are encountered; urgent ones
        are queued and scheduled together once the list is exhausted.

        Running out of day does not raise: the report keeps the urgent
        bookings that were made and records the error in `horizon_error`.
        """
        report = RunReport()
        for request in requests:
            if isinstance(request, UrgentRequest):
                self.submit_urgent(request.name, request.priority)
            elif isinstance(request, StandardRequest):
                report.standard_outcomes.append(
                    self.book_standard(request.name, request.preferred_start)
                )
            else:
                raise TypeError(f"Unsupported request type: {type(request).__name__}")

        try:
            report.urgent_confirmations = self.schedule_urgent()
        except HorizonExhaustedError as e:
            report.urgent_confirmations = e.confirmations
            report.horizon_error = e
        report.schedule = self.get_schedule()
        return report
