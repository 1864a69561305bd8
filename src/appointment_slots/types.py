"""Shared types: requests, slots, outcomes and scheduling errors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Sequence, Union


@dataclass(frozen=True)
class UrgentRequest:
    """An appointment demand carrying an explicit priority (1 = most urgent)."""

    name: str
    priority: int


@dataclass(frozen=True)
class StandardRequest:
    """An appointment demand for one preferred start hour."""

    name: str
    preferred_start: int


PatientRequest = Union[UrgentRequest, StandardRequest]


@dataclass(frozen=True)
class ScheduledSlot:
    """Immutable record of a committed one-hour reservation.

    Invariants:
        - end == start + 1
        - No two slots in one ledger share a start hour
    """

    start: int
    end: int
    occupant: str

    @classmethod
    def at(cls, start: int, occupant: str) -> ScheduledSlot:
        """One-hour slot beginning at `start`."""
        return cls(start=start, end=start + 1, occupant=occupant)

    def contains(self, hour: int) -> bool:
        """Whether `hour` falls within [start, end)."""
        return self.start <= hour < self.end


class UrgentConfirmation(NamedTuple):
    name: str
    start: int
    end: int
    priority: int


class ScheduleEntry(NamedTuple):
    name: str
    start: int
    end: int


@dataclass(frozen=True)
class BookingOutcome:
    """Result of a standard booking attempt. Truthy when the slot was booked."""

    name: str
    start: int
    end: int
    booked: bool

    def __bool__(self) -> bool:
        return self.booked


class EmptyQueueError(IndexError):
    """Raised when extracting from an empty urgent queue."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}() called on an empty urgent queue")


class HorizonExhaustedError(Exception):
    """Raised when no free hour remains before the end of the day.

    `confirmations` holds the urgent bookings committed earlier in the same
    pass; they stay in the ledger.
    """

    def __init__(
        self,
        name: str,
        priority: int,
        day_end: int,
        confirmations: Sequence[UrgentConfirmation] = (),
    ) -> None:
        self.name = name
        self.priority = priority
        self.day_end = day_end
        self.confirmations = list(confirmations)
        super().__init__(
            f"Infeasible: urgent request {name!r} (priority {priority}) "
            f"cannot be placed before {day_end}:00 "
            f"({len(self.confirmations)} booked earlier in this pass)"
        )


class ConfigError(ValueError):
    """Raised for an inconsistent scheduler configuration."""
