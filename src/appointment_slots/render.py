"""Text rendering of confirmations, outcomes and the final schedule.

Formatting only; ordering comes from SlotLedger.chronological().
"""

from __future__ import annotations

from typing import Iterable

from appointment_slots.config import DEFAULT_CONFIG, SchedulerConfig
from appointment_slots.ledger import SlotLedger
from appointment_slots.types import (
    BookingOutcome,
    ScheduledSlot,
    ScheduleEntry,
    UrgentConfirmation,
)

REJECTION_MESSAGE = "Time slot is taken. Please choose another time."


def format_slot(slot: ScheduledSlot | ScheduleEntry) -> str:
    """'Carol: 9:00 - 10:00'."""
    if isinstance(slot, ScheduledSlot):
        name, start, end = slot.occupant, slot.start, slot.end
    else:
        name, start, end = slot
    return f"{name}: {start}:00 - {end}:00"


def format_confirmation(confirmation: UrgentConfirmation) -> str:
    return (
        f"Priority Scheduled: {confirmation.name} from {confirmation.start}:00 "
        f"to {confirmation.end}:00 (Priority {confirmation.priority})"
    )


def format_outcome(outcome: BookingOutcome) -> str:
    if not outcome.booked:
        return REJECTION_MESSAGE
    return (
        f"Standard Scheduled: {outcome.name} from {outcome.start}:00 "
        f"to {outcome.end}:00"
    )


def format_schedule(slots: Iterable[ScheduledSlot | ScheduleEntry]) -> str:
    lines = ["Final Schedule:"]
    lines.extend(format_slot(slot) for slot in slots)
    return "\n".join(lines)


def show_day(ledger: SlotLedger, config: SchedulerConfig = DEFAULT_CONFIG) -> str:
    """ASCII view of one day, one character per hour.

    Legend: '.' = before day_start, '-' = free, 'A'-'Z' = allocated (by occupant)
    Returns the string; does not print.
    """
    label_chars = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    labels: dict[str, str] = {}
    owner: dict[int, str] = {}
    for slot in ledger.chronological():
        if slot.occupant not in labels:
            labels[slot.occupant] = label_chars[len(labels) % len(label_chars)]
        for h in range(slot.start, slot.end):
            owner[h] = labels[slot.occupant]

    header = "".join(f"{h:02d}" if h % 3 == 0 else "  " for h in range(24))
    row = []
    for h in range(24):
        if h in owner:
            row.append(owner[h])
        elif config.day_start <= h < config.day_end:
            row.append("-")
        else:
            row.append(".")

    # Two columns per hour so the row lines up with the header
    lines = [header, "".join(c * 2 for c in row)]
    if labels:
        legend = ", ".join(f"{v}={k}" for k, v in labels.items())
        lines.append(f"Legend: . = outside day, - = free, {legend}")
    return "\n".join(lines)
