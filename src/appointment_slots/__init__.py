"""appointment-slots: Single-resource, single-day appointment slot allocation."""

from appointment_slots.config import DEFAULT_CONFIG, SchedulerConfig
from appointment_slots.engine import AllocationEngine, RunReport
from appointment_slots.intake import load_requests_json, parse_requests, validate_requests
from appointment_slots.ledger import SlotLedger
from appointment_slots.queue import UrgentQueue
from appointment_slots.types import (
    BookingOutcome,
    ConfigError,
    EmptyQueueError,
    HorizonExhaustedError,
    ScheduledSlot,
    ScheduleEntry,
    StandardRequest,
    UrgentConfirmation,
    UrgentRequest,
)

__all__ = [
    "AllocationEngine",
    "BookingOutcome",
    "ConfigError",
    "DEFAULT_CONFIG",
    "EmptyQueueError",
    "HorizonExhaustedError",
    "RunReport",
    "ScheduleEntry",
    "ScheduledSlot",
    "SchedulerConfig",
    "SlotLedger",
    "StandardRequest",
    "UrgentConfirmation",
    "UrgentQueue",
    "UrgentRequest",
    "load_requests_json",
    "parse_requests",
    "validate_requests",
]
