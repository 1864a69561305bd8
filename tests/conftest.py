"""Shared test fixtures and data loading for appointment-slots.

All test data lives in data/fixtures/ as JSON files.  This module loads
that data and exposes helper functions + pytest fixtures for the tests.

Hours are plain integers on a single day; the default day starts at 9.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"
EXAMPLE_REQUESTS = FIXTURES_DIR / "requests_example.json"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------
def make_ledger(committed: list[list] | None = None):
    """Build a SlotLedger from [[start, occupant], ...] pairs."""
    from appointment_slots.ledger import SlotLedger
    from appointment_slots.types import ScheduledSlot

    ledger = SlotLedger()
    for start, occupant in committed or []:
        ledger.commit(ScheduledSlot.at(start, occupant))
    return ledger


def make_engine(
    urgent: list[list] | None = None,
    standard: list[list] | None = None,
    day_start: int = 9,
    day_end: int = 24,
    urgent_gap: int = 1,
):
    """Engine with standard bookings already made and urgent requests queued."""
    from appointment_slots.config import SchedulerConfig
    from appointment_slots.engine import AllocationEngine

    engine = AllocationEngine(SchedulerConfig(
        day_start=day_start, day_end=day_end, urgent_gap=urgent_gap
    ))
    for name, start in standard or []:
        engine.book_standard(name, start)
    for name, priority in urgent or []:
        engine.submit_urgent(name, priority)
    return engine


def assert_no_overlap(ledger) -> None:
    """No committed slot's start falls within another slot."""
    slots = list(ledger)
    for a in slots:
        for b in slots:
            if a is b:
                continue
            assert not (a.start <= b.start < a.end), (
                f"Double-booking: {b.occupant} at {b.start} overlaps "
                f"{a.occupant} [{a.start}, {a.end})"
            )


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def ledger():
    return make_ledger()


@pytest.fixture
def engine():
    """Engine with the default 9-24 day and nothing booked."""
    return make_engine()


@pytest.fixture
def example_requests_path() -> Path:
    return EXAMPLE_REQUESTS
