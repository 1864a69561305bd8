#!/usr/bin/env python
"""Visual verification report for appointment-slots.

Run:  python scripts/verify.py

Produces a formatted report showing:
  1. Configuration in effect (day bounds, urgent gap)
  2. Ledger scenarios (conflict checks, chronological order)
  3. Engine scenarios (urgent confirmations, standard runs)  -- tables + ASCII day
"""

from __future__ import annotations

import json
import sys
from datetime import datetime
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths and data loading
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
FIXTURES = ROOT / "data" / "fixtures"
SCENARIOS = FIXTURES / "scenarios"

sys.path.insert(0, str(ROOT / "src"))

from appointment_slots.config import DEFAULT_CONFIG
from appointment_slots.engine import AllocationEngine
from appointment_slots.intake import parse_requests
from appointment_slots.ledger import SlotLedger
from appointment_slots.render import format_outcome, show_day
from appointment_slots.types import ScheduledSlot


def _load(path: Path):
    with open(path) as f:
        return json.load(f)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
WIDTH = 90


def banner(title: str):
    print()
    print("=" * WIDTH)
    print(f"  {title}")
    print("=" * WIDTH)


def heading(title: str):
    print()
    print(f"  {title}")
    print(f"  {'-' * (len(title) + 2)}")


def table(headers: list[str], rows: list[list[str]], indent: int = 4):
    """Print a formatted table with auto-sized columns."""
    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(cell))

    pad = " " * indent
    fmt = pad + "  ".join(f"{{:<{w}}}" for w in col_widths)
    sep = pad + "  ".join("-" * w for w in col_widths)

    print(fmt.format(*headers))
    print(sep)
    for row in rows:
        padded = row + [""] * (len(headers) - len(row))
        print(fmt.format(*padded))


def indented(text: str, indent: int = 4) -> str:
    return "\n".join(" " * indent + line for line in text.splitlines())


def _ledger(committed: list[list]) -> SlotLedger:
    ledger = SlotLedger()
    for start, occupant in committed:
        ledger.commit(ScheduledSlot.at(start, occupant))
    return ledger


def _hours(pairs: list[list]) -> str:
    return ", ".join(f"{name}@{hour}" for name, hour in pairs) or "(none)"


# ---------------------------------------------------------------------------
# Section 1: Configuration
# ---------------------------------------------------------------------------
def section_config():
    banner("CONFIGURATION")
    print(f"\n    Day start:      {DEFAULT_CONFIG.day_start}:00")
    print(f"    Day end:        {DEFAULT_CONFIG.day_end}:00 (urgent cursor bound)")
    print(f"    Urgent gap:     {DEFAULT_CONFIG.urgent_gap} h after each urgent booking")


# ---------------------------------------------------------------------------
# Section 2: Ledger
# ---------------------------------------------------------------------------
def section_ledger():
    banner("SLOT LEDGER")
    data = _load(SCENARIOS / "ledger.json")

    heading("Function: ledger.has_conflict(candidate_start) -> bool")
    print("    True iff slot.start <= candidate < slot.end for some slot.\n")
    rows = []
    for s in data["conflicts"]:
        result = _ledger(s["committed"]).has_conflict(s["candidate"])
        ok = "OK" if result is s["expected"] else "FAIL"
        rows.append([s["id"], _hours(s["committed"]), str(s["candidate"]), str(result), ok])
    table(["Scenario", "Committed", "Candidate", "Conflict", "Check"], rows)

    heading("Function: ledger.chronological() -> Iterator[ScheduledSlot]")
    rows = []
    for s in data["chronological"]:
        starts = [slot.start for slot in _ledger(s["committed"]).chronological()]
        ok = "OK" if starts == s["expected_starts"] else "FAIL"
        rows.append([s["id"], _hours(s["committed"]), str(starts), ok])
    table(["Scenario", "Committed", "Listed", "Check"], rows)


# ---------------------------------------------------------------------------
# Section 3: Engine
# ---------------------------------------------------------------------------
def section_urgent():
    banner("ALLOCATION ENGINE: URGENT BATCH")
    data = _load(SCENARIOS / "engine.json")

    for s in data["urgent"]:
        heading(f"Scenario: {s['id']}")
        print(f"    Standard first: {_hours(s['standard'])}")
        print(f"    Urgent queued:  {_hours(s['urgent'])}\n")

        engine = AllocationEngine()
        for name, start in s["standard"]:
            engine.book_standard(name, start)
        for name, priority in s["urgent"]:
            engine.submit_urgent(name, priority)
        confirmations = engine.schedule_urgent()

        rows = []
        for c, expected in zip(confirmations, s["expected"]):
            ok = "OK" if list(c) == expected else "FAIL"
            rows.append([c.name, str(c.priority), f"{c.start}:00-{c.end}:00", ok])
        table(["Patient", "Priority", "Slot", "Check"], rows)
        print()
        print(indented(show_day(engine.ledger)))


def section_runs():
    banner("ALLOCATION ENGINE: REQUEST LIST RUNS")
    data = _load(SCENARIOS / "engine.json")

    for s in data["runs"]:
        heading(f"Scenario: {s['id']}")
        engine = AllocationEngine()
        report = engine.run(parse_requests(s["requests"]))

        for outcome in report.standard_outcomes:
            print(f"    {format_outcome(outcome)}")
        print()
        rows = []
        for entry, expected in zip(report.schedule, s["expected_schedule"]):
            ok = "OK" if list(entry) == expected else "FAIL"
            rows.append([entry.name, f"{entry.start}:00-{entry.end}:00", ok])
        table(["Patient", "Slot", "Check"], rows)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    banner("APPOINTMENT-SLOTS   --  VISUAL VERIFICATION REPORT")
    print(f"    Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    print(f"    Fixture data: {FIXTURES.relative_to(ROOT)}/")

    section_config()
    section_ledger()
    section_urgent()
    section_runs()

    banner("END OF REPORT")
    print()


if __name__ == "__main__":
    main()
