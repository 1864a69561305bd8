"""Command-line entry point: schedule a JSON request list and print the day.

Run:  python -m appointment_slots requests.json
"""

from __future__ import annotations

import argparse
import logging
import sys

from appointment_slots.config import SchedulerConfig
from appointment_slots.engine import AllocationEngine
from appointment_slots.intake import load_requests_json
from appointment_slots.render import (
    format_confirmation,
    format_outcome,
    format_schedule,
    show_day,
)
from appointment_slots.types import ConfigError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Single stderr handler on the root logger."""
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="appointment_slots",
        description="Assign one-hour appointment slots, urgent cases first.",
    )
    parser.add_argument("requests", help="JSON file with a request list")
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument(
        "--show-day", action="store_true", help="print an ASCII view of the day"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = SchedulerConfig.from_env()
        requests = load_requests_json(args.requests, config)
    except (ConfigError, ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    engine = AllocationEngine(config)
    report = engine.run(requests)

    for outcome in report.standard_outcomes:
        print(format_outcome(outcome))
    for confirmation in report.urgent_confirmations:
        print(format_confirmation(confirmation))

    status = 0
    if report.horizon_error is not None:
        print(f"error: {report.horizon_error}", file=sys.stderr)
        status = 1

    print()
    print(format_schedule(report.schedule))
    if args.show_day:
        print()
        print(show_day(engine.ledger, config))
    return status


if __name__ == "__main__":
    sys.exit(main())
