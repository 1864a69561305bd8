"""Scheduler configuration: working-day bounds, with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from appointment_slots.types import ConfigError

ENV_DAY_START = "APPOINTMENT_DAY_START"
ENV_DAY_END = "APPOINTMENT_DAY_END"
ENV_URGENT_GAP = "APPOINTMENT_URGENT_GAP"


@dataclass(frozen=True)
class SchedulerConfig:
    """Hour bounds for one scheduling day. Immutable.

    day_start: first hour the urgent cursor considers (9 = 9:00).
    day_end: exclusive upper bound on urgent cursor advancement.
    urgent_gap: hours the cursor skips after each urgent booking.
        1 keeps urgent patients out of adjacent hours, so after Bob at
        10:00 the next urgent patient is tried from 12:00. 0 packs them
        back to back (next try at 11:00), as the console scheduler did;
        use it to reproduce that program's urgent timings.
    """

    day_start: int = 9
    day_end: int = 24
    urgent_gap: int = 1

    def __post_init__(self) -> None:
        if not 0 <= self.day_start < self.day_end <= 24:
            raise ConfigError(
                f"day bounds must satisfy 0 <= day_start < day_end <= 24, "
                f"got day_start={self.day_start}, day_end={self.day_end}"
            )
        if self.urgent_gap < 0:
            raise ConfigError(f"urgent_gap must be >= 0, got {self.urgent_gap}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SchedulerConfig:
        """Build a config from environment variables, defaulting unset ones."""
        if environ is None:
            environ = os.environ
        return cls(
            day_start=_int_from_env(environ, ENV_DAY_START, cls.day_start),
            day_end=_int_from_env(environ, ENV_DAY_END, cls.day_end),
            urgent_gap=_int_from_env(environ, ENV_URGENT_GAP, cls.urgent_gap),
        )


def _int_from_env(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from None


DEFAULT_CONFIG = SchedulerConfig()
