"""Request intake: validation and loading of raw request lists.

The engine assumes pre-validated integers; everything that can be malformed
is caught here.

JSON request-list format:
{
    "requests": [
        {"name": "Alice", "urgent": true, "priority": 2},
        {"name": "Carol", "urgent": false, "preferred_start": 9}
    ]
}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from appointment_slots.config import DEFAULT_CONFIG, SchedulerConfig
from appointment_slots.types import PatientRequest, StandardRequest, UrgentRequest

logger = logging.getLogger(__name__)


def _is_int(value: object) -> bool:
    # bool is an int subclass; "true" is never a valid hour or priority
    return isinstance(value, int) and not isinstance(value, bool)


def validate_requests(
    entries: list[dict],
    config: SchedulerConfig = DEFAULT_CONFIG,
) -> list[str]:
    """Validate raw request entries. Returns list of error messages (empty = valid).

    Checks:
    - Each entry is an object with a non-empty string name
    - 'urgent' is a boolean
    - Urgent entries carry an integer priority >= 1
    - Standard entries carry an integer preferred_start in [0, day_end)
    """
    errors: list[str] = []

    if not isinstance(entries, list):
        return [f"requests must be a list, got {type(entries).__name__}"]

    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            errors.append(f"Request {i}: expected an object, got {entry!r}")
            continue

        name = entry.get("name")
        if not isinstance(name, str) or not name.strip():
            errors.append(f"Request {i}: 'name' must be a non-empty string")

        if "urgent" not in entry:
            errors.append(f"Request {i}: missing 'urgent'")
            continue
        if not isinstance(entry["urgent"], bool):
            errors.append(f"Request {i}: 'urgent' must be boolean")
            continue

        if entry["urgent"]:
            priority = entry.get("priority")
            if not _is_int(priority) or priority < 1:
                errors.append(
                    f"Request {i}: 'priority' must be an integer >= 1, "
                    f"got {priority!r}"
                )
        else:
            start = entry.get("preferred_start")
            if not _is_int(start) or not 0 <= start < config.day_end:
                errors.append(
                    f"Request {i}: 'preferred_start' must be an integer hour "
                    f"in [0, {config.day_end}), got {start!r}"
                )

    return errors


def parse_request(entry: dict) -> PatientRequest:
    """Convert one validated entry into an UrgentRequest or StandardRequest."""
    if entry["urgent"]:
        return UrgentRequest(name=entry["name"], priority=entry["priority"])
    return StandardRequest(name=entry["name"], preferred_start=entry["preferred_start"])


def parse_requests(
    entries: list[dict],
    config: SchedulerConfig = DEFAULT_CONFIG,
    source: str = "requests",
) -> list[PatientRequest]:
    """Validate then convert a list of entries.

    Raises ValueError listing every problem if validation fails.
    """
    errors = validate_requests(entries, config)
    if errors:
        raise ValueError(
            f"Validation errors in {source}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )
    requests = [parse_request(entry) for entry in entries]
    logger.debug("Parsed %d requests from %s", len(requests), source)
    return requests


def load_requests_json(
    path: str | Path,
    config: SchedulerConfig = DEFAULT_CONFIG,
) -> list[PatientRequest]:
    """Load a request list from a JSON file.

    Accepts either {"requests": [...]} or a bare list. Raises ValueError if
    validation fails.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    entries = data.get("requests") if isinstance(data, dict) else data
    return parse_requests(entries, config, source=path.name)
