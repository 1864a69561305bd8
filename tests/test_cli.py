"""Tests for the python -m appointment_slots entry point."""

from __future__ import annotations

import json
import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """main() reconfigures the root logger; undo it after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestMain:

    def test_example_run(self, example_requests_path, capsys, monkeypatch):
        from appointment_slots.__main__ import main

        monkeypatch.delenv("APPOINTMENT_DAY_START", raising=False)
        monkeypatch.delenv("APPOINTMENT_DAY_END", raising=False)

        assert main([str(example_requests_path)]) == 0
        out = capsys.readouterr().out.splitlines()

        assert out[:3] == [
            "Standard Scheduled: Carol from 9:00 to 10:00",
            "Standard Scheduled: Dora from 14:00 to 15:00",
            "Time slot is taken. Please choose another time.",
        ]
        assert "Priority Scheduled: Bob from 10:00 to 11:00 (Priority 1)" in out
        assert "Priority Scheduled: Alice from 12:00 to 13:00 (Priority 2)" in out
        assert out[-4:] == [
            "Carol: 9:00 - 10:00",
            "Bob: 10:00 - 11:00",
            "Alice: 12:00 - 13:00",
            "Dora: 14:00 - 15:00",
        ]

    def test_show_day(self, example_requests_path, capsys):
        from appointment_slots.__main__ import main

        main([str(example_requests_path), "--show-day"])
        assert "Legend:" in capsys.readouterr().out

    def test_invalid_input(self, tmp_path, capsys):
        from appointment_slots.__main__ import main

        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"requests": [{"name": "A", "urgent": True}]}))
        assert main([str(path)]) == 2
        assert "priority" in capsys.readouterr().err

    def test_horizon_exhausted(self, tmp_path, capsys, monkeypatch):
        from appointment_slots.__main__ import main

        monkeypatch.setenv("APPOINTMENT_DAY_START", "22")
        monkeypatch.setenv("APPOINTMENT_DAY_END", "23")
        monkeypatch.delenv("APPOINTMENT_URGENT_GAP", raising=False)
        path = tmp_path / "late.json"
        path.write_text(json.dumps({"requests": [
            {"name": "A", "urgent": True, "priority": 1},
            {"name": "B", "urgent": True, "priority": 2},
        ]}))

        assert main([str(path)]) == 1
        captured = capsys.readouterr()
        assert "'B'" in captured.err
        assert "Priority Scheduled: A from 22:00 to 23:00 (Priority 1)" in captured.out
        assert "A: 22:00 - 23:00" in captured.out
