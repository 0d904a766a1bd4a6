from __future__ import annotations

from datetime import date

import pytest

from src.timesheet_calendar.timesheet_calendar.entries.memory_storage import InMemoryStorage
from src.timesheet_calendar.timesheet_calendar.entries.model import TimeEntry
from src.timesheet_calendar.timesheet_calendar.entries.store import EntryStore


def make_entry(day: str, punch_in: str, punch_out: str, comment: str = "work") -> TimeEntry:
    return TimeEntry.from_dict(
        {"entryDate": day, "punchInTime": punch_in, "punchOutTime": punch_out, "comment": comment}
    )


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 3, 15)


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def store(storage) -> EntryStore:
    return EntryStore(storage)


@pytest.fixture
def app(tmp_path, monkeypatch, fixed_today):
    from src.timesheet_calendar.timesheet_calendar.calendar_view import controller as calendar_controller
    from src.timesheet_calendar.timesheet_calendar.main import create_app

    monkeypatch.setattr(calendar_controller, "today_local", lambda: fixed_today)
    return create_app("config.testing", overrides={"STORAGE_PATH": str(tmp_path / "timesheet.json")})


@pytest.fixture
def client(app):
    return app.test_client()
