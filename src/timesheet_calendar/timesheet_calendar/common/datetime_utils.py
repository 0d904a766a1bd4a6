from __future__ import annotations

from datetime import date, datetime, time

from ..core.constants import DATE_FORMAT, TIME_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def parse_clock_time(value: str) -> time:
    """Parse HH:MM string into a time of day."""
    return datetime.strptime(value, TIME_FORMAT).time()


def format_iso_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def format_clock_time(value: time) -> str:
    return value.strftime(TIME_FORMAT)


def minutes_of_day(value: time) -> int:
    return value.hour * 60 + value.minute


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()
