from __future__ import annotations

import calendar
from datetime import date
from typing import Optional

from ..accounting.engine import TimeAccountingEngine
from ..core.constants import COMMENT_MARKER
from ..core.enums import DayClassification
from ..core.exceptions import ValidationError
from ..entries.store import EntryStore
from .model import DayTile, MonthView

TILE_CSS = {
    DayClassification.COMPLIANT: "bg-green-300",
    DayClassification.NONCOMPLIANT: "bg-red-300",
    DayClassification.NONE: "",
}


def overtime_banner(month: int, year: int, total: float) -> str:
    return f"Total Overtime for {month + 1}/{year}: {total:.2f} hours"


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move a (year, 0-indexed month) pair by ``delta`` months."""
    index = year * 12 + month + delta
    return index // 12, index % 12


class CalendarService:
    def __init__(self, store: EntryStore, engine: TimeAccountingEngine):
        self._store = store
        self._engine = engine

    @staticmethod
    def current_month(today: date) -> tuple[int, int]:
        return today.year, today.month - 1

    def day_tile(self, day: date) -> DayTile:
        entries = self._store.entries
        classification = self._engine.classify_date(entries, day)
        comments = self._engine.comments_for_date(entries, day)
        return DayTile(
            day=day,
            classification=classification,
            css_class=TILE_CSS[classification],
            marker=COMMENT_MARKER if comments else "",
            comments=comments,
        )

    def total_overtime(self, year: int, month: int) -> float:
        return self._engine.total_overtime_for_month(self._store.entries, month, year)

    def month_view(self, year: int, month: int) -> MonthView:
        if not 0 <= month <= 11:
            raise ValidationError("Month must be between 1 and 12")
        if not 1 < year < 9999:
            raise ValidationError("Year out of range")

        weeks: list[list[Optional[DayTile]]] = []
        for week in calendar.Calendar(firstweekday=calendar.MONDAY).monthdayscalendar(year, month + 1):
            weeks.append([self.day_tile(date(year, month + 1, d)) if d else None for d in week])

        total = self.total_overtime(year, month)
        return MonthView(
            year=year,
            month=month,
            weeks=weeks,
            total_overtime_hours=total,
            banner=overtime_banner(month, year, total),
            previous=shift_month(year, month, -1),
            following=shift_month(year, month, 1),
        )
