"""Time accounting rules over an EntryList.

Everything here is pure: the engine never touches storage and never raises for
a well-formed TimeEntry.
"""

from __future__ import annotations

from datetime import date, time
from typing import Iterable, Optional

from ..common.datetime_utils import format_clock_time, minutes_of_day
from ..core.constants import COMMENTS_SEPARATOR
from ..core.enums import ClassificationPolicy, DayClassification
from ..entries.model import TimeEntry
from .factory import ClassificationStrategyFactory
from .policy import WorkHoursPolicy
from .strategies.base import ClassificationStrategy


class TimeAccountingEngine:
    def __init__(
        self,
        policy: Optional[WorkHoursPolicy] = None,
        *,
        classification: ClassificationPolicy | str = ClassificationPolicy.ALL_ENTRIES,
        strategy_factory: Optional[ClassificationStrategyFactory] = None,
    ):
        self._policy = policy or WorkHoursPolicy()
        self._factory = strategy_factory or ClassificationStrategyFactory()
        self._strategy: ClassificationStrategy = self._factory.for_policy(classification)

    @property
    def policy(self) -> WorkHoursPolicy:
        return self._policy

    def is_within_work_hours(self, punch_in: time, punch_out: time) -> bool:
        return self._policy.covers(punch_in, punch_out)

    def overtime_hours(self, punch_in: time, punch_out: time) -> float:
        """Hours worked beyond the nominal workday; 0.0 when none."""
        worked = minutes_of_day(punch_out) - minutes_of_day(punch_in)
        nominal = self._policy.nominal_minutes
        if worked > nominal:
            return (worked - nominal) / 60
        return 0.0

    def total_overtime_for_month(self, entries: Iterable[TimeEntry], month: int, year: int) -> float:
        """Sum of overtime in a calendar month; ``month`` is 0-indexed (January is 0)."""
        total = 0.0
        for entry in entries:
            if entry.entry_date.year == year and entry.entry_date.month - 1 == month:
                total += self.overtime_hours(entry.punch_in_time, entry.punch_out_time)
        return total

    def comments_for_date(self, entries: Iterable[TimeEntry], day: date) -> str:
        return COMMENTS_SEPARATOR.join(
            f"{format_clock_time(e.punch_in_time)} - {format_clock_time(e.punch_out_time)}: {e.comment}"
            for e in entries_on(entries, day)
        )

    def classify_date(self, entries: Iterable[TimeEntry], day: date) -> DayClassification:
        day_entries = entries_on(entries, day)
        if not day_entries:
            return DayClassification.NONE
        return self._strategy.decide(day_entries=day_entries, policy=self._policy)


def entries_on(entries: Iterable[TimeEntry], day: date) -> list[TimeEntry]:
    return [e for e in entries if e.entry_date == day]


_default_engine = TimeAccountingEngine()

is_within_work_hours = _default_engine.is_within_work_hours
overtime_hours = _default_engine.overtime_hours
total_overtime_for_month = _default_engine.total_overtime_for_month
comments_for_date = _default_engine.comments_for_date
classify_date = _default_engine.classify_date
