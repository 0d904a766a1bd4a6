from __future__ import annotations

from typing import Sequence

from ...core.enums import DayClassification
from ...entries.model import TimeEntry
from ..policy import WorkHoursPolicy
from .base import ClassificationStrategy, classify_entry


class AllEntriesStrategy(ClassificationStrategy):
    """Compliant only when every entry of the day is within work hours."""

    def decide(self, *, day_entries: Sequence[TimeEntry], policy: WorkHoursPolicy) -> DayClassification:
        if not day_entries:
            return DayClassification.NONE
        for entry in day_entries:
            if classify_entry(entry, policy) is DayClassification.NONCOMPLIANT:
                return DayClassification.NONCOMPLIANT
        return DayClassification.COMPLIANT
