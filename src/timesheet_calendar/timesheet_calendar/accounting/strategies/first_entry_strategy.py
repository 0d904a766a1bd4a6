from __future__ import annotations

from typing import Sequence

from ...core.enums import DayClassification
from ...entries.model import TimeEntry
from ..policy import WorkHoursPolicy
from .base import ClassificationStrategy, classify_entry


class FirstEntryStrategy(ClassificationStrategy):
    """Only the first recorded entry of the day decides (legacy coloring)."""

    def decide(self, *, day_entries: Sequence[TimeEntry], policy: WorkHoursPolicy) -> DayClassification:
        if not day_entries:
            return DayClassification.NONE
        return classify_entry(day_entries[0], policy)
