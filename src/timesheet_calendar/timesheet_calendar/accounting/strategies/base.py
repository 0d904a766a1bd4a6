from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...core.enums import DayClassification
from ...entries.model import TimeEntry
from ..policy import WorkHoursPolicy


class ClassificationStrategy(ABC):
    """Strategy Pattern: encapsulate how a day with entries gets its color."""

    @abstractmethod
    def decide(self, *, day_entries: Sequence[TimeEntry], policy: WorkHoursPolicy) -> DayClassification:
        raise NotImplementedError


def classify_entry(entry: TimeEntry, policy: WorkHoursPolicy) -> DayClassification:
    if policy.covers(entry.punch_in_time, entry.punch_out_time):
        return DayClassification.COMPLIANT
    return DayClassification.NONCOMPLIANT
