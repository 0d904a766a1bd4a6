from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from ..common.datetime_utils import minutes_of_day
from ..core.constants import DEFAULT_WORK_END, DEFAULT_WORK_START
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class WorkHoursPolicy:
    """The fixed work-hours window; its length is the nominal workday."""

    work_start: time = DEFAULT_WORK_START
    work_end: time = DEFAULT_WORK_END

    def __post_init__(self) -> None:
        if self.work_end <= self.work_start:
            raise ValidationError("Work end must be after work start")

    @property
    def nominal_minutes(self) -> int:
        return minutes_of_day(self.work_end) - minutes_of_day(self.work_start)

    def covers(self, punch_in: time, punch_out: time) -> bool:
        """True when the punch span starts and ends inside the window."""
        return punch_in >= self.work_start and punch_out <= self.work_end
