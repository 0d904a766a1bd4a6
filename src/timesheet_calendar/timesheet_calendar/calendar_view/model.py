from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_iso_date
from ..core.enums import DayClassification


@dataclass(frozen=True)
class DayTile:
    """Read-model for one calendar cell (color, marker, hover text)."""

    day: date
    classification: DayClassification
    css_class: str
    marker: str
    comments: str

    def to_dict(self) -> dict:
        return {
            "date": format_iso_date(self.day),
            "classification": self.classification.value,
            "css_class": self.css_class,
            "marker": self.marker,
            "comments": self.comments,
        }


@dataclass(frozen=True)
class MonthView:
    year: int
    month: int  # 0-indexed
    weeks: list[list[Optional[DayTile]]]
    total_overtime_hours: float
    banner: str
    previous: tuple[int, int]
    following: tuple[int, int]
