from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Any, Mapping

from ..common.datetime_utils import format_clock_time, format_iso_date, parse_clock_time, parse_iso_date


@dataclass(frozen=True)
class TimeEntry:
    """Domain entity: one punch-in / punch-out / comment record for a date."""

    entry_date: date
    punch_in_time: time
    punch_out_time: time
    comment: str

    def to_dict(self) -> dict[str, str]:
        """Wire shape stored in the durable slot."""
        return {
            "entryDate": format_iso_date(self.entry_date),
            "punchInTime": format_clock_time(self.punch_in_time),
            "punchOutTime": format_clock_time(self.punch_out_time),
            "comment": self.comment,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TimeEntry":
        comment = data["comment"]
        if not isinstance(comment, str):
            raise TypeError("comment must be a string")
        return cls(
            entry_date=parse_iso_date(data["entryDate"]),
            punch_in_time=parse_clock_time(data["punchInTime"]),
            punch_out_time=parse_clock_time(data["punchOutTime"]),
            comment=comment,
        )
