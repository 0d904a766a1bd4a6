from __future__ import annotations

import logging
from datetime import date, time
from typing import Optional, Union

from ..common.datetime_utils import format_iso_date, parse_clock_time, parse_iso_date
from ..common.validators import is_blank, require_non_empty
from ..core.exceptions import ValidationError
from .model import TimeEntry
from .store import EntryStore

logger = logging.getLogger(__name__)

DateInput = Union[date, str]
TimeInput = Union[time, str, None]


class EntryService:
    def __init__(self, store: EntryStore):
        self._store = store

    @staticmethod
    def parse_entry_date(value: DateInput) -> date:
        if isinstance(value, date):
            return value
        if value is not None and not isinstance(value, str):
            raise ValidationError("Invalid entry date (YYYY-MM-DD)")
        v = require_non_empty(value, "Entry date")
        try:
            return parse_iso_date(v)
        except ValueError:
            raise ValidationError("Invalid entry date (YYYY-MM-DD)")

    @staticmethod
    def _parse_time(value: TimeInput) -> time:
        if isinstance(value, time):
            return value
        if not isinstance(value, str):
            raise ValidationError("Invalid time (HH:MM)")
        try:
            return parse_clock_time(value.strip())
        except ValueError:
            raise ValidationError("Invalid time (HH:MM)")

    def submit(
        self,
        entry_date: DateInput,
        punch_in: TimeInput,
        punch_out: TimeInput,
        comment: Optional[str],
    ) -> Optional[TimeEntry]:
        """Append a new entry, or do nothing when the form is incomplete.

        Returns the saved entry, or None when punch-in, punch-out or comment is
        missing. Malformed values and a punch-out not after punch-in raise
        ValidationError.
        """
        if is_blank(punch_in) or is_blank(punch_out) or is_blank(comment):
            return None
        if not isinstance(comment, str):
            raise ValidationError("Comment must be text")

        day = self.parse_entry_date(entry_date)
        punch_in_t = self._parse_time(punch_in)
        punch_out_t = self._parse_time(punch_out)
        if punch_out_t <= punch_in_t:
            raise ValidationError("Punch-out must be after punch-in")

        entry = TimeEntry(
            entry_date=day,
            punch_in_time=punch_in_t,
            punch_out_time=punch_out_t,
            comment=comment.strip(),
        )
        self._store.append(entry)
        logger.info("Saved entry for %s (%s entries total)", format_iso_date(day), len(self._store.entries))
        return entry

    def list_entries(self) -> list[TimeEntry]:
        return list(self._store.entries)

    def entries_for_date(self, day: date) -> list[TimeEntry]:
        return [e for e in self._store.entries if e.entry_date == day]
