from datetime import date, time

import pytest

from conftest import make_entry
from src.timesheet_calendar.timesheet_calendar.accounting import engine as accounting
from src.timesheet_calendar.timesheet_calendar.accounting.engine import TimeAccountingEngine
from src.timesheet_calendar.timesheet_calendar.accounting.policy import WorkHoursPolicy
from src.timesheet_calendar.timesheet_calendar.core.enums import DayClassification
from src.timesheet_calendar.timesheet_calendar.core.exceptions import ValidationError


def test_nominal_workday_has_no_overtime():
    assert accounting.overtime_hours(time(10, 0), time(19, 0)) == 0


def test_ten_hour_day_is_one_hour_overtime():
    assert accounting.overtime_hours(time(9, 0), time(19, 0)) == 1.0


def test_overtime_counts_partial_hours():
    assert accounting.overtime_hours(time(10, 0), time(19, 45)) == pytest.approx(0.75)


@pytest.mark.parametrize(
    "punch_in, punch_out",
    [(time(10, 0), time(12, 0)), (time(19, 0), time(10, 0)), (time(0, 0), time(23, 59)), (time(8, 0), time(8, 0))],
)
def test_overtime_is_never_negative(punch_in, punch_out):
    assert accounting.overtime_hours(punch_in, punch_out) >= 0


def test_within_work_hours_rejects_early_start():
    assert accounting.is_within_work_hours(time(9, 30), time(18, 0)) is False


def test_within_work_hours_accepts_exact_window():
    assert accounting.is_within_work_hours(time(10, 0), time(19, 0)) is True


def test_within_work_hours_rejects_late_end():
    assert accounting.is_within_work_hours(time(10, 0), time(19, 1)) is False


def test_out_of_window_entry_still_earns_overtime():
    assert accounting.is_within_work_hours(time(8, 0), time(20, 0)) is False
    assert accounting.overtime_hours(time(8, 0), time(20, 0)) == 3.0


def test_total_overtime_for_empty_month_is_zero():
    assert accounting.total_overtime_for_month([], 0, 2024) == 0
    assert accounting.total_overtime_for_month([], 11, 1999) == 0


def test_total_overtime_uses_zero_indexed_month():
    entries = [
        make_entry("2024-03-05", "10:00", "20:00", "a"),
        make_entry("2024-03-20", "10:00", "19:00", "b"),
    ]
    assert accounting.total_overtime_for_month(entries, 2, 2024) == 1.0
    assert accounting.total_overtime_for_month(entries, 3, 2024) == 0
    assert accounting.total_overtime_for_month(entries, 2, 2023) == 0


def test_total_overtime_sums_every_entry_of_the_month():
    entries = [
        make_entry("2024-01-31", "08:00", "20:00"),
        make_entry("2024-02-01", "09:00", "20:00"),
        make_entry("2024-02-01", "20:30", "22:00"),
        make_entry("2024-02-29", "07:00", "19:30"),
    ]
    assert accounting.total_overtime_for_month(entries, 1, 2024) == pytest.approx(2.0 + 3.5)


def test_comments_for_date_joins_entries_in_order():
    entries = [
        make_entry("2024-03-05", "10:00", "12:00", "x"),
        make_entry("2024-03-06", "10:00", "11:00", "other day"),
        make_entry("2024-03-05", "13:00", "15:00", "y"),
    ]
    assert accounting.comments_for_date(entries, date(2024, 3, 5)) == "10:00 - 12:00: x, 13:00 - 15:00: y"


def test_comments_for_date_without_entries_is_empty():
    assert accounting.comments_for_date([make_entry("2024-03-05", "10:00", "12:00")], date(2024, 3, 6)) == ""


def test_classify_date_without_entries():
    assert accounting.classify_date([], date(2024, 3, 5)) is DayClassification.NONE


def test_classify_date_compliant_and_noncompliant():
    entries = [
        make_entry("2024-03-05", "10:00", "19:00"),
        make_entry("2024-03-06", "09:00", "19:00"),
    ]
    assert accounting.classify_date(entries, date(2024, 3, 5)) is DayClassification.COMPLIANT
    assert accounting.classify_date(entries, date(2024, 3, 6)) is DayClassification.NONCOMPLIANT


def test_default_engine_requires_every_entry_of_the_day_in_hours():
    entries = [
        make_entry("2024-03-05", "10:00", "12:00"),
        make_entry("2024-03-05", "18:00", "20:00"),
    ]
    assert accounting.classify_date(entries, date(2024, 3, 5)) is DayClassification.NONCOMPLIANT


def test_first_entry_engine_keeps_legacy_coloring():
    engine = TimeAccountingEngine(classification="first")
    entries = [
        make_entry("2024-03-05", "10:00", "12:00"),
        make_entry("2024-03-05", "18:00", "20:00"),
    ]
    assert engine.classify_date(entries, date(2024, 3, 5)) is DayClassification.COMPLIANT


def test_custom_policy_changes_window_and_nominal_day():
    engine = TimeAccountingEngine(WorkHoursPolicy(work_start=time(8, 0), work_end=time(16, 0)))
    assert engine.policy.nominal_minutes == 8 * 60
    assert engine.is_within_work_hours(time(8, 0), time(16, 0)) is True
    assert engine.overtime_hours(time(8, 0), time(17, 0)) == 1.0


def test_policy_rejects_inverted_window():
    with pytest.raises(ValidationError):
        WorkHoursPolicy(work_start=time(19, 0), work_end=time(10, 0))
