import pytest

from conftest import make_entry
from src.timesheet_calendar.timesheet_calendar.accounting.factory import ClassificationStrategyFactory
from src.timesheet_calendar.timesheet_calendar.accounting.policy import WorkHoursPolicy
from src.timesheet_calendar.timesheet_calendar.accounting.strategies.all_entries_strategy import AllEntriesStrategy
from src.timesheet_calendar.timesheet_calendar.accounting.strategies.first_entry_strategy import FirstEntryStrategy
from src.timesheet_calendar.timesheet_calendar.core.enums import ClassificationPolicy, DayClassification
from src.timesheet_calendar.timesheet_calendar.core.exceptions import ValidationError


def test_factory_defaults_to_all_entries():
    factory = ClassificationStrategyFactory()
    assert isinstance(factory.for_policy(ClassificationPolicy.ALL_ENTRIES), AllEntriesStrategy)
    assert isinstance(factory.for_policy("all"), AllEntriesStrategy)


def test_factory_first_entry_from_setting_string():
    assert isinstance(ClassificationStrategyFactory().for_policy("first"), FirstEntryStrategy)


def test_factory_rejects_unknown_policy():
    with pytest.raises(ValidationError):
        ClassificationStrategyFactory().for_policy("majority")


def test_strategies_on_mixed_day():
    policy = WorkHoursPolicy()
    day = [make_entry("2024-03-05", "10:00", "12:00"), make_entry("2024-03-05", "09:00", "11:00")]

    assert AllEntriesStrategy().decide(day_entries=day, policy=policy) is DayClassification.NONCOMPLIANT
    assert FirstEntryStrategy().decide(day_entries=day, policy=policy) is DayClassification.COMPLIANT
    assert FirstEntryStrategy().decide(day_entries=day[::-1], policy=policy) is DayClassification.NONCOMPLIANT


def test_strategies_on_empty_day():
    policy = WorkHoursPolicy()
    assert AllEntriesStrategy().decide(day_entries=[], policy=policy) is DayClassification.NONE
    assert FirstEntryStrategy().decide(day_entries=[], policy=policy) is DayClassification.NONE


def test_all_entries_compliant_day():
    policy = WorkHoursPolicy()
    day = [make_entry("2024-03-05", "10:00", "12:00"), make_entry("2024-03-05", "13:00", "19:00")]
    assert AllEntriesStrategy().decide(day_entries=day, policy=policy) is DayClassification.COMPLIANT
