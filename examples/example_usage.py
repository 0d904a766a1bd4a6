"""Example: use the service layer without Flask.

Controllers are a thin layer; the time accounting lives in services.
"""

from datetime import date

from src.timesheet_calendar.timesheet_calendar.accounting.engine import TimeAccountingEngine
from src.timesheet_calendar.timesheet_calendar.calendar_view.service import CalendarService
from src.timesheet_calendar.timesheet_calendar.entries.memory_storage import InMemoryStorage
from src.timesheet_calendar.timesheet_calendar.entries.service import EntryService
from src.timesheet_calendar.timesheet_calendar.entries.store import EntryStore


def main():
    store = EntryStore(InMemoryStorage())
    entries = EntryService(store)
    calendar = CalendarService(store, TimeAccountingEngine())

    entries.submit(date(2024, 3, 5), "10:00", "20:00", "Release")
    entries.submit(date(2024, 3, 20), "10:00", "19:00", "Regular day")

    print(calendar.day_tile(date(2024, 3, 5)))
    print(calendar.month_view(2024, 2).banner)


if __name__ == "__main__":
    main()
