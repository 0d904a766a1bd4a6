from __future__ import annotations

import importlib
import sys
from datetime import date
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.timesheet_calendar.timesheet_calendar.container import build_container

DEMO_ENTRIES = [
    (3, "10:00", "19:00", "Sprint planning"),
    (4, "09:30", "18:00", "Early standup with the Tokyo team"),
    (5, "10:00", "21:30", "Release night"),
    (5, "22:00", "23:00", "Hotfix follow-up"),
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(app_config=vars(settings))

    today = date.today()
    for day, punch_in, punch_out, comment in DEMO_ENTRIES:
        container.entry_service.submit(date(today.year, today.month, day), punch_in, punch_out, comment)

    total = container.calendar_service.total_overtime(today.year, today.month - 1)
    print(f"OK: Seeded {len(DEMO_ENTRIES)} entries -> {settings.STORAGE_PATH} (overtime this month: {total:.2f}h)")


if __name__ == "__main__":
    main()
