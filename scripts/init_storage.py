from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.timesheet_calendar.timesheet_calendar.entries.json_file_storage import JsonFileStorage


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    storage = JsonFileStorage(settings.STORAGE_PATH)

    if storage.get_item(settings.STORAGE_KEY) is None:
        storage.set_item(settings.STORAGE_KEY, "[]")
        print(f"OK: Created empty slot {settings.STORAGE_KEY!r} -> {storage.path}")
    else:
        print(f"OK: Slot {settings.STORAGE_KEY!r} already present -> {storage.path}")


if __name__ == "__main__":
    main()
