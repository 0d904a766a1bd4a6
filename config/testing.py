import os
import tempfile
from pathlib import Path

SECRET_KEY = "test-secret"

STORAGE_PATH = os.getenv("STORAGE_PATH", str(Path(tempfile.gettempdir()) / "timesheet-calendar-test.json"))
STORAGE_KEY = "timesheetData"

WORK_START = "10:00"
WORK_END = "19:00"
CLASSIFICATION_POLICY = "all"

DEBUG = False
TESTING = True
