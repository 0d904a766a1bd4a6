import os
from pathlib import Path

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

STORAGE_PATH = os.getenv("STORAGE_PATH", str(Path(__file__).resolve().parents[1] / "data" / "timesheet.json"))
STORAGE_KEY = os.getenv("STORAGE_KEY", "timesheetData")

WORK_START = os.getenv("WORK_START", "10:00")
WORK_END = os.getenv("WORK_END", "19:00")
CLASSIFICATION_POLICY = os.getenv("CLASSIFICATION_POLICY", "all")

DEBUG = True
