"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

DEFAULT_STORAGE_KEY = "timesheetData"
DEFAULT_WORK_START = time(10, 0)
DEFAULT_WORK_END = time(19, 0)

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"

COMMENT_MARKER = "\N{MEMO}"
COMMENTS_SEPARATOR = ", "
