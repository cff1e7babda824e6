"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

DEFAULT_EVENT_NAME = "Attendance Tracker"
DEFAULT_DATA_FILE = "data/attendance.json"
CSV_HEADERS = ("School ID", "Name", "Date", "Time")
ADMIN_RECENT_LIMIT = 50
# Shown in place of a time when a stored timestamp cannot be parsed
INVALID_TIME_PLACEHOLDER = "Invalid Date"
