"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

BADGE_ID_PATTERN = r"\d{4}"
DEFAULT_BREAK_THRESHOLD_MINUTES = 20
DEFAULT_MAX_PENDING_UPDATES = 64
DEFAULT_EMPLOYEES_FILE = "employees.json"
DEFAULT_PAUSES_FILE = "pauses.json"
