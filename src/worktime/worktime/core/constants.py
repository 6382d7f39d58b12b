"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_CIVIL_TIMEZONE = "Asia/Tokyo"
DEFAULT_LONG_SESSION_LOG_MINUTES = 300
DEFAULT_WEEK_START = 0  # Monday

MIN_SESSION_MINUTES = 1
SECONDS_PER_MINUTE = 60

MIN_REPORT_YEAR = 2000
MAX_REPORT_YEAR = 2100
