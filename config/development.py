import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

# All wall-clock timestamps are read in this zone
CIVIL_TIMEZONE = os.getenv("CIVIL_TIMEZONE", "Asia/Tokyo")

# Sessions longer than this are logged at DEBUG with both instants
LONG_SESSION_LOG_MINUTES = int(os.getenv("LONG_SESSION_LOG_MINUTES", "300"))

# 0 = Monday, 6 = Sunday
WEEK_START = int(os.getenv("WEEK_START", "0"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
