import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

CIVIL_TIMEZONE = os.getenv("CIVIL_TIMEZONE", "Asia/Tokyo")
LONG_SESSION_LOG_MINUTES = int(os.getenv("LONG_SESSION_LOG_MINUTES", "300"))
WEEK_START = int(os.getenv("WEEK_START", "0"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
