import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", "12345"),
    "database": os.getenv("DB_NAME", "attendance_test"),
}

CIVIL_TIMEZONE = "Asia/Tokyo"
LONG_SESSION_LOG_MINUTES = 300
WEEK_START = 0

DEBUG = False
TESTING = True
LOG_LEVEL = "DEBUG"
