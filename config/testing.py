import os

SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"
DATA_FILE = os.getenv("DATA_FILE", "instance/church_roster_test.json")
STORAGE_KEY = "churchAttendanceMembers"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "church_roster_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
