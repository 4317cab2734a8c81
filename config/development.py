import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# memory | file | mysql
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
DATA_FILE = os.getenv("DATA_FILE", "instance/church_roster.json")
STORAGE_KEY = os.getenv("STORAGE_KEY", "churchAttendanceMembers")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "church_roster"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled with the mysql backend, the app creates the roster_kv table on startup.
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
