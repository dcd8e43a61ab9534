import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timeclock_db"),
}

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
# Directory for rotating log files; empty disables file logging
LOG_DIR = os.getenv("LOG_DIR", "")

# Weekday the dashboard week starts on
WEEK_START = os.getenv("WEEK_START", "Sunday")

# Copy imported/created jobs into the job catalog on every dashboard load
SYNC_STAGED_JOBS = bool(int(os.getenv("SYNC_STAGED_JOBS", "1")))
JOBS_PAGE_SIZE = int(os.getenv("JOBS_PAGE_SIZE", "100"))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
