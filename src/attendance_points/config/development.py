import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Key-value document standing in for the browser's local storage
DATA_FILE = os.getenv("DATA_FILE", "data/attendance.json")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

AUTO_BACKUP_ENABLED = bool(int(os.getenv("AUTO_BACKUP_ENABLED", "1")))

# Remove a new hire after a single no-call/no-show during probation
ENFORCE_PROBATION_NCNS = bool(int(os.getenv("ENFORCE_PROBATION_NCNS", "0")))
PROBATION_DAYS = int(os.getenv("PROBATION_DAYS", "90"))

CENTERS = [c.strip() for c in os.getenv("CENTERS", "Beachwood,Columbus").split(",") if c.strip()]
DEFAULT_CENTER = os.getenv("DEFAULT_CENTER", "Beachwood")
