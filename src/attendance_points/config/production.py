import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DATA_FILE = os.getenv("DATA_FILE", "data/attendance.json")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_BACKUP_ENABLED = bool(int(os.getenv("AUTO_BACKUP_ENABLED", "1")))

ENFORCE_PROBATION_NCNS = bool(int(os.getenv("ENFORCE_PROBATION_NCNS", "0")))
PROBATION_DAYS = int(os.getenv("PROBATION_DAYS", "90"))

CENTERS = [c.strip() for c in os.getenv("CENTERS", "Beachwood,Columbus").split(",") if c.strip()]
DEFAULT_CENTER = os.getenv("DEFAULT_CENTER", "Beachwood")
