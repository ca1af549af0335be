SECRET_KEY = "test-secret"

# None keeps everything in memory
DATA_FILE = None

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_BACKUP_ENABLED = False

ENFORCE_PROBATION_NCNS = False
PROBATION_DAYS = 90

CENTERS = ["Beachwood", "Columbus"]
DEFAULT_CENTER = "Beachwood"
