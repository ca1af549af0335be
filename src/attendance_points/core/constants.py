"""Constants and defaults.

Note: Keep policy numbers here to avoid magic numbers spread across code.
"""

ILLNESS_OCCURRENCE_POINTS = 4

NCNS_WINDOW_DAYS = 365
GOOD_BEHAVIOR_DAYS = 90
DEFAULT_PROBATION_DAYS = 90

UNKNOWN_EMPLOYEE = "Unknown"

BACKUP_FILENAME_PATTERN = "attendance-backup-{stamp}.json"

# Local storage keys
EMPLOYEES_KEY = "employees"
INCIDENTS_KEY = "incidents"
AUTO_BACKUP_KEY = "auto-backup"
AUTO_BACKUP_TIMESTAMP_KEY = "auto-backup-timestamp"
AUTO_BACKUP_ENABLED_KEY = "auto-backup-enabled"
