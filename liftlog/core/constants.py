"""Application constants."""

# Weekly volume chart
DEFAULT_WEEKS_BACK = 5

# Rolling dashboard window (days before today, local time)
ROLLING_WINDOW_DAYS = 30

# Dashboard "recent activity" list
DEFAULT_RECENT_SESSIONS = 5
MAX_RECENT_SESSIONS = 50

# Last-weights lookup scans this many of the newest logs for an exercise
LAST_WEIGHTS_LOOKBACK = 10

# Column limits
MAX_NAME_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500
MAX_TARGET_CONFIG_LENGTH = 50
MAX_NOTES_LENGTH = 1000
