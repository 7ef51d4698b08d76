"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 1
RECENT_REJECTED_LIMIT = 5
MIN_CODE_LENGTH = 3
