"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EARTH_RADIUS_METERS = 6_371_000.0
METERS_PER_KM = 1000.0

WEEKLY_WINDOW_DAYS = 7
HOURS_DECIMALS = 2

DEFAULT_LOCK_TIMEOUT_SECONDS = 5.0
DEFAULT_LOCK_WAIT_TIMEOUT = 5
DEFAULT_CONNECTION_TIMEOUT = 10

UNKNOWN_DISPLAY_NAME = "unknown"
