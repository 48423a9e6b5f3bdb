# --- START OF FILE constants.py ---

"""
Central location for constants used across the pyzpool modules.
"""

# --- Pool Health States ---
# https://openzfs.github.io/openzfs-docs/man/7/zpoolconcepts.7.html#Device_Failure_and_Recovery
ZPOOL_ONLINE = "ONLINE"
ZPOOL_DEGRADED = "DEGRADED"
ZPOOL_FAULTED = "FAULTED"
ZPOOL_OFFLINE = "OFFLINE"
ZPOOL_UNAVAIL = "UNAVAIL"
ZPOOL_REMOVED = "REMOVED"

ZPOOL_HEALTH_STATES = (
    ZPOOL_ONLINE, ZPOOL_DEGRADED, ZPOOL_FAULTED,
    ZPOOL_OFFLINE, ZPOOL_UNAVAIL, ZPOOL_REMOVED,
)

# --- ZPOOL Property Lists ---
# Used for 'zpool get -Hp <props> <pool>'
ZPOOL_PROPS = [
    'name', 'health', 'allocated', 'size', 'free', 'readonly',
    'dedupratio', 'fragmentation', 'freeing', 'leaked',
]

# 'zpool get -H' rows: pool, property, value, source
ZPOOL_GET_COLUMNS = 4
# 'zpool list -Ho name' rows
ZPOOL_LIST_COLUMNS = 1

# --- Status Messages ---
NO_KNOWN_DATA_ERRORS = "No known data errors"

# --- Default Settings ---
# These are fallback values used when config file doesn't have the setting or value is invalid
DEFAULT_COMMAND_LOG_ENABLED = False   # Command audit log (disabled by default)
DEFAULT_DEBUG_LOGGING = False

# Stderr is truncated to this many characters in error messages
STDERR_DISPLAY_LIMIT = 300

# --- END OF FILE constants.py ---
