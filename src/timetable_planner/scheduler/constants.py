"""Constants for timetable enumeration."""

# Maximum number of timetables returned by one generation run
MAX_TIMETABLES = 500

# Recursive frames between time limit checks
INTERRUPT_CHECK_INTERVAL = 1000

# Placeholder for absent lab fields in canonical keys
NO_LAB = "none"

# Separator between per-course tokens in canonical keys
KEY_SEPARATOR = "|"

# Separator between fields inside one token
FIELD_SEPARATOR = ":"
