"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR

# Timetables never state am/pm, so a non-increasing pair is read as crossing midday.
MIDDAY_ROLLOVER_MINUTES = 12 * MINUTES_PER_HOUR

SESSION_STATE_PREFIX = "attendance:"
