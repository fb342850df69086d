"""Shared analytics constants.

Centralizes the values both the cloud service and the local store rely on
so that their reports stay identical.
"""

# Lookback window per time range token. Tokens missing here (including
# "all" and anything unknown) select the full history.
TIME_RANGE_DAYS = {
    "7d": 7,
    "30d": 30,
    "90d": 90,
}
TIME_RANGE_ALL = "all"

# Allowed weekly workout goal, inclusive
WEEKLY_GOAL_MIN = 1
WEEKLY_GOAL_MAX = 7

# Heat-map window: 12 weeks of daily cells ending today
CALENDAR_DAYS = 84

# Daily workout count at which the heat-map cell saturates
MAX_INTENSITY = 4

# Number of week buckets returned in the streak history (newest first)
WEEKLY_HISTORY_WEEKS = 12
