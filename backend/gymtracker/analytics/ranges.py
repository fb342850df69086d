"""Lookback window selection for the stats and exercise history reports."""
from datetime import datetime, timedelta, timezone
from typing import Iterable

from gymtracker.core.constants import TIME_RANGE_DAYS
from gymtracker.core.time_utils import ensure_utc
from gymtracker.schemas.workout import WorkoutLog

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def range_cutoff(time_range: str | None, now: datetime) -> datetime:
    """Earliest start instant included by `time_range`.

    '7d' / '30d' / '90d' -> now minus that many days. 'all' and any
    unrecognised token fall back to the epoch (whole history).
    """
    days = TIME_RANGE_DAYS.get(time_range or "")
    if days is None:
        return EPOCH
    return ensure_utc(now) - timedelta(days=days)


def filter_by_range(
    workouts: Iterable[WorkoutLog], time_range: str | None, now: datetime
) -> list[WorkoutLog]:
    # No upper bound: workouts dated in the future are kept
    cutoff = range_cutoff(time_range, now)
    return [w for w in workouts if w.started_at >= cutoff]


def completed_only(workouts: Iterable[WorkoutLog]) -> list[WorkoutLog]:
    return [w for w in workouts if w.is_completed]
