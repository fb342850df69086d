"""Weekly goal streaks and the daily calendar heat-map.

Both work over the whole completed history; the stats time range does not
apply here.
"""
from collections import Counter
from datetime import date, datetime, timedelta, tzinfo
from typing import Iterable, NamedTuple

from gymtracker.core.constants import CALENDAR_DAYS, MAX_INTENSITY
from gymtracker.core.time_utils import date_key, local_date, monday_of
from gymtracker.schemas.analytics import CalendarDay, WeekBucket
from gymtracker.schemas.workout import WorkoutLog


class StreakSummary(NamedTuple):
    current_streak: int
    longest_streak: int
    current_week_progress: int
    weeks: list[WeekBucket]  # newest first


def week_buckets(
    workouts: Iterable[WorkoutLog], weekly_goal: int, tz: tzinfo | None
) -> list[WeekBucket]:
    """Group workouts by the Monday of their week, newest week first.

    Weeks without any workout produce no bucket at all.
    """
    counts = Counter(
        monday_of(local_date(w.started_at, tz)).isoformat() for w in workouts
    )
    buckets = [
        WeekBucket(week_start_date=week, workout_count=n, met_goal=n >= weekly_goal)
        for week, n in counts.items()
    ]
    return sorted(buckets, key=lambda b: b.week_start_date, reverse=True)


def current_streak(weeks: list[WeekBucket]) -> int:
    """Leading run of goal-meeting weeks in a newest-first list.

    Only recorded weeks are looked at: a week with no workouts is absent
    rather than a miss, so it does not end the streak.
    """
    streak = 0
    for week in weeks:
        if not week.met_goal:
            break
        streak += 1
    return streak


def longest_streak(weeks: list[WeekBucket]) -> int:
    longest = 0
    running = 0
    for week in reversed(weeks):  # oldest first
        if week.met_goal:
            running += 1
            longest = max(longest, running)
        else:
            running = 0
    return longest


def summarize_streak(
    workouts: list[WorkoutLog], weekly_goal: int, today: date, tz: tzinfo | None
) -> StreakSummary:
    weeks = week_buckets(workouts, weekly_goal, tz)
    this_week = monday_of(today).isoformat()
    progress = next(
        (w.workout_count for w in weeks if w.week_start_date == this_week), 0
    )
    return StreakSummary(
        current_streak=current_streak(weeks),
        longest_streak=longest_streak(weeks),
        current_week_progress=progress,
        weeks=weeks,
    )


def intensity_for(count: int) -> int:
    # 0, 1, 2, 3 map to themselves; 4 or more saturate
    return min(max(count, 0), MAX_INTENSITY)


def calendar_heatmap(
    workouts: Iterable[WorkoutLog], today: date, tz: tzinfo | None
) -> list[CalendarDay]:
    """Daily cells for the CALENDAR_DAYS days ending with `today` (inclusive).

    Always returns the full grid; days without workouts have intensity 0.
    """
    per_day = Counter(date_key(w.started_at, tz) for w in workouts)
    start = today - timedelta(days=CALENDAR_DAYS - 1)
    days: list[CalendarDay] = []
    for offset in range(CALENDAR_DAYS):
        key = (start + timedelta(days=offset)).isoformat()
        count = per_day.get(key, 0)
        days.append(CalendarDay(date=key, workout_count=count, intensity=intensity_for(count)))
    return days


def today_in(now: datetime, tz: tzinfo | None) -> date:
    return local_date(now, tz)
