"""Report builders shared by the cloud service and the local store.

These are pure: callers pass the workout list, the current instant and the
timezone used for day/week keys.
"""
import logging
from datetime import datetime, tzinfo
from typing import Any

from gymtracker.analytics.aggregates import exercise_stats, summarize_volume, workouts_by_week
from gymtracker.analytics.history import exercise_history, personal_record
from gymtracker.analytics.ranges import completed_only, filter_by_range
from gymtracker.analytics.streak import calendar_heatmap, summarize_streak, today_in
from gymtracker.core.constants import WEEKLY_GOAL_MAX, WEEKLY_GOAL_MIN, WEEKLY_HISTORY_WEEKS
from gymtracker.schemas.analytics import ExerciseHistoryReport, StatsReport, StreakReport
from gymtracker.schemas.workout import WorkoutLog

logger = logging.getLogger(__name__)


class InvalidWeeklyGoal(ValueError):
    """Weekly goal is not an integer between 1 and 7."""

    def __init__(self, value: Any):
        super().__init__(
            f"Weekly goal must be between {WEEKLY_GOAL_MIN} and {WEEKLY_GOAL_MAX}"
        )
        self.value = value


def validate_weekly_goal(value: Any) -> int:
    """Parse and range-check a weekly goal. Never clamps."""
    if isinstance(value, bool):
        raise InvalidWeeklyGoal(value)
    if isinstance(value, str):
        value = value.strip()
        if not value.lstrip("+-").isdecimal():
            raise InvalidWeeklyGoal(value)
        try:
            goal = int(value)
        except ValueError:
            # e.g. more digits than int() will convert
            raise InvalidWeeklyGoal(value) from None
    elif isinstance(value, int):
        goal = value
    elif isinstance(value, float) and value.is_integer():
        goal = int(value)
    else:
        raise InvalidWeeklyGoal(value)
    if goal < WEEKLY_GOAL_MIN or goal > WEEKLY_GOAL_MAX:
        raise InvalidWeeklyGoal(value)
    return goal


def build_stats_report(
    workouts: list[WorkoutLog], time_range: str | None, now: datetime, tz: tzinfo | None
) -> StatsReport:
    in_range = filter_by_range(workouts, time_range, now)
    volume = summarize_volume(in_range)
    logger.debug(
        "stats report: range=%s workouts=%d of %d", time_range, len(in_range), len(workouts)
    )
    return StatsReport(
        total_workouts=volume.total_workouts,
        avg_duration=volume.avg_duration,
        total_volume=volume.total_volume,
        workouts_by_week=workouts_by_week(in_range, tz),
        exercise_stats=exercise_stats(in_range),
    )


def build_exercise_history(
    workouts: list[WorkoutLog], exercise_name: str, time_range: str | None, now: datetime
) -> ExerciseHistoryReport:
    history = exercise_history(filter_by_range(workouts, time_range, now), exercise_name)
    logger.debug("exercise history: %r range=%s points=%d", exercise_name, time_range, len(history))
    return ExerciseHistoryReport(
        exercise_name=exercise_name,
        history=history,
        personal_record=personal_record(history),
    )


def build_streak_report(
    workouts: list[WorkoutLog], weekly_goal: int, now: datetime, tz: tzinfo | None
) -> StreakReport:
    """Streak counters, 84-day calendar and recent week history.

    `weekly_goal` must already be validated. In-progress workouts are ignored.
    """
    completed = completed_only(workouts)
    today = today_in(now, tz)
    calendar = calendar_heatmap(completed, today, tz)
    if not completed:
        return StreakReport(
            current_streak=0,
            longest_streak=0,
            weekly_goal=weekly_goal,
            current_week_progress=0,
            calendar_data=calendar,
            weekly_history=[],
        )

    streak = summarize_streak(completed, weekly_goal, today, tz)
    logger.debug(
        "streak report: goal=%d weeks=%d current=%d longest=%d",
        weekly_goal,
        len(streak.weeks),
        streak.current_streak,
        streak.longest_streak,
    )
    return StreakReport(
        current_streak=streak.current_streak,
        longest_streak=streak.longest_streak,
        weekly_goal=weekly_goal,
        current_week_progress=streak.current_week_progress,
        calendar_data=calendar,
        weekly_history=streak.weeks[:WEEKLY_HISTORY_WEEKS],
    )
