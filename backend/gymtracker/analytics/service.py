from datetime import datetime, timezone, tzinfo
from typing import Any, Callable, Optional

from gymtracker.analytics.reports import (
    build_exercise_history,
    build_stats_report,
    build_streak_report,
    validate_weekly_goal,
)
from gymtracker.schemas.analytics import ExerciseHistoryReport, StatsReport, StreakReport
from gymtracker.schemas.workout import WorkoutLog
from gymtracker.storage.base import WorkoutSource


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AnalyticsService:
    """Compute analytics reports from an injected workout source.

    Each call loads one snapshot of the workouts and returns a fresh report,
    so the service holds no state between calls.

    Usage:
        service = AnalyticsService(LocalWorkoutStore("workouts.json"), tz=None)
        report = service.stats("30d")
    """

    def __init__(
        self,
        source: WorkoutSource,
        tz: Optional[tzinfo] = timezone.utc,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.source = source
        self.tz = tz  # None = system local timezone
        self.clock = clock

    def _snapshot(self) -> list[WorkoutLog]:
        # Oldest first; ties keep the source's order
        return sorted(self.source.load_workouts(), key=lambda w: w.started_at)

    def stats(self, time_range: str | None) -> StatsReport:
        return build_stats_report(self._snapshot(), time_range, self.clock(), self.tz)

    def exercise_history(self, exercise_name: str, time_range: str | None) -> ExerciseHistoryReport:
        return build_exercise_history(self._snapshot(), exercise_name, time_range, self.clock())

    def streak(self, weekly_goal: Any) -> StreakReport:
        """Raises InvalidWeeklyGoal before touching the source."""
        goal = validate_weekly_goal(weekly_goal)
        return build_streak_report(self._snapshot(), goal, self.clock(), self.tz)
