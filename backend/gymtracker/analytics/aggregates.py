"""Totals, per-exercise rollups and week-label counts for the stats report.

Every function here works on an already range-filtered list and only looks
at completed sets.
"""
from collections import Counter
from dataclasses import dataclass, replace
from datetime import datetime, tzinfo
from functools import reduce
from typing import Iterable, Iterator, NamedTuple

from gymtracker.core.time_utils import minutes_between, round_half_up, week_of_year_label
from gymtracker.schemas.analytics import ExerciseStat, WeekCount
from gymtracker.schemas.workout import WorkoutLog


class VolumeSummary(NamedTuple):
    total_workouts: int
    avg_duration: int
    total_volume: int


def summarize_volume(workouts: list[WorkoutLog]) -> VolumeSummary:
    """Count, mean duration (minutes) and total weight x reps.

    Duration only uses finished workouts; with none the mean is 0.
    Volume is rounded once at the end, not per set.
    """
    durations = [
        minutes_between(w.started_at, w.ended_at)
        for w in workouts
        if w.ended_at is not None
    ]
    avg_duration = round_half_up(sum(durations) / len(durations)) if durations else 0

    volume = 0.0
    for workout in workouts:
        for exercise in workout.exercises:
            for s in exercise.completed_sets():
                volume += s.weight * s.reps

    return VolumeSummary(
        total_workouts=len(workouts),
        avg_duration=avg_duration,
        total_volume=round_half_up(volume),
    )


@dataclass(frozen=True)
class _ExerciseTotals:
    name: str
    total_sets: int
    max_weight: float
    weight_sum: float
    last_performed: datetime

    @classmethod
    def start(cls, name: str, weight: float, performed_at: datetime) -> "_ExerciseTotals":
        return cls(name, 1, weight, weight, performed_at)

    def add(self, weight: float, performed_at: datetime) -> "_ExerciseTotals":
        return replace(
            self,
            total_sets=self.total_sets + 1,
            max_weight=max(self.max_weight, weight),
            weight_sum=self.weight_sum + weight,
            last_performed=max(self.last_performed, performed_at),
        )

    def to_stat(self) -> ExerciseStat:
        return ExerciseStat(
            exercise_name=self.name,
            total_sets=self.total_sets,
            max_weight=self.max_weight,
            avg_weight=round_half_up(self.weight_sum / self.total_sets),
            last_performed=self.last_performed,
        )


def _set_observations(
    workouts: Iterable[WorkoutLog],
) -> Iterator[tuple[str, float, datetime]]:
    for workout in workouts:
        for exercise in workout.exercises:
            for s in exercise.completed_sets():
                yield exercise.name, s.weight, workout.started_at


def _fold_set(
    totals: dict[str, _ExerciseTotals], observation: tuple[str, float, datetime]
) -> dict[str, _ExerciseTotals]:
    name, weight, performed_at = observation
    current = totals.get(name)
    if current is None:
        updated = _ExerciseTotals.start(name, weight, performed_at)
    else:
        updated = current.add(weight, performed_at)
    # Existing keys keep their position, so encounter order survives
    return {**totals, name: updated}


def exercise_stats(workouts: Iterable[WorkoutLog]) -> list[ExerciseStat]:
    """Per exercise name rollups, most trained first.

    Names are matched exactly ('Bench Press' and 'bench press' are two
    exercises). Ties on set count keep first-encounter order.
    """
    totals = reduce(_fold_set, _set_observations(workouts), {})
    stats = [t.to_stat() for t in totals.values()]
    return sorted(stats, key=lambda s: -s.total_sets)


def workouts_by_week(workouts: Iterable[WorkoutLog], tz: tzinfo | None) -> list[WeekCount]:
    """Count workouts per 'Week N' label, in first-seen label order.

    This is a chart label only; streaks use Monday-start weeks instead.
    """
    counts = Counter(week_of_year_label(w.started_at, tz) for w in workouts)
    return [WeekCount(week=label, count=n) for label, n in counts.items()]
