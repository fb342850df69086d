from typing import Iterable, Optional

from gymtracker.core.time_utils import round_half_up
from gymtracker.schemas.analytics import PersonalRecord, SetSummary, WorkoutDataPoint
from gymtracker.schemas.workout import ExerciseEntry, WorkoutLog


def _find_entry(workout: WorkoutLog, exercise_name: str) -> Optional[ExerciseEntry]:
    # First entry with the exact name; repeats later in the same workout are ignored
    for exercise in workout.exercises:
        if exercise.name == exercise_name:
            return exercise
    return None


def build_data_point(workout: WorkoutLog, exercise: ExerciseEntry) -> Optional[WorkoutDataPoint]:
    sets = exercise.completed_sets()
    if not sets:
        return None
    weights = [s.weight for s in sets]
    return WorkoutDataPoint(
        date=workout.started_at,
        workout_id=workout.id,
        max_weight=max(weights),
        avg_weight=round_half_up(sum(weights) / len(weights)),
        total_reps=sum(s.reps for s in sets),
        total_sets=len(sets),
        sets=[SetSummary(weight=s.weight, reps=s.reps, rir=s.rir) for s in sets],
    )


def exercise_history(
    workouts: Iterable[WorkoutLog], exercise_name: str
) -> list[WorkoutDataPoint]:
    """One data point per workout that trained `exercise_name`, in input order."""
    points: list[WorkoutDataPoint] = []
    for workout in workouts:
        entry = _find_entry(workout, exercise_name)
        if entry is None:
            continue
        point = build_data_point(workout, entry)
        if point is not None:
            points.append(point)
    return points


def personal_record(history: list[WorkoutDataPoint]) -> Optional[PersonalRecord]:
    """Heaviest set across `history`, or None when there is no history.

    On equal weights the earliest element in `history` wins, both between
    sessions and between sets within the winning session.
    """
    if not history:
        return None
    best_point = history[0]
    for point in history[1:]:
        if point.max_weight > best_point.max_weight:
            best_point = point
    best_set = best_point.sets[0]
    for s in best_point.sets[1:]:
        if s.weight > best_set.weight:
            best_set = s
    return PersonalRecord(
        weight=best_set.weight,
        reps=best_set.reps,
        date=best_point.date,
        workout_id=best_point.workout_id,
    )
