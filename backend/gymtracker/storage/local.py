"""On-device workout store.

Keeps every workout of a local-only account in one JSON file (a list of
camelCase workout objects), the offline counterpart of the service database.
"""
import json
import logging
import os
import tempfile
import uuid

from pydantic import TypeAdapter

from gymtracker.schemas.workout import WorkoutCreate, WorkoutLog

logger = logging.getLogger(__name__)

_workout_list = TypeAdapter(list[WorkoutLog])


class WorkoutNotFound(KeyError):
    pass


def _ensure_dir(path: str):
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


class LocalWorkoutStore:
    def __init__(self, path: str):
        self.path = path

    def load_workouts(self) -> list[WorkoutLog]:
        """All stored workouts in insertion order; [] before the first save."""
        if not os.path.exists(self.path):
            return []
        with open(self.path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        return _workout_list.validate_python(raw)

    def get_workout(self, workout_id: str) -> WorkoutLog:
        for workout in self.load_workouts():
            if workout.id == workout_id:
                return workout
        raise WorkoutNotFound(workout_id)

    def save_workout(self, payload: WorkoutCreate) -> WorkoutLog:
        """Append a workout, keeping only its completed sets."""
        exercises = [
            exercise.model_copy(update={"sets": exercise.completed_sets()})
            for exercise in payload.exercises
        ]
        workout = WorkoutLog(
            id=str(uuid.uuid4()),
            name=payload.name,
            routine_id=payload.routine_id,
            started_at=payload.started_at,
            ended_at=payload.ended_at,
            exercises=exercises,
        )
        workouts = self.load_workouts()
        workouts.append(workout)
        self._write(workouts)
        logger.info("saved local workout %s (%s)", workout.id, workout.name)
        return workout

    def _write(self, workouts: list[WorkoutLog]) -> None:
        _ensure_dir(self.path)
        data = _workout_list.dump_python(workouts, mode="json", by_alias=True)
        # Write next to the target then swap, so readers never see half a file
        fd, tmp_path = tempfile.mkstemp(dir=os.path.dirname(self.path) or ".", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, self.path)
        except Exception:
            os.unlink(tmp_path)
            raise
