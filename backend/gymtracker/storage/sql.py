from sqlalchemy.orm import Session, selectinload

from gymtracker.models.workout import Workout, WorkoutExercise
from gymtracker.schemas.workout import WorkoutLog


def workouts_query(db: Session):
    """Workouts with exercises and sets eager-loaded, oldest first."""
    return (
        db.query(Workout)
        .options(selectinload(Workout.exercises).selectinload(WorkoutExercise.sets))
        .order_by(Workout.started_at.asc())
    )


class SqlWorkoutSource:
    """Workout source backed by the service database."""

    def __init__(self, db: Session):
        self.db = db

    def load_workouts(self) -> list[WorkoutLog]:
        rows = workouts_query(self.db).all()
        return [WorkoutLog.model_validate(row) for row in rows]
