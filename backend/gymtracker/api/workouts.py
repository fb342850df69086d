import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from gymtracker.db import get_db
from gymtracker.models.workout import Workout, WorkoutExercise, WorkoutSet
from gymtracker.schemas.workout import WorkoutCreate, WorkoutLog
from gymtracker.storage.sql import workouts_query

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/workouts", tags=["workouts"])


@router.post("/", response_model=WorkoutLog)
def create_workout(payload: WorkoutCreate, db: Session = Depends(get_db)):
    # Nested write: workout -> exercises -> sets in one commit
    workout = Workout(
        name=payload.name,
        routine_id=payload.routine_id,
        started_at=payload.started_at,
        ended_at=payload.ended_at,
        exercises=[
            WorkoutExercise(
                name=exercise.name,
                order=exercise.order,
                sets=[
                    WorkoutSet(
                        weight=s.weight,
                        reps=s.reps,
                        rir=s.rir,
                        completed=s.completed,
                    )
                    for s in exercise.sets
                ],
            )
            for exercise in payload.exercises
        ],
    )
    db.add(workout)
    db.commit()
    logger.info("saved workout %s (%s)", workout.id, workout.name)

    row = workouts_query(db).filter(Workout.id == workout.id).first()
    return WorkoutLog.model_validate(row)


@router.get("/", response_model=list[WorkoutLog])
def list_workouts(db: Session = Depends(get_db)):
    """History list, most recent first."""
    rows = workouts_query(db).order_by(None).order_by(Workout.started_at.desc()).all()
    return [WorkoutLog.model_validate(row) for row in rows]


@router.get("/{workout_id}", response_model=WorkoutLog)
def get_workout(workout_id: str, db: Session = Depends(get_db)):
    row = workouts_query(db).filter(Workout.id == workout_id).first()
    if not row:
        raise HTTPException(status_code=404, detail="Workout not found")
    return WorkoutLog.model_validate(row)
