import uuid

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from gymtracker.db import Base


def _uuid() -> str:
    return str(uuid.uuid4())


class Workout(Base):
    __tablename__ = "workouts"

    id = Column(String(36), primary_key=True, default=_uuid)

    name = Column(String, nullable=False)

    # Loose reference to the routine the workout was started from
    routine_id = Column(String(36), nullable=True)

    # Stored as UTC
    started_at = Column(DateTime(timezone=True), nullable=False, index=True)
    ended_at = Column(DateTime(timezone=True), nullable=True)  # NULL = in progress

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    exercises = relationship(
        "WorkoutExercise",
        back_populates="workout",
        cascade="all, delete-orphan",
        order_by="[WorkoutExercise.order, WorkoutExercise.id]",
    )


class WorkoutExercise(Base):
    __tablename__ = "workout_exercises"

    id = Column(Integer, primary_key=True, index=True)
    workout_id = Column(
        String(36),
        ForeignKey("workouts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Free text, case-sensitive; not a foreign key to an exercise catalog
    name = Column(String, nullable=False)
    order = Column(Integer, nullable=False, default=0)

    workout = relationship("Workout", back_populates="exercises")
    sets = relationship(
        "WorkoutSet",
        back_populates="exercise",
        cascade="all, delete-orphan",
        order_by="WorkoutSet.id",
    )


class WorkoutSet(Base):
    __tablename__ = "workout_sets"

    id = Column(Integer, primary_key=True, index=True)
    exercise_id = Column(
        Integer,
        ForeignKey("workout_exercises.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    weight = Column(Float, nullable=False, default=0)  # whatever unit the user entered
    reps = Column(Integer, nullable=False, default=0)
    rir = Column(Integer, nullable=True)  # reps in reserve
    completed = Column(Boolean, nullable=False, default=True)

    exercise = relationship("WorkoutExercise", back_populates="sets")
