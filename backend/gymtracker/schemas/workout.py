from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from gymtracker.core.time_utils import ensure_utc


class CamelModel(BaseModel):
    """Base for everything that crosses a JSON boundary (camelCase keys)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        frozen=True,
    )


class SetEntry(CamelModel):
    weight: float = Field(0, ge=0)  # any unit the user entered
    reps: int = Field(0, ge=0)
    rir: Optional[int] = None  # reps in reserve
    completed: bool = True


class ExerciseEntry(CamelModel):
    name: str  # case-sensitive identity key
    order: int = 0
    sets: list[SetEntry] = []

    def completed_sets(self) -> list[SetEntry]:
        return [s for s in self.sets if s.completed]


class WorkoutBase(CamelModel):
    name: str
    routine_id: Optional[str] = None
    started_at: datetime
    ended_at: Optional[datetime] = None  # None while in progress
    exercises: list[ExerciseEntry] = []

    @field_validator("started_at", "ended_at")
    @classmethod
    def _as_utc(cls, v):
        if v is None:
            return None
        return ensure_utc(v)

    @field_validator("exercises")
    @classmethod
    def _by_order(cls, v: list[ExerciseEntry]) -> list[ExerciseEntry]:
        # Stable: equal `order` values keep their list position
        return sorted(v, key=lambda e: e.order)


class WorkoutCreate(WorkoutBase):
    """Payload for logging a workout."""

    # Be lenient with extra fields from clients
    model_config = ConfigDict(extra="ignore")

    @field_validator("name")
    @classmethod
    def _name_required(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name is required")
        return v

    @model_validator(mode="after")
    def _ends_after_start(self):
        if self.ended_at is not None and self.ended_at < self.started_at:
            raise ValueError("endedAt must not be before startedAt")
        return self


class WorkoutLog(WorkoutBase):
    """A saved workout, the unit every analytics report is built from."""

    id: str

    @property
    def is_completed(self) -> bool:
        return self.ended_at is not None
