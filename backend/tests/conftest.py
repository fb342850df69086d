import os
from datetime import datetime, timedelta, timezone

import pytest

# Use in-memory sqlite for tests; must be set before gymtracker.db is imported
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

# Wednesday; the Monday of this week is 2025-06-16
NOW = datetime(2025, 6, 18, 12, 0, tzinfo=timezone.utc)


def _sets(weights_reps, completed=True):
    return [
        {"weight": w, "reps": r, "rir": 2, "completed": completed}
        for w, r in weights_reps
    ]


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_workout():
    """Build a WorkoutLog from a compact description.

    make_workout("w1", NOW - timedelta(days=1), minutes=60,
                 exercises={"Squat": [(100, 5), (110, 3)]})
    """
    from gymtracker.schemas.workout import WorkoutLog

    def _make(workout_id, started_at, minutes=60, exercises=None, skipped=None, name=None):
        exercise_list = []
        for order, (ex_name, weights_reps) in enumerate((exercises or {}).items()):
            sets = _sets(weights_reps)
            sets += _sets((skipped or {}).get(ex_name, []), completed=False)
            exercise_list.append({"name": ex_name, "order": order, "sets": sets})
        ended_at = None if minutes is None else started_at + timedelta(minutes=minutes)
        return WorkoutLog.model_validate(
            {
                "id": workout_id,
                "name": name or f"Workout {workout_id}",
                "startedAt": started_at,
                "endedAt": ended_at,
                "exercises": exercise_list,
            }
        )

    return _make


@pytest.fixture
def db_session():
    from gymtracker.db import Base, SessionLocal, engine
    from gymtracker.models.workout import Workout  # noqa: F401

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(db_session):
    from fastapi.testclient import TestClient  # noqa: WPS433
    from gymtracker.main import app  # noqa: WPS433

    return TestClient(app)
