"""
Workout source interface (port).

Analytics only needs one thing from storage: the full list of saved
workouts for the current account, with exercises and sets already loaded.
The cloud database and the on-device JSON store both implement this.
"""
from typing import Protocol

from gymtracker.schemas.workout import WorkoutLog


class WorkoutSource(Protocol):
    def load_workouts(self) -> list[WorkoutLog]:
        """Return every saved workout (any order). Errors propagate."""
        ...
