from datetime import datetime
from typing import Optional

from gymtracker.schemas.workout import CamelModel


class WeekCount(CamelModel):
    week: str  # 'Week N' chart label
    count: int


class ExerciseStat(CamelModel):
    exercise_name: str
    total_sets: int
    max_weight: float
    avg_weight: int
    last_performed: datetime


class StatsReport(CamelModel):
    total_workouts: int
    avg_duration: int  # minutes
    total_volume: int  # sum of weight x reps
    workouts_by_week: list[WeekCount]
    exercise_stats: list[ExerciseStat]


class SetSummary(CamelModel):
    weight: float
    reps: int
    rir: Optional[int] = None


class WorkoutDataPoint(CamelModel):
    date: datetime
    workout_id: str
    max_weight: float
    avg_weight: int
    total_reps: int
    total_sets: int
    sets: list[SetSummary]


class PersonalRecord(CamelModel):
    weight: float
    reps: int
    date: datetime
    workout_id: str


class ExerciseHistoryReport(CamelModel):
    exercise_name: str
    history: list[WorkoutDataPoint]
    personal_record: Optional[PersonalRecord] = None


class WeekBucket(CamelModel):
    week_start_date: str  # Monday, 'YYYY-MM-DD'
    workout_count: int
    met_goal: bool


class CalendarDay(CamelModel):
    date: str  # 'YYYY-MM-DD'
    workout_count: int
    intensity: int  # 0..4


class StreakReport(CamelModel):
    current_streak: int
    longest_streak: int
    weekly_goal: int
    current_week_progress: int
    calendar_data: list[CalendarDay]
    weekly_history: list[WeekBucket]
