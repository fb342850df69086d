import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from gymtracker.analytics.reports import InvalidWeeklyGoal
from gymtracker.analytics.service import AnalyticsService
from gymtracker.core.config import settings
from gymtracker.db import get_db
from gymtracker.schemas.analytics import ExerciseHistoryReport, StatsReport, StreakReport
from gymtracker.storage.sql import SqlWorkoutSource

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analytics", tags=["analytics"])


def get_analytics_service(db: Session = Depends(get_db)) -> AnalyticsService:
    # Server-side reports bucket days and weeks in UTC
    return AnalyticsService(SqlWorkoutSource(db))


@router.get("/stats", response_model=StatsReport)
def get_stats(
    time_range: Optional[str] = Query(None, alias="timeRange"),
    service: AnalyticsService = Depends(get_analytics_service),
):
    """
    Totals, per-exercise rollups and weekly counts for a lookback window.

      GET /analytics/stats?timeRange=30d    (7d, 30d, 90d, all; unknown = all)
    """
    return service.stats(time_range or settings.default_time_range)


@router.get("/exercise/{exercise_name:path}", response_model=ExerciseHistoryReport)
def get_exercise_history(
    exercise_name: str,
    time_range: Optional[str] = Query(None, alias="timeRange"),
    service: AnalyticsService = Depends(get_analytics_service),
):
    return service.exercise_history(
        exercise_name, time_range or settings.default_time_range
    )


@router.get("/streak", response_model=StreakReport)
def get_streak(
    weekly_goal: Optional[str] = Query(None, alias="weeklyGoal"),
    service: AnalyticsService = Depends(get_analytics_service),
):
    goal = weekly_goal if weekly_goal not in (None, "") else settings.default_weekly_goal
    try:
        return service.streak(goal)
    except InvalidWeeklyGoal as e:
        logger.info("rejected weekly goal %r", e.value)
        raise HTTPException(status_code=400, detail=str(e))
