"""Progress analytics: streak, weekly volume, rolling 30-day dashboard, last weights.

All day/week boundaries use the ``tz`` query parameter (falls back to the
configured TIMEZONE).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from liftlog.api.deps import get_workout_service
from liftlog.core.constants import DEFAULT_RECENT_SESSIONS, DEFAULT_WEEKS_BACK, MAX_RECENT_SESSIONS
from liftlog.schemas.analytics import (
    DashboardRead,
    LastWeightsRead,
    StreakRead,
    WeeklyVolumePoint,
    WeeklyVolumeRead,
)
from liftlog.schemas.workout import WorkoutSessionRead
from liftlog.services.workout_service import WorkoutService

router = APIRouter()


def _volume_points(weekly: dict) -> list[WeeklyVolumePoint]:
    return [WeeklyVolumePoint(week_start=k, volume=float(v)) for k, v in sorted(weekly.items())]


@router.get("/streak", response_model=StreakRead)
async def get_streak(service: WorkoutService = Depends(get_workout_service)):
    """Consecutive local days with a completed workout, ending today or yesterday."""
    streak = await service.analytics.consecutive_days_streak()
    return StreakRead(current_streak=streak, timezone=service.analytics.tz_name)


@router.get("/weekly-volume", response_model=WeeklyVolumeRead)
async def get_weekly_volume(
    weeks_back: int = Query(DEFAULT_WEEKS_BACK, ge=1, le=52),
    service: WorkoutService = Depends(get_workout_service),
):
    """Volume (reps x lbs) per Monday-start week; weeks without sets are omitted."""
    weekly = await service.analytics.weekly_volume(weeks_back)
    return WeeklyVolumeRead(
        weeks_back=weeks_back,
        timezone=service.analytics.tz_name,
        weeks=_volume_points(weekly),
    )


@router.get("/dashboard", response_model=DashboardRead)
async def get_dashboard(
    recent: int = Query(DEFAULT_RECENT_SESSIONS, ge=0, le=MAX_RECENT_SESSIONS),
    service: WorkoutService = Depends(get_workout_service),
):
    """Streak, weekly volume, recent sessions and the last 30 days at a glance."""
    stats = await service.get_dashboard_stats(recent)
    summary = stats.summary
    return DashboardRead(
        timezone=stats.timezone,
        consecutive_days_streak=stats.consecutive_days_streak,
        weekly_volume=_volume_points(stats.weekly_volume),
        recent_sessions=[WorkoutSessionRead.model_validate(s) for s in stats.recent_sessions],
        workouts_this_month=summary.workouts,
        volume_this_month=float(summary.volume),
        average_duration_seconds=summary.average_duration.total_seconds(),
        favorite_routine_name=summary.favorite_routine_name,
        training_frequency=round(summary.training_frequency, 2),
    )


@router.get("/last-weights", response_model=LastWeightsRead)
async def get_last_weights(
    exercise_name: str = Query(..., min_length=1),
    service: WorkoutService = Depends(get_workout_service),
):
    """Weights per set number from the last session that logged this exercise."""
    weights = await service.get_last_weights(exercise_name)
    return LastWeightsRead(
        exercise_name=exercise_name,
        weights={k: float(v) for k, v in weights.items()},
    )
