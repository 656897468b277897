"""Analytics response schemas."""

from datetime import date

from pydantic import BaseModel

from liftlog.schemas.workout import WorkoutSessionRead


class StreakRead(BaseModel):
    current_streak: int
    timezone: str


class WeeklyVolumePoint(BaseModel):
    week_start: date
    volume: float


class WeeklyVolumeRead(BaseModel):
    weeks_back: int
    timezone: str
    weeks: list[WeeklyVolumePoint] = []


class LastWeightsRead(BaseModel):
    exercise_name: str
    weights: dict[int, float] = {}


class DashboardRead(BaseModel):
    """Streak, weekly volume, recent sessions and the rolling 30-day numbers."""

    timezone: str
    consecutive_days_streak: int
    weekly_volume: list[WeeklyVolumePoint] = []
    recent_sessions: list[WorkoutSessionRead] = []
    workouts_this_month: int
    volume_this_month: float
    average_duration_seconds: float
    favorite_routine_name: str | None = None
    training_frequency: float
