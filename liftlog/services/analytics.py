"""Streaks, weekly volume buckets and rolling-window dashboard stats.

Timestamps are stored in UTC; everything "local" here is relative to the
``tz`` the caller passes. The module-level functions are pure; AnalyticsService
fetches rows through the repository and hands them to them.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from decimal import Decimal

from liftlog.core.constants import (
    DEFAULT_RECENT_SESSIONS,
    DEFAULT_WEEKS_BACK,
    LAST_WEIGHTS_LOOKBACK,
    ROLLING_WINDOW_DAYS,
)
from liftlog.core.timeutils import as_utc, local_date, utcnow
from liftlog.models.workout import SetLog, WorkoutSession
from liftlog.repositories.workout_repository import WorkoutRepository

MONDAY = 0


@dataclass(slots=True)
class PeriodSummary:
    workouts: int = 0
    volume: Decimal = Decimal(0)
    average_duration: timedelta = timedelta(0)
    favorite_routine_name: str | None = None
    training_frequency: float = 0.0


@dataclass(slots=True)
class DashboardStats:
    consecutive_days_streak: int
    weekly_volume: dict[date, Decimal]
    recent_sessions: list[WorkoutSession]
    summary: PeriodSummary
    timezone: str = "UTC"


def consecutive_day_streak(start_times: Iterable[datetime], *, tz: tzinfo, now: datetime) -> int:
    """
    Consecutive local calendar days with a completed session, ending today or yesterday.
    A day with no session breaks the chain; if neither today nor yesterday has one, 0.
    """
    dates = sorted({local_date(t, tz) for t in start_times}, reverse=True)
    if not dates:
        return 0

    expected = local_date(now, tz)
    if dates[0] != expected:
        expected -= timedelta(days=1)
        if dates[0] != expected:
            return 0

    streak = 0
    for d in dates:
        if d == expected:
            streak += 1
            expected -= timedelta(days=1)
        elif d < expected:
            break
    return streak


def week_start(d: date) -> date:
    """Monday of the week containing d."""
    return d - timedelta(days=(7 + (d.weekday() - MONDAY)) % 7)


def bucket_weekly_volume(logs: Iterable[SetLog], *, tz: tzinfo) -> dict[date, Decimal]:
    """Sum reps x weight per local Monday-start week. Weeks without sets are absent."""
    buckets: dict[date, Decimal] = {}
    for log in logs:
        key = week_start(local_date(log.completed_at, tz))
        buckets[key] = buckets.get(key, Decimal(0)) + log.volume
    return buckets


def rolling_window(*, tz: tzinfo, now: datetime, days: int = ROLLING_WINDOW_DAYS) -> tuple[datetime, datetime]:
    """
    UTC bounds for local [today - days, today + 1 day). The upper bound is returned
    inclusively (one microsecond before the next local midnight) for range queries.
    """
    today = local_date(now, tz)
    start_local = datetime.combine(today - timedelta(days=days), time.min, tzinfo=tz)
    end_local = datetime.combine(today + timedelta(days=1), time.min, tzinfo=tz)
    return (
        start_local.astimezone(timezone.utc),
        (end_local - timedelta(microseconds=1)).astimezone(timezone.utc),
    )


def summarize_period(
    sessions: list[WorkoutSession], *, tz: tzinfo, days: int = ROLLING_WINDOW_DAYS
) -> PeriodSummary:
    """
    Aggregate sessions already filtered to the window (newest first).
    Volume counts unfinished sessions too; average duration only uses ended ones.
    """
    if not sessions:
        return PeriodSummary()

    volume = sum((s.total_volume for s in sessions), Decimal(0))

    durations = [s.duration for s in sessions if s.duration is not None]
    average = sum(durations, timedelta(0)) / len(durations) if durations else timedelta(0)

    # Counter keeps first-seen order, and most_common() is stable for ties
    names = Counter(s.routine_day.name for s in sessions if s.routine_day is not None)
    favorite = names.most_common(1)[0][0] if names else None

    active_days = {local_date(s.start_time, tz) for s in sessions}

    return PeriodSummary(
        workouts=len(sessions),
        volume=volume,
        average_duration=average,
        favorite_routine_name=favorite,
        training_frequency=len(active_days) / days * 100.0,
    )


def last_weights(recent_logs: list[SetLog]) -> dict[int, Decimal]:
    """
    set_number -> weight from the session of the newest log. recent_logs must be
    newest first and is a bounded window, so older sets of that session can be
    missing when other sessions' logs are interleaved.
    """
    if not recent_logs:
        return {}
    session_id = recent_logs[0].workout_session_id
    weights: dict[int, Decimal] = {}
    for log in reversed(recent_logs):
        if log.workout_session_id == session_id:
            weights[log.set_number] = log.weight_used
    return weights


class AnalyticsService:
    """Read-only queries over stored sessions and set logs."""

    def __init__(self, repository: WorkoutRepository, *, tz: tzinfo = timezone.utc, tz_name: str = "UTC"):
        self.repository = repository
        self.tz = tz
        self.tz_name = tz_name

    async def consecutive_days_streak(self, now: datetime | None = None) -> int:
        start_times = await self.repository.completed_session_start_times()
        if not start_times:
            return 0
        return consecutive_day_streak(start_times, tz=self.tz, now=now or utcnow())

    async def weekly_volume(
        self, weeks_back: int = DEFAULT_WEEKS_BACK, now: datetime | None = None
    ) -> dict[date, Decimal]:
        cutoff = as_utc(now or utcnow()) - timedelta(days=weeks_back * 7)
        logs = await self.repository.set_logs_since(cutoff)
        return bucket_weekly_volume(logs, tz=self.tz)

    async def period_summary(
        self, days: int = ROLLING_WINDOW_DAYS, now: datetime | None = None
    ) -> PeriodSummary:
        start, end = rolling_window(tz=self.tz, now=now or utcnow(), days=days)
        sessions = await self.repository.session_history(start, end)
        return summarize_period(sessions, tz=self.tz, days=days)

    async def last_weights_for_exercise(self, exercise_name: str) -> dict[int, Decimal]:
        logs = await self.repository.recent_logs_for_exercise(exercise_name, limit=LAST_WEIGHTS_LOOKBACK)
        return last_weights(logs)

    async def dashboard(
        self, recent_count: int = DEFAULT_RECENT_SESSIONS, now: datetime | None = None
    ) -> DashboardStats:
        now = now or utcnow()
        return DashboardStats(
            consecutive_days_streak=await self.consecutive_days_streak(now),
            weekly_volume=await self.weekly_volume(DEFAULT_WEEKS_BACK, now),
            recent_sessions=await self.repository.recent_sessions(recent_count),
            summary=await self.period_summary(ROLLING_WINDOW_DAYS, now),
            timezone=self.tz_name,
        )
