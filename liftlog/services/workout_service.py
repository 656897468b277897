"""High-level workout service: session lifecycle, analytics and routine CRUD over one DB session."""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.core.constants import DEFAULT_RECENT_SESSIONS
from liftlog.models.routine import ExerciseTemplate, Routine, RoutineDay
from liftlog.models.workout import SetLog, WorkoutSession
from liftlog.repositories.workout_repository import WorkoutRepository
from liftlog.schemas.routine import (
    ExerciseTemplateCreate,
    ExerciseTemplateUpdate,
    RoutineCreate,
    RoutineDayCreate,
    RoutineDayUpdate,
    RoutineUpdate,
)
from liftlog.schemas.workout import SetLogSave
from liftlog.services.analytics import AnalyticsService, DashboardStats
from liftlog.services.session_manager import SessionManager


class WorkoutService:
    """Entry point for callers (API routers, scripts)."""

    def __init__(self, db: AsyncSession, *, tz: tzinfo = timezone.utc, tz_name: str = "UTC"):
        self.repository = WorkoutRepository(db)
        self.sessions = SessionManager(db, self.repository)
        self.analytics = AnalyticsService(self.repository, tz=tz, tz_name=tz_name)

    # ── Sessions ─────────────────────────────────────────────────────────

    async def get_or_start_session(self, routine_day_id: int) -> WorkoutSession:
        """Resume the active session if it is for this day; otherwise start a new one."""
        active = await self.sessions.get_active_session()
        if active is not None and active.routine_day_id == routine_day_id:
            return active
        return await self.sessions.start_session(routine_day_id)

    async def start_session(self, routine_day_id: int) -> WorkoutSession:
        return await self.sessions.start_session(routine_day_id)

    async def get_active_session(self) -> WorkoutSession | None:
        return await self.sessions.get_active_session()

    async def end_session(self) -> WorkoutSession | None:
        return await self.sessions.end_session()

    async def cancel_session(self) -> WorkoutSession | None:
        return await self.sessions.cancel_session()

    async def has_active_session(self) -> bool:
        return await self.sessions.has_active_session()

    async def log_set(
        self,
        session_id: int,
        exercise_name: str,
        set_number: int,
        reps: int,
        weight: float | Decimal,
    ) -> SetLog:
        """Record a newly completed set."""
        return await self.sessions.save_set(
            SetLogSave(
                workout_session_id=session_id,
                exercise_name=exercise_name,
                set_number=set_number,
                reps_performed=reps,
                weight_used=float(weight),
            )
        )

    async def save_set(self, payload: SetLogSave) -> SetLog | None:
        return await self.sessions.save_set(payload)

    async def get_set(self, set_log_id: int) -> SetLog | None:
        return await self.sessions.get_set(set_log_id)

    async def get_exercise_logs(self, session_id: int, exercise_name: str) -> list[SetLog]:
        return await self.sessions.get_exercise_logs(session_id, exercise_name)

    async def get_session_logs(self, session_id: int) -> list[SetLog]:
        return await self.repository.set_logs_for_session(session_id)

    async def delete_set(self, set_log_id: int) -> bool:
        return await self.sessions.delete_set(set_log_id)

    async def get_session(self, session_id: int) -> WorkoutSession | None:
        return await self.repository.get_session(session_id)

    async def get_session_history(self, start: datetime, end: datetime) -> list[WorkoutSession]:
        return await self.repository.session_history(start, end)

    async def get_recent_sessions(self, count: int = 10) -> list[WorkoutSession]:
        return await self.repository.recent_sessions(count)

    # ── Analytics ────────────────────────────────────────────────────────

    async def get_dashboard_stats(
        self, recent_count: int = DEFAULT_RECENT_SESSIONS, now: datetime | None = None
    ) -> DashboardStats:
        return await self.analytics.dashboard(recent_count, now)

    async def get_last_weights(self, exercise_name: str) -> dict[int, Decimal]:
        return await self.analytics.last_weights_for_exercise(exercise_name)

    # ── Routines / days / exercises ──────────────────────────────────────

    async def list_routines(self) -> list[Routine]:
        return await self.repository.list_routines()

    async def get_routine(self, routine_id: int) -> Routine | None:
        return await self.repository.get_routine(routine_id)

    async def create_routine(self, data: RoutineCreate) -> Routine:
        return await self.repository.create_routine(data)

    async def update_routine(self, routine_id: int, data: RoutineUpdate) -> Routine | None:
        return await self.repository.update_routine(routine_id, data)

    async def delete_routine(self, routine_id: int) -> bool:
        return await self.repository.delete_routine(routine_id)

    async def get_routine_day(self, day_id: int) -> RoutineDay | None:
        return await self.repository.get_routine_day(day_id)

    async def add_routine_day(self, routine_id: int, data: RoutineDayCreate) -> RoutineDay | None:
        return await self.repository.add_routine_day(routine_id, data)

    async def update_routine_day(self, day_id: int, data: RoutineDayUpdate) -> RoutineDay | None:
        return await self.repository.update_routine_day(day_id, data)

    async def delete_routine_day(self, day_id: int) -> bool:
        return await self.repository.delete_routine_day(day_id)

    async def add_exercise(self, day_id: int, data: ExerciseTemplateCreate) -> ExerciseTemplate | None:
        return await self.repository.add_exercise(day_id, data)

    async def update_exercise(self, exercise_id: int, data: ExerciseTemplateUpdate) -> ExerciseTemplate | None:
        return await self.repository.update_exercise(exercise_id, data)

    async def delete_exercise(self, exercise_id: int) -> bool:
        return await self.repository.delete_exercise(exercise_id)
