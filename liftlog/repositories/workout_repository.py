"""Storage access for routines, sessions and set logs (async SQLAlchemy 2.0).

Every read that returns an aggregate resolves its children up front with
``selectinload`` so callers never trigger lazy I/O on an ``AsyncSession``.
Absence is reported as ``None`` / ``False``; database errors propagate.
"""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from liftlog.models.routine import ExerciseTemplate, Routine, RoutineDay
from liftlog.models.workout import SetLog, WorkoutSession
from liftlog.schemas.routine import (
    ExerciseTemplateCreate,
    ExerciseTemplateUpdate,
    RoutineCreate,
    RoutineDayCreate,
    RoutineDayUpdate,
    RoutineUpdate,
)

logger = logging.getLogger(__name__)


def session_with_children() -> tuple:
    """Loader options: routine day with ordered templates, plus set logs."""
    return (
        selectinload(WorkoutSession.routine_day).selectinload(RoutineDay.exercises),
        selectinload(WorkoutSession.set_logs),
    )


def routine_with_children() -> tuple:
    return (selectinload(Routine.days).selectinload(RoutineDay.exercises),)


def _build_day(data: RoutineDayCreate) -> RoutineDay:
    return RoutineDay(
        name=data.name,
        sort_order=data.sort_order,
        exercises=[ExerciseTemplate(**e.model_dump()) for e in data.exercises],
    )


class WorkoutRepository:
    """Transactional CRUD plus the range/point queries the core consumes."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ── Routines ─────────────────────────────────────────────────────────

    async def list_routines(self) -> list[Routine]:
        result = await self.db.execute(
            select(Routine).options(*routine_with_children()).order_by(Routine.name)
        )
        return list(result.scalars().all())

    async def get_routine(self, routine_id: int) -> Routine | None:
        result = await self.db.execute(
            select(Routine).options(*routine_with_children()).where(Routine.id == routine_id)
        )
        return result.scalar_one_or_none()

    async def create_routine(self, data: RoutineCreate) -> Routine:
        routine = Routine(
            name=data.name,
            description=data.description,
            days=[_build_day(d) for d in data.days],
        )
        self.db.add(routine)
        await self.db.commit()
        return await self.get_routine(routine.id)

    async def update_routine(self, routine_id: int, data: RoutineUpdate) -> Routine | None:
        routine = await self.db.get(Routine, routine_id)
        if routine is None:
            return None
        for k, v in data.model_dump(exclude_unset=True).items():
            setattr(routine, k, v)
        await self.db.commit()
        return await self.get_routine(routine_id)

    async def delete_routine(self, routine_id: int) -> bool:
        """Cascades to days and their templates; sessions of those days are kept."""
        routine = await self.db.get(Routine, routine_id)
        if routine is None:
            return False
        await self.db.delete(routine)
        await self.db.commit()
        logger.info("Deleted routine %s", routine_id)
        return True

    # ── Routine days ─────────────────────────────────────────────────────

    async def get_routine_day(self, day_id: int) -> RoutineDay | None:
        result = await self.db.execute(
            select(RoutineDay)
            .options(selectinload(RoutineDay.exercises), selectinload(RoutineDay.routine))
            .where(RoutineDay.id == day_id)
        )
        return result.scalar_one_or_none()

    async def add_routine_day(self, routine_id: int, data: RoutineDayCreate) -> RoutineDay | None:
        if await self.db.get(Routine, routine_id) is None:
            return None
        day = _build_day(data)
        day.routine_id = routine_id
        self.db.add(day)
        await self.db.commit()
        return await self.get_routine_day(day.id)

    async def update_routine_day(self, day_id: int, data: RoutineDayUpdate) -> RoutineDay | None:
        day = await self.db.get(RoutineDay, day_id)
        if day is None:
            return None
        for k, v in data.model_dump(exclude_unset=True).items():
            setattr(day, k, v)
        await self.db.commit()
        return await self.get_routine_day(day_id)

    async def delete_routine_day(self, day_id: int) -> bool:
        """Removes the day and its templates. Its sessions stay, detached (routine_day_id NULL)."""
        day = await self.db.get(RoutineDay, day_id)
        if day is None:
            return False
        await self.db.delete(day)
        await self.db.commit()
        logger.info("Deleted routine day %s; its sessions were kept", day_id)
        return True

    # ── Exercise templates ───────────────────────────────────────────────

    async def add_exercise(self, day_id: int, data: ExerciseTemplateCreate) -> ExerciseTemplate | None:
        if await self.db.get(RoutineDay, day_id) is None:
            return None
        exercise = ExerciseTemplate(routine_day_id=day_id, **data.model_dump())
        self.db.add(exercise)
        await self.db.commit()
        return exercise

    async def update_exercise(
        self, exercise_id: int, data: ExerciseTemplateUpdate
    ) -> ExerciseTemplate | None:
        exercise = await self.db.get(ExerciseTemplate, exercise_id)
        if exercise is None:
            return None
        for k, v in data.model_dump(exclude_unset=True).items():
            setattr(exercise, k, v)
        await self.db.commit()
        return exercise

    async def delete_exercise(self, exercise_id: int) -> bool:
        exercise = await self.db.get(ExerciseTemplate, exercise_id)
        if exercise is None:
            return False
        await self.db.delete(exercise)
        await self.db.commit()
        return True

    # ── Sessions ─────────────────────────────────────────────────────────

    async def get_session(self, session_id: int) -> WorkoutSession | None:
        result = await self.db.execute(
            select(WorkoutSession)
            .options(*session_with_children())
            .where(WorkoutSession.id == session_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def session_history(self, start: datetime, end: datetime) -> list[WorkoutSession]:
        """Sessions with start_time in [start, end] (both inclusive), newest first."""
        result = await self.db.execute(
            select(WorkoutSession)
            .options(selectinload(WorkoutSession.routine_day), selectinload(WorkoutSession.set_logs))
            .where(WorkoutSession.start_time >= start, WorkoutSession.start_time <= end)
            .order_by(WorkoutSession.start_time.desc())
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def recent_sessions(self, count: int = 10) -> list[WorkoutSession]:
        """Most recent completed sessions."""
        result = await self.db.execute(
            select(WorkoutSession)
            .options(selectinload(WorkoutSession.routine_day), selectinload(WorkoutSession.set_logs))
            .where(WorkoutSession.end_time.isnot(None))
            .order_by(WorkoutSession.start_time.desc())
            .limit(count)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def completed_session_start_times(self) -> list[datetime]:
        result = await self.db.execute(
            select(WorkoutSession.start_time)
            .where(WorkoutSession.end_time.isnot(None))
            .order_by(WorkoutSession.start_time.desc())
        )
        return list(result.scalars().all())

    # ── Set logs ─────────────────────────────────────────────────────────

    async def set_logs_since(self, cutoff: datetime) -> list[SetLog]:
        result = await self.db.execute(select(SetLog).where(SetLog.completed_at >= cutoff))
        return list(result.scalars().all())

    async def recent_logs_for_exercise(self, exercise_name: str, limit: int = 10) -> list[SetLog]:
        """Newest logs for an exercise across all sessions."""
        result = await self.db.execute(
            select(SetLog)
            .where(SetLog.exercise_name == exercise_name)
            .order_by(SetLog.completed_at.desc(), SetLog.id.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def set_logs_for_session(self, session_id: int) -> list[SetLog]:
        result = await self.db.execute(
            select(SetLog)
            .where(SetLog.workout_session_id == session_id)
            .order_by(SetLog.exercise_name, SetLog.set_number)
        )
        return list(result.scalars().all())
