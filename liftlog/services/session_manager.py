"""Session lifecycle: at most one active (end_time IS NULL) session at any time.

start/end/cancel read-then-write under one process-wide lock and commit
before returning, so the check and the write are never interleaved with
another lifecycle call in this process. Nothing here is a storage constraint;
a second process writing the same database is not guarded against.
"""

from __future__ import annotations

import asyncio
import logging
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.core.timeutils import utcnow
from liftlog.models.workout import SetLog, WorkoutSession
from liftlog.repositories.workout_repository import WorkoutRepository, session_with_children
from liftlog.schemas.workout import SetLogSave

logger = logging.getLogger(__name__)

_lifecycle_lock = asyncio.Lock()

WEIGHT_QUANTUM = Decimal("0.01")


def to_weight(value: float | Decimal) -> Decimal:
    """Round to the 2 decimal places weight_used is stored with."""
    return Decimal(str(value)).quantize(WEIGHT_QUANTUM, rounding=ROUND_HALF_UP)


class SessionManager:
    """Starts, ends and cancels sessions; records set completions."""

    def __init__(self, db: AsyncSession, repository: WorkoutRepository | None = None):
        self.db = db
        self.repository = repository or WorkoutRepository(db)

    async def start_session(self, routine_day_id: int) -> WorkoutSession:
        """
        Start a session for a routine day. Any session still active is ended first
        (end_time = now); that is a silent transition, not an error.
        Returns the new session with its day and ordered exercise templates.
        """
        async with _lifecycle_lock:
            now = utcnow()
            result = await self.db.execute(
                select(WorkoutSession).where(WorkoutSession.end_time.is_(None))
            )
            for stale in result.scalars().all():
                stale.end_time = now
                logger.info("Force-ended session %s before starting a new one", stale.id)

            session = WorkoutSession(routine_day_id=routine_day_id, start_time=now)
            self.db.add(session)
            await self.db.commit()
            logger.info("Started session %s for routine day %s", session.id, routine_day_id)

        return await self.repository.get_session(session.id)

    async def get_active_session(self) -> WorkoutSession | None:
        """The active session with exercises and set logs resolved, or None."""
        result = await self.db.execute(
            select(WorkoutSession)
            .options(*session_with_children())
            .where(WorkoutSession.end_time.is_(None))
            .order_by(WorkoutSession.start_time.desc())
            .limit(1)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def end_session(self) -> WorkoutSession | None:
        """Set end_time on the active session. Data is kept. None when nothing is active."""
        async with _lifecycle_lock:
            session = await self.get_active_session()
            if session is None:
                return None
            session.end_time = utcnow()
            await self.db.commit()
            logger.info("Ended session %s (volume %s)", session.id, session.total_volume)
        return session

    async def cancel_session(self) -> WorkoutSession | None:
        """Hard-delete the active session and its set logs. None when nothing is active."""
        async with _lifecycle_lock:
            session = await self.get_active_session()
            if session is None:
                return None
            await self.db.delete(session)
            await self.db.commit()
            logger.info("Cancelled session %s (%d set logs discarded)", session.id, len(session.set_logs))
        return session

    async def save_set(self, payload: SetLogSave) -> SetLog | None:
        """
        Upsert a set log keyed on id. A new log gets completed_at = now; an existing
        one only has reps and weight replaced (its completed_at is preserved).
        The session does not need to be active, so ended sessions can be corrected.
        """
        if payload.id is None:
            log = SetLog(
                workout_session_id=payload.workout_session_id,
                exercise_name=payload.exercise_name,
                set_number=payload.set_number,
                reps_performed=payload.reps_performed,
                weight_used=to_weight(payload.weight_used),
                completed_at=utcnow(),
            )
            self.db.add(log)
            await self.db.commit()
            return log

        log = await self.db.get(SetLog, payload.id)
        if log is None:
            logger.warning("save_set: set log %s not found", payload.id)
            return None
        log.reps_performed = payload.reps_performed
        log.weight_used = to_weight(payload.weight_used)
        await self.db.commit()
        return log

    async def get_set(self, set_log_id: int) -> SetLog | None:
        return await self.db.get(SetLog, set_log_id)

    async def get_exercise_logs(self, session_id: int, exercise_name: str) -> list[SetLog]:
        result = await self.db.execute(
            select(SetLog)
            .where(SetLog.workout_session_id == session_id, SetLog.exercise_name == exercise_name)
            .order_by(SetLog.set_number)
        )
        return list(result.scalars().all())

    async def delete_set(self, set_log_id: int) -> bool:
        """Idempotent: False (not an error) when the log does not exist."""
        log = await self.db.get(SetLog, set_log_id)
        if log is None:
            return False
        await self.db.delete(log)
        await self.db.commit()
        return True

    async def has_active_session(self) -> bool:
        result = await self.db.execute(select(exists().where(WorkoutSession.end_time.is_(None))))
        return bool(result.scalar())
