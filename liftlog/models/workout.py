"""WorkoutSession and SetLog models."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from liftlog.core.constants import MAX_NAME_LENGTH, MAX_NOTES_LENGTH
from liftlog.core.enums import SessionStatus
from liftlog.core.timeutils import as_utc
from liftlog.db.base import Base


class WorkoutSession(Base):
    """A live or finished workout for one routine day. end_time IS NULL means active."""

    __tablename__ = "workout_sessions"
    __table_args__ = (
        Index("ix_workout_sessions_start_time", "start_time"),
        Index("ix_workout_sessions_end_time", "end_time"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    # Nullable so history survives deletion of the routine day it came from
    routine_day_id: Mapped[int | None] = mapped_column(
        ForeignKey("routine_days.id", ondelete="SET NULL"), nullable=True
    )
    start_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False
    )
    end_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    notes: Mapped[str | None] = mapped_column(String(MAX_NOTES_LENGTH), nullable=True)

    routine_day: Mapped["RoutineDay | None"] = relationship("RoutineDay", back_populates="sessions")
    set_logs: Mapped[list["SetLog"]] = relationship(
        "SetLog",
        back_populates="workout_session",
        cascade="all, delete-orphan",
        order_by=lambda: (SetLog.exercise_name, SetLog.set_number),
    )

    @property
    def is_active(self) -> bool:
        return self.end_time is None

    @property
    def status(self) -> SessionStatus:
        return SessionStatus.ACTIVE if self.end_time is None else SessionStatus.ENDED

    @property
    def duration(self) -> timedelta | None:
        if self.end_time is None:
            return None
        return as_utc(self.end_time) - as_utc(self.start_time)

    @property
    def duration_seconds(self) -> int | None:
        d = self.duration
        return max(0, int(d.total_seconds())) if d is not None else None

    @property
    def total_volume(self) -> Decimal:
        return sum((log.volume for log in self.set_logs), Decimal(0))


class SetLog(Base):
    """One completed set. exercise_name is a copy, not a FK, so history survives template edits."""

    __tablename__ = "set_logs"
    __table_args__ = (
        Index("ix_set_logs_completed_at", "completed_at"),
        Index("ix_set_logs_session_exercise", "workout_session_id", "exercise_name"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    workout_session_id: Mapped[int] = mapped_column(
        ForeignKey("workout_sessions.id", ondelete="CASCADE"), nullable=False
    )
    exercise_name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    set_number: Mapped[int] = mapped_column(Integer, nullable=False)  # 1-based within the exercise
    reps_performed: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    weight_used: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=Decimal(0))  # lbs
    completed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False
    )

    workout_session: Mapped["WorkoutSession"] = relationship("WorkoutSession", back_populates="set_logs")

    @property
    def volume(self) -> Decimal:
        return Decimal(self.reps_performed or 0) * Decimal(self.weight_used or 0)
