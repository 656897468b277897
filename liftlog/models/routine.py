"""Routine, RoutineDay and ExerciseTemplate models."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from liftlog.core.constants import (
    MAX_DESCRIPTION_LENGTH,
    MAX_NAME_LENGTH,
    MAX_TARGET_CONFIG_LENGTH,
)
from liftlog.db.base import Base

_INT_TOKEN = re.compile(r"^[+-]?[0-9]+$")
_DECIMAL_TOKEN = re.compile(r"^[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)$")


def _split_targets(config: str | None) -> list[str]:
    if not config or not config.strip():
        return []
    return [token.strip() for token in config.split("-") if token]


def parse_target_reps(config: str | None) -> list[int]:
    """"15-12-10-8" -> [15, 12, 10, 8]. Non-numeric tokens become 0."""
    return [int(t) if _INT_TOKEN.match(t) else 0 for t in _split_targets(config)]


def parse_target_weights(config: str | None) -> list[Decimal]:
    """"20-25-30-35" -> [20, 25, 30, 35] (lbs). Anything but a plain decimal number becomes 0."""
    return [Decimal(t) if _DECIMAL_TOKEN.match(t) else Decimal(0) for t in _split_targets(config)]


class Routine(Base):
    """A training program (e.g. push/pull/legs) made of ordered days."""

    __tablename__ = "routines"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(String(MAX_DESCRIPTION_LENGTH), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    days: Mapped[list["RoutineDay"]] = relationship(
        "RoutineDay",
        back_populates="routine",
        cascade="all, delete-orphan",
        order_by="RoutineDay.sort_order",
    )


class RoutineDay(Base):
    """One training day of a routine. Deleting it keeps its sessions (routine_day_id -> NULL)."""

    __tablename__ = "routine_days"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    routine_id: Mapped[int] = mapped_column(
        ForeignKey("routines.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    sort_order: Mapped[int] = mapped_column(Integer, default=0)

    routine: Mapped["Routine"] = relationship("Routine", back_populates="days")
    exercises: Mapped[list["ExerciseTemplate"]] = relationship(
        "ExerciseTemplate",
        back_populates="routine_day",
        cascade="all, delete-orphan",
        order_by="ExerciseTemplate.sort_order",
    )
    sessions: Mapped[list["WorkoutSession"]] = relationship(
        "WorkoutSession", back_populates="routine_day"
    )


class ExerciseTemplate(Base):
    """Planned exercise: target reps per set as "15-12-10-8", optional parallel weights."""

    __tablename__ = "exercise_templates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    routine_day_id: Mapped[int] = mapped_column(
        ForeignKey("routine_days.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    target_config: Mapped[str] = mapped_column(String(MAX_TARGET_CONFIG_LENGTH), nullable=False, default="")
    target_weights: Mapped[str] = mapped_column(String(MAX_TARGET_CONFIG_LENGTH), nullable=False, default="")
    sort_order: Mapped[int] = mapped_column(Integer, default=0)

    routine_day: Mapped["RoutineDay"] = relationship("RoutineDay", back_populates="exercises")

    @property
    def target_reps(self) -> list[int]:
        return parse_target_reps(self.target_config)

    @property
    def target_weight_values(self) -> list[Decimal]:
        return parse_target_weights(self.target_weights)

    @property
    def set_count(self) -> int:
        return len(self.target_reps)
