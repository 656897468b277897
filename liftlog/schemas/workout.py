"""WorkoutSession and SetLog schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from liftlog.core.constants import MAX_NAME_LENGTH
from liftlog.core.enums import SessionStatus
from liftlog.schemas.routine import RoutineDayRead


class SetLogBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    exercise_name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    set_number: int = Field(..., ge=1)
    reps_performed: int = Field(..., ge=0)
    weight_used: float = Field(..., ge=0)  # lbs


class SetLogCreate(SetLogBase):
    pass


class SetLogUpdate(BaseModel):
    """Only reps and weight change on an existing set; its timestamp is kept."""

    reps_performed: int = Field(..., ge=0)
    weight_used: float = Field(..., ge=0)


class SetLogSave(SetLogBase):
    """Upsert payload for SessionManager.save_set: id None inserts, id set updates."""

    id: int | None = None
    workout_session_id: int


class SetLogRead(SetLogBase):
    model_config = ConfigDict(from_attributes=True)
    id: int
    workout_session_id: int
    completed_at: datetime
    volume: float = 0


class SessionStart(BaseModel):
    routine_day_id: int


class WorkoutSessionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    routine_day_id: int | None = None
    start_time: datetime
    end_time: datetime | None = None
    notes: str | None = None
    status: SessionStatus
    duration_seconds: int | None = None
    total_volume: float = 0
    set_logs: list[SetLogRead] = []


class WorkoutSessionDetail(WorkoutSessionRead):
    """Session with its routine day and exercise templates (for the live workout view)."""

    routine_day: RoutineDayRead | None = None
