"""Routine, day and exercise template schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from liftlog.core.constants import (
    MAX_DESCRIPTION_LENGTH,
    MAX_NAME_LENGTH,
    MAX_TARGET_CONFIG_LENGTH,
)


class ExerciseTemplateBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    target_config: str = Field(default="", max_length=MAX_TARGET_CONFIG_LENGTH)
    target_weights: str = Field(default="", max_length=MAX_TARGET_CONFIG_LENGTH)
    sort_order: int = 0


class ExerciseTemplateCreate(ExerciseTemplateBase):
    pass


class ExerciseTemplateUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    target_config: str | None = Field(None, max_length=MAX_TARGET_CONFIG_LENGTH)
    target_weights: str | None = Field(None, max_length=MAX_TARGET_CONFIG_LENGTH)
    sort_order: int | None = None


class ExerciseTemplateRead(ExerciseTemplateBase):
    """Template plus parsed targets (malformed tokens read as 0)."""

    model_config = ConfigDict(from_attributes=True)
    id: int
    routine_day_id: int
    target_reps: list[int] = []
    target_weight_values: list[float] = []
    set_count: int = 0


class RoutineDayBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    sort_order: int = 0


class RoutineDayCreate(RoutineDayBase):
    exercises: list[ExerciseTemplateCreate] = []


class RoutineDayUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    sort_order: int | None = None


class RoutineDayRead(RoutineDayBase):
    model_config = ConfigDict(from_attributes=True)
    id: int
    routine_id: int
    exercises: list[ExerciseTemplateRead] = []


class RoutineBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    description: str | None = Field(None, max_length=MAX_DESCRIPTION_LENGTH)


class RoutineCreate(RoutineBase):
    """Create a routine, optionally with its days and exercises in one go."""

    days: list[RoutineDayCreate] = []


class RoutineUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    description: str | None = Field(None, max_length=MAX_DESCRIPTION_LENGTH)


class RoutineRead(RoutineBase):
    model_config = ConfigDict(from_attributes=True)
    id: int
    created_at: datetime
    days: list[RoutineDayRead] = []
