"""Routine, routine day and exercise template CRUD."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from liftlog.api.deps import get_workout_service
from liftlog.schemas.routine import (
    ExerciseTemplateCreate,
    ExerciseTemplateRead,
    ExerciseTemplateUpdate,
    RoutineCreate,
    RoutineDayCreate,
    RoutineDayRead,
    RoutineDayUpdate,
    RoutineRead,
    RoutineUpdate,
)
from liftlog.services.workout_service import WorkoutService

router = APIRouter()


@router.get("", response_model=list[RoutineRead])
async def list_routines(service: WorkoutService = Depends(get_workout_service)):
    """All routines (by name) with their days and exercises."""
    return await service.list_routines()


@router.post("", response_model=RoutineRead, status_code=201)
async def create_routine(
    payload: RoutineCreate,
    service: WorkoutService = Depends(get_workout_service),
):
    """Create a routine, optionally with nested days and exercises."""
    return await service.create_routine(payload)


@router.get("/{routine_id}", response_model=RoutineRead)
async def get_routine(
    routine_id: int,
    service: WorkoutService = Depends(get_workout_service),
):
    routine = await service.get_routine(routine_id)
    if routine is None:
        raise HTTPException(status_code=404, detail="Routine not found")
    return routine


@router.patch("/{routine_id}", response_model=RoutineRead)
async def update_routine(
    routine_id: int,
    payload: RoutineUpdate,
    service: WorkoutService = Depends(get_workout_service),
):
    routine = await service.update_routine(routine_id, payload)
    if routine is None:
        raise HTTPException(status_code=404, detail="Routine not found")
    return routine


@router.delete("/{routine_id}", status_code=204)
async def delete_routine(
    routine_id: int,
    service: WorkoutService = Depends(get_workout_service),
):
    """Delete a routine with its days and exercises. Logged sessions are kept."""
    if not await service.delete_routine(routine_id):
        raise HTTPException(status_code=404, detail="Routine not found")
    return None


# ── Days ─────────────────────────────────────────────────────────────────

@router.post("/{routine_id}/days", response_model=RoutineDayRead, status_code=201)
async def add_routine_day(
    routine_id: int,
    payload: RoutineDayCreate,
    service: WorkoutService = Depends(get_workout_service),
):
    day = await service.add_routine_day(routine_id, payload)
    if day is None:
        raise HTTPException(status_code=404, detail="Routine not found")
    return day


@router.get("/days/{day_id}", response_model=RoutineDayRead)
async def get_routine_day(
    day_id: int,
    service: WorkoutService = Depends(get_workout_service),
):
    """A day with its exercise templates in display order."""
    day = await service.get_routine_day(day_id)
    if day is None:
        raise HTTPException(status_code=404, detail="Routine day not found")
    return day


@router.patch("/days/{day_id}", response_model=RoutineDayRead)
async def update_routine_day(
    day_id: int,
    payload: RoutineDayUpdate,
    service: WorkoutService = Depends(get_workout_service),
):
    day = await service.update_routine_day(day_id, payload)
    if day is None:
        raise HTTPException(status_code=404, detail="Routine day not found")
    return day


@router.delete("/days/{day_id}", status_code=204)
async def delete_routine_day(
    day_id: int,
    service: WorkoutService = Depends(get_workout_service),
):
    if not await service.delete_routine_day(day_id):
        raise HTTPException(status_code=404, detail="Routine day not found")
    return None


# ── Exercises ────────────────────────────────────────────────────────────

@router.post("/days/{day_id}/exercises", response_model=ExerciseTemplateRead, status_code=201)
async def add_exercise(
    day_id: int,
    payload: ExerciseTemplateCreate,
    service: WorkoutService = Depends(get_workout_service),
):
    exercise = await service.add_exercise(day_id, payload)
    if exercise is None:
        raise HTTPException(status_code=404, detail="Routine day not found")
    return exercise


@router.patch("/exercises/{exercise_id}", response_model=ExerciseTemplateRead)
async def update_exercise(
    exercise_id: int,
    payload: ExerciseTemplateUpdate,
    service: WorkoutService = Depends(get_workout_service),
):
    exercise = await service.update_exercise(exercise_id, payload)
    if exercise is None:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


@router.delete("/exercises/{exercise_id}", status_code=204)
async def delete_exercise(
    exercise_id: int,
    service: WorkoutService = Depends(get_workout_service),
):
    if not await service.delete_exercise(exercise_id):
        raise HTTPException(status_code=404, detail="Exercise not found")
    return None
