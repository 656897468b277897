"""Workout session lifecycle and set logging endpoints."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from liftlog.api.deps import get_workout_service
from liftlog.core.constants import MAX_RECENT_SESSIONS, ROLLING_WINDOW_DAYS
from liftlog.core.enums import SessionStatus
from liftlog.core.timeutils import as_utc, utcnow
from liftlog.schemas.workout import (
    SessionStart,
    SetLogCreate,
    SetLogRead,
    SetLogSave,
    SetLogUpdate,
    WorkoutSessionDetail,
    WorkoutSessionRead,
)
from liftlog.services.workout_service import WorkoutService

router = APIRouter()


@router.post("/start", response_model=WorkoutSessionDetail, status_code=201)
async def start_session(
    payload: SessionStart,
    service: WorkoutService = Depends(get_workout_service),
):
    """Start a session for a routine day. A session still active is ended first."""
    if await service.get_routine_day(payload.routine_day_id) is None:
        raise HTTPException(status_code=404, detail="Routine day not found")
    return await service.start_session(payload.routine_day_id)


@router.post("/resume", response_model=WorkoutSessionDetail)
async def resume_or_start_session(
    payload: SessionStart,
    service: WorkoutService = Depends(get_workout_service),
):
    """Return the active session if it is for this day, otherwise start a new one."""
    if await service.get_routine_day(payload.routine_day_id) is None:
        raise HTTPException(status_code=404, detail="Routine day not found")
    return await service.get_or_start_session(payload.routine_day_id)


@router.get("/active", response_model=Optional[WorkoutSessionDetail])
async def get_active_session(service: WorkoutService = Depends(get_workout_service)):
    """The in-progress session with exercises and sets, or null."""
    return await service.get_active_session()


@router.get("/active/exists")
async def has_active_session(service: WorkoutService = Depends(get_workout_service)):
    return {"active": await service.has_active_session()}


@router.post("/active/end", response_model=Optional[WorkoutSessionRead])
async def end_session(service: WorkoutService = Depends(get_workout_service)):
    """End the active session (data kept). Null when nothing is active."""
    return await service.end_session()


@router.post("/active/cancel", response_model=Optional[WorkoutSessionRead])
async def cancel_session(service: WorkoutService = Depends(get_workout_service)):
    """Discard the active session and all its sets. Null when nothing is active."""
    session = await service.cancel_session()
    if session is None:
        return None
    return WorkoutSessionRead.model_validate(session).model_copy(update={"status": SessionStatus.CANCELLED})


@router.get("", response_model=list[WorkoutSessionRead])
async def list_sessions(
    from_date: datetime | None = None,
    to_date: datetime | None = None,
    service: WorkoutService = Depends(get_workout_service),
):
    """Sessions started in [from_date, to_date], newest first. Defaults to the last 30 days."""
    end = as_utc(to_date) if to_date else utcnow()
    start = as_utc(from_date) if from_date else end - timedelta(days=ROLLING_WINDOW_DAYS)
    return await service.get_session_history(start, end)


@router.get("/recent", response_model=list[WorkoutSessionRead])
async def recent_sessions(
    limit: int = Query(10, ge=1, le=MAX_RECENT_SESSIONS),
    service: WorkoutService = Depends(get_workout_service),
):
    """Most recent completed sessions."""
    return await service.get_recent_sessions(limit)


@router.delete("/sets/{set_id}", status_code=204)
async def delete_set(
    set_id: int,
    service: WorkoutService = Depends(get_workout_service),
):
    """Delete a set log. Deleting a missing set is a no-op."""
    await service.delete_set(set_id)
    return None


@router.get("/{session_id}", response_model=WorkoutSessionDetail)
async def get_session(
    session_id: int,
    service: WorkoutService = Depends(get_workout_service),
):
    session = await service.get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


@router.post("/{session_id}/sets", response_model=SetLogRead, status_code=201)
async def add_set(
    session_id: int,
    payload: SetLogCreate,
    service: WorkoutService = Depends(get_workout_service),
):
    """Log a completed set. Ended sessions accept sets too (retroactive edits)."""
    if await service.get_session(session_id) is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return await service.save_set(SetLogSave(workout_session_id=session_id, **payload.model_dump()))


@router.patch("/{session_id}/sets/{set_id}", response_model=SetLogRead)
async def update_set(
    session_id: int,
    set_id: int,
    payload: SetLogUpdate,
    service: WorkoutService = Depends(get_workout_service),
):
    """Correct reps/weight of a set. Its completion time is kept."""
    existing = await service.get_set(set_id)
    if existing is None or existing.workout_session_id != session_id:
        raise HTTPException(status_code=404, detail="Set not found")
    return await service.save_set(
        SetLogSave(
            id=existing.id,
            workout_session_id=session_id,
            exercise_name=existing.exercise_name,
            set_number=existing.set_number,
            **payload.model_dump(),
        )
    )


@router.get("/{session_id}/sets", response_model=list[SetLogRead])
async def list_sets(
    session_id: int,
    exercise_name: str | None = None,
    service: WorkoutService = Depends(get_workout_service),
):
    """Sets of a session; with exercise_name, only that exercise ordered by set number."""
    if exercise_name:
        return await service.get_exercise_logs(session_id, exercise_name)
    return await service.get_session_logs(session_id)
