"""Shared FastAPI dependencies."""

from fastapi import Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.core.config import get_settings
from liftlog.core.timeutils import resolve_timezone
from liftlog.db.session import get_db
from liftlog.services.workout_service import WorkoutService


async def get_workout_service(
    tz: str | None = Query(None, description="IANA zone for local-day analytics, e.g. America/New_York"),
    db: AsyncSession = Depends(get_db),
) -> WorkoutService:
    """WorkoutService bound to this request's DB session and the caller's zone."""
    name = tz or get_settings().timezone
    try:
        zone = resolve_timezone(name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return WorkoutService(db, tz=zone, tz_name=name)
