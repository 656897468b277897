"""Liveness and readiness probes."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog import __version__
from liftlog.core.config import get_settings
from liftlog.db.session import get_db
from liftlog.services.session_manager import SessionManager

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("")
async def health():
    """Liveness: version and the default analytics zone."""
    settings = get_settings()
    return {"status": "ok", "version": __version__, "timezone": settings.timezone}


@router.get("/ready")
async def readiness(db: AsyncSession = Depends(get_db)):
    """Readiness: the session table answers, plus whether a workout is in progress."""
    try:
        active = await SessionManager(db).has_active_session()
    except SQLAlchemyError as e:
        logger.exception("Readiness check failed")
        return JSONResponse(
            status_code=503,
            content={"status": "error", "database": str(e)},
        )
    return {"status": "ok", "database": "connected", "active_session": active}
