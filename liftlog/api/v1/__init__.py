"""API v1 router aggregation."""

from fastapi import APIRouter

from liftlog.api.v1.endpoints import analytics, health, routines, sessions

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(routines.router, prefix="/routines", tags=["routines"])
api_router.include_router(sessions.router, prefix="/sessions", tags=["sessions"])
api_router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
