"""Shared enums for models and API."""

from enum import Enum


class SessionStatus(str, Enum):
    """Lifecycle state of a workout session (derived from end_time, never stored)."""

    ACTIVE = "active"  # end_time is null
    ENDED = "ended"  # end_time set, data kept
    CANCELLED = "cancelled"  # hard-deleted; only seen on a cancel result
