"""UTC helpers and local-zone resolution for analytics."""

from __future__ import annotations

from datetime import date, datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Normalize to tz-aware UTC (SQLite hands back naive values)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def local_date(value: datetime, tz: tzinfo) -> date:
    """Calendar date of a stored UTC timestamp in the caller's zone."""
    return as_utc(value).astimezone(tz).date()


def resolve_timezone(name: str | None, default: str = "UTC") -> tzinfo:
    """IANA zone by name; raises ValueError for unknown names."""
    key = name or default
    if key.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone: {key}") from e
