# gainz/formatting.py
from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional

ACTIVE = "Active"
COMPLETED = "Completed"
UNNAMED = "Unnamed"


def _aware(dt: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is stored as UTC
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def session_status(ended_at: Optional[datetime]) -> str:
    return COMPLETED if ended_at is not None else ACTIVE


def session_duration(
    started_at: Optional[datetime],
    ended_at: Optional[datetime] = None,
    now: Optional[datetime] = None,
) -> Optional[str]:
    """
    Elapsed time as "1h 5m" or "42m". Active sessions run until ``now``.
    Returns None without a start or when the end is before the start.
    """
    if started_at is None:
        return None
    end = ended_at or now or datetime.now(timezone.utc)
    seconds = (_aware(end) - _aware(started_at)).total_seconds()
    if seconds < 0:
        return None
    hours, rem = divmod(int(seconds), 3600)
    minutes = rem // 60
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def set_summary(reps: int, weight: float) -> str:
    return f"{reps} reps × {weight:.1f} lbs"


def display_name(name: Optional[str]) -> str:
    return name or UNNAMED
