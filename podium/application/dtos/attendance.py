"""DTOs for event attendance (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AttendanceResult:
    """One (event, user) attendance row."""

    id: str
    event_id: str
    user_id: str
    created_at: datetime


@dataclass(frozen=True)
class AttendanceStatus:
    """Caller's attendance for an event plus the current attendee count."""

    event_id: str
    is_attending: bool
    attendee_count: int
