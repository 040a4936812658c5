"""DTOs for events (read model of the external event collaborator)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from podium.domain.enums import EventStatus


@dataclass(frozen=True)
class EventResult:
    """Event fields the presentation lifecycle reads."""

    id: str
    title: str
    status: EventStatus
    starts_at: datetime
    ends_at: datetime | None
    voting_deadline: datetime | None
    created_by: str

    def voting_closed_at(self, now: datetime) -> bool:
        """Return True when a deadline is set and now is past it (now == deadline is still open)."""
        return self.voting_deadline is not None and now > self.voting_deadline
