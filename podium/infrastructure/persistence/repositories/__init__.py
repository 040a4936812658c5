"""Persistence repositories. Re-exports for dependency injection."""

from podium.infrastructure.persistence.repositories.attendance_repo import (
    AttendanceRepository,
)
from podium.infrastructure.persistence.repositories.event_repo import EventRepository
from podium.infrastructure.persistence.repositories.presentation_repo import (
    PresentationRepository,
)
from podium.infrastructure.persistence.repositories.vote_repo import VoteRepository

__all__ = [
    "AttendanceRepository",
    "EventRepository",
    "PresentationRepository",
    "VoteRepository",
]
