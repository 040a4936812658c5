"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs or domain types only; no infrastructure imports.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from podium.application.dtos.attendance import AttendanceResult
    from podium.application.dtos.event import EventResult
    from podium.application.dtos.presentation import PresentationResult
    from podium.application.dtos.vote import VoteResult
    from podium.domain.enums import EventStatus, PresentationStatus, VoteChoice
    from podium.domain.value_objects.core import TalkDetails, VoteTally


# Event repository interface (events are owned by the event collaborator)
class IEventRepository(Protocol):
    """Protocol for event lookup and status patches (DIP)."""

    async def get_by_id(self, event_id: str) -> EventResult | None:
        """Return event by ID."""

    async def list_voting_deadline_elapsed(self, now: datetime) -> list[EventResult]:
        """Return upcoming events whose voting_deadline is set and strictly before now."""

    async def list_not_cancelled(self) -> list[EventResult]:
        """Return all events whose status is not cancelled."""

    async def update_status(
        self, event_id: str, status: EventStatus
    ) -> EventResult | None:
        """Set event status. Returns None if the event does not exist."""


# Attendance repository interface
class IAttendanceRepository(Protocol):
    """Protocol for attendance repository (DIP)."""

    async def get(self, event_id: str, user_id: str) -> AttendanceResult | None:
        """Return the attendance row for (event, user), if any."""

    async def create(self, event_id: str, user_id: str) -> AttendanceResult:
        """Insert attendance. Raises AlreadyRegisteredException on unique violation."""

    async def delete(self, attendance_id: str) -> bool:
        """Delete attendance by id. Returns True if a row was removed."""

    async def count_by_event(self, event_id: str) -> int:
        """Return number of attendees for event."""

    async def list_by_event(self, event_id: str) -> list[AttendanceResult]:
        """Return attendance rows for event (oldest first)."""

    async def list_by_user(self, user_id: str) -> list[AttendanceResult]:
        """Return attendance rows of user (newest first)."""


# Presentation repository interface
class IPresentationRepository(Protocol):
    """Protocol for presentation repository (DIP)."""

    async def get_by_id(self, presentation_id: str) -> PresentationResult | None:
        """Return presentation by ID."""

    async def get_by_id_for_update(
        self, presentation_id: str
    ) -> PresentationResult | None:
        """Return presentation by ID, locking its row until the transaction ends."""

    async def create(
        self, event_id: str, submitted_by: str, details: TalkDetails
    ) -> PresentationResult:
        """Insert a pending, not admin-approved presentation."""

    async def update(
        self, presentation_id: str, changes: dict[str, Any]
    ) -> PresentationResult | None:
        """Patch the given columns and updated_at. Returns None if not found."""

    async def list_by_event(
        self, event_id: str, status: PresentationStatus | None = None
    ) -> list[PresentationResult]:
        """Return presentations for event (oldest first), optionally filtered by status."""

    async def list_by_submitter(self, user_id: str) -> list[PresentationResult]:
        """Return presentations submitted by user (newest first)."""


# Vote repository interface
class IVoteRepository(Protocol):
    """Protocol for vote repository (DIP)."""

    async def get(self, presentation_id: str, user_id: str) -> VoteResult | None:
        """Return the caller's vote on presentation, if any."""

    async def upsert(
        self, presentation_id: str, user_id: str, vote: VoteChoice
    ) -> VoteResult:
        """Insert a vote or overwrite the existing value (created_at unchanged)."""

    async def delete(self, presentation_id: str, user_id: str) -> bool:
        """Delete the vote. Returns True if a row was removed."""

    async def tally(self, presentation_id: str) -> VoteTally:
        """Return approve/reject counts for presentation."""

    async def tallies(self, presentation_ids: list[str]) -> dict[str, VoteTally]:
        """Return tallies per presentation (batch). Missing ids map to an empty tally."""

    async def choices_by_user(
        self, presentation_ids: list[str], user_id: str
    ) -> dict[str, VoteChoice]:
        """Return user's vote per presentation (batch); presentations without a vote are absent."""
