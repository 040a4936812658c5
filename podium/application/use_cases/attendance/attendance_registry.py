"""Attendance registry: register, unregister and count event attendees.

Attendance is both the voting eligibility check and the quorum
denominator for presentation resolution.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from podium.application.dtos.attendance import AttendanceResult, AttendanceStatus
from podium.application.dtos.notification import OutboundNotification, Outcome
from podium.domain.enums import NotificationKind
from podium.domain.exceptions import (
    AlreadyRegisteredException,
    NotRegisteredException,
    ResourceNotFoundException,
)
from podium.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from podium.application.dtos.event import EventResult
    from podium.application.dtos.principal import Principal
    from podium.application.interfaces.repositories import (
        IAttendanceRepository,
        IEventRepository,
    )

logger = get_logger(__name__)


class AttendanceRegistry:
    """Which users attend which events."""

    def __init__(
        self,
        attendance_repo: IAttendanceRepository,
        event_repo: IEventRepository,
    ) -> None:
        self.attendance_repo = attendance_repo
        self.event_repo = event_repo

    async def _get_event(self, event_id: str) -> EventResult:
        event = await self.event_repo.get_by_id(event_id)
        if not event:
            raise ResourceNotFoundException("event", event_id)
        return event

    async def register(
        self, event_id: str, principal: Principal
    ) -> Outcome[AttendanceResult]:
        """Register principal for event and notify the event creator.

        Raises:
            ResourceNotFoundException: Event does not exist.
            AlreadyRegisteredException: Principal already attends (including a
                concurrent insert that hit the unique constraint).
        """
        event = await self._get_event(event_id)
        if await self.attendance_repo.get(event_id, principal.id):
            raise AlreadyRegisteredException(event_id, principal.id)
        attendance = await self.attendance_repo.create(event_id, principal.id)
        attendee_count = await self.attendance_repo.count_by_event(event_id)
        logger.info(
            "User %s registered for event %s (%s attendees)",
            principal.id,
            event_id,
            attendee_count,
        )
        notification = OutboundNotification(
            kind=NotificationKind.NEW_ATTENDEE,
            payload={
                "event_id": event.id,
                "event_title": event.title,
                "attendee_id": principal.id,
                "attendee_count": attendee_count,
            },
            recipient_ids=(event.created_by,),
        )
        return Outcome(value=attendance, notifications=(notification,))

    async def unregister(self, event_id: str, principal: Principal) -> str:
        """Remove principal's attendance. Returns the removed attendance id.

        Votes already cast by the user are kept.
        """
        attendance = await self.attendance_repo.get(event_id, principal.id)
        if not attendance or not await self.attendance_repo.delete(attendance.id):
            raise NotRegisteredException(event_id, principal.id)
        logger.info("User %s unregistered from event %s", principal.id, event_id)
        return attendance.id

    async def is_attending(self, event_id: str, principal: Principal | None) -> bool:
        """Return whether principal attends event; False for anonymous callers."""
        if principal is None:
            return False
        return await self.attendance_repo.get(event_id, principal.id) is not None

    async def count(self, event_id: str) -> int:
        """Return the number of attendees of event."""
        return await self.attendance_repo.count_by_event(event_id)

    async def status(
        self, event_id: str, principal: Principal | None
    ) -> AttendanceStatus:
        """Return the caller's attendance flag and the attendee count together."""
        return AttendanceStatus(
            event_id=event_id,
            is_attending=await self.is_attending(event_id, principal),
            attendee_count=await self.count(event_id),
        )

    async def list_attendees(self, event_id: str) -> list[AttendanceResult]:
        """Return attendance rows for an existing event."""
        await self._get_event(event_id)
        return await self.attendance_repo.list_by_event(event_id)

    async def my_events(self, principal: Principal | None) -> list[AttendanceResult]:
        """Return the caller's attendance rows; empty for anonymous callers."""
        if principal is None:
            return []
        return await self.attendance_repo.list_by_user(principal.id)
