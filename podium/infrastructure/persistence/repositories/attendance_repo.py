"""Attendance repository. Uniqueness of (event, user) is enforced by the database."""

from __future__ import annotations

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from podium.application.dtos.attendance import AttendanceResult
from podium.domain.exceptions import AlreadyRegisteredException
from podium.infrastructure.persistence.models.attendee import Attendee


def _to_result(a: Attendee) -> AttendanceResult:
    """Map Attendee ORM to AttendanceResult DTO."""
    return AttendanceResult(
        id=a.id,
        event_id=a.event_id,
        user_id=a.user_id,
        created_at=a.created_at,
    )


class AttendanceRepository:
    """Attendance repository. Implements IAttendanceRepository."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get(self, event_id: str, user_id: str) -> AttendanceResult | None:
        result = await self.db.execute(
            select(Attendee).where(
                Attendee.event_id == event_id, Attendee.user_id == user_id
            )
        )
        attendee = result.scalar_one_or_none()
        return _to_result(attendee) if attendee else None

    async def create(self, event_id: str, user_id: str) -> AttendanceResult:
        """Insert attendance inside a savepoint so a duplicate leaves the transaction usable."""
        attendee = Attendee(event_id=event_id, user_id=user_id)
        try:
            async with self.db.begin_nested():
                self.db.add(attendee)
                await self.db.flush()
        except IntegrityError:
            raise AlreadyRegisteredException(event_id, user_id) from None
        await self.db.refresh(attendee)
        return _to_result(attendee)

    async def delete(self, attendance_id: str) -> bool:
        result = await self.db.execute(
            delete(Attendee).where(Attendee.id == attendance_id)
        )
        return result.rowcount > 0

    async def count_by_event(self, event_id: str) -> int:
        result = await self.db.execute(
            select(func.count())
            .select_from(Attendee)
            .where(Attendee.event_id == event_id)
        )
        return result.scalar_one()

    async def list_by_event(self, event_id: str) -> list[AttendanceResult]:
        result = await self.db.execute(
            select(Attendee)
            .where(Attendee.event_id == event_id)
            .order_by(Attendee.created_at, Attendee.id)
        )
        return [_to_result(a) for a in result.scalars().all()]

    async def list_by_user(self, user_id: str) -> list[AttendanceResult]:
        result = await self.db.execute(
            select(Attendee)
            .where(Attendee.user_id == user_id)
            .order_by(Attendee.created_at.desc(), Attendee.id)
        )
        return [_to_result(a) for a in result.scalars().all()]
