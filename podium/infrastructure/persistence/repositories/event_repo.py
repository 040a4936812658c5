"""Event repository: lookups for the lifecycle and status patches for the sweeps."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from podium.application.dtos.event import EventResult
from podium.domain.enums import EventStatus
from podium.infrastructure.persistence.models.event import Event
from podium.shared.utils.datetime import ensure_utc


def _to_result(e: Event) -> EventResult:
    """Map Event ORM to EventResult DTO."""
    return EventResult(
        id=e.id,
        title=e.title,
        status=EventStatus(e.status),
        starts_at=ensure_utc(e.starts_at),  # type: ignore[arg-type]
        ends_at=ensure_utc(e.ends_at),
        voting_deadline=ensure_utc(e.voting_deadline),
        created_by=e.created_by,
    )


class EventRepository:
    """Event repository. Implements IEventRepository."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_id(self, event_id: str) -> EventResult | None:
        event = await self.db.get(Event, event_id)
        return _to_result(event) if event else None

    async def list_voting_deadline_elapsed(self, now: datetime) -> list[EventResult]:
        result = await self.db.execute(
            select(Event)
            .where(
                Event.status == EventStatus.UPCOMING.value,
                Event.voting_deadline.is_not(None),
                Event.voting_deadline < now,
            )
            .order_by(Event.voting_deadline)
        )
        return [_to_result(e) for e in result.scalars().all()]

    async def list_not_cancelled(self) -> list[EventResult]:
        result = await self.db.execute(
            select(Event)
            .where(Event.status != EventStatus.CANCELLED.value)
            .order_by(Event.starts_at)
        )
        return [_to_result(e) for e in result.scalars().all()]

    async def update_status(
        self, event_id: str, status: EventStatus
    ) -> EventResult | None:
        event = await self.db.get(Event, event_id)
        if not event:
            return None
        event.status = status.value
        await self.db.flush()
        await self.db.refresh(event)
        return _to_result(event)
