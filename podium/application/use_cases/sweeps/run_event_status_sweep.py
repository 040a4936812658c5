"""Move events through upcoming -> ongoing -> past as time passes."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from podium.application.dtos.sweep import EventStatusSweepResult
from podium.domain.enums import EventStatus
from podium.shared.telemetry.logging import get_logger
from podium.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from podium.application.dtos.event import EventResult
    from podium.application.interfaces.repositories import IEventRepository
    from podium.application.interfaces.services import Clock

logger = get_logger(__name__)


def expected_event_status(event: EventResult, now: datetime) -> EventStatus:
    """Return the time-derived status of a non-cancelled event.

    Without ends_at an event goes straight from upcoming to past at starts_at.
    """
    if now < event.starts_at:
        return EventStatus.UPCOMING
    if event.ends_at is not None and now < event.ends_at:
        return EventStatus.ONGOING
    return EventStatus.PAST


class RunEventStatusSweepUseCase:
    """Patch the status of every non-cancelled event whose time-derived status changed."""

    def __init__(self, event_repo: IEventRepository, clock: Clock = utc_now) -> None:
        self._event_repo = event_repo
        self._clock = clock

    async def run(self) -> EventStatusSweepResult:
        now = self._clock()
        updated: list[str] = []
        for event in await self._event_repo.list_not_cancelled():
            if event.status is EventStatus.CANCELLED:
                continue
            status = expected_event_status(event, now)
            if status is event.status:
                continue
            await self._event_repo.update_status(event.id, status)
            logger.info(
                "Event %s status %s -> %s", event.id, event.status.value, status.value
            )
            updated.append(event.id)
        return EventStatusSweepResult(
            updated_count=len(updated), updated_event_ids=tuple(updated)
        )
