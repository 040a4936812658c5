"""Force-resolve pending presentations whose event voting deadline elapsed."""

from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager, nullcontext
from typing import TYPE_CHECKING

from podium.application.dtos.sweep import VotingDeadlineSweepResult
from podium.domain.enums import PresentationStatus
from podium.domain.resolution import ResolutionOutcome
from podium.shared.telemetry.logging import get_logger
from podium.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from podium.application.dtos.notification import OutboundNotification
    from podium.application.interfaces.repositories import (
        IEventRepository,
        IPresentationRepository,
    )
    from podium.application.interfaces.services import Clock
    from podium.application.services.presentation_resolution import (
        PresentationResolver,
    )

logger = get_logger(__name__)

# Opens a nested transaction so one presentation's failure rolls back only its own writes.
SavepointFactory = Callable[[], AbstractAsyncContextManager[object]]


class RunVotingDeadlineSweepUseCase:
    """Resolves every pending presentation of upcoming events past their voting deadline.

    Forced resolution approves when admin sign-off, quorum and majority all
    hold, and rejects otherwise. Resolved presentations are never revisited,
    so repeated runs are no-ops. A failure on one presentation is logged and
    the batch continues.
    """

    def __init__(
        self,
        event_repo: IEventRepository,
        presentation_repo: IPresentationRepository,
        resolver: PresentationResolver,
        savepoint: SavepointFactory | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._event_repo = event_repo
        self._presentation_repo = presentation_repo
        self._resolver = resolver
        self._savepoint = savepoint or nullcontext
        self._clock = clock

    async def run(self) -> VotingDeadlineSweepResult:
        """Run one sweep.

        Returns:
            Counts of processed/approved/rejected/failed presentations and the
            result notifications to dispatch after commit.
        """
        now = self._clock()
        events = await self._event_repo.list_voting_deadline_elapsed(now)
        approved = rejected = 0
        failed: list[str] = []
        notifications: list[OutboundNotification] = []

        for event in events:
            pending = await self._presentation_repo.list_by_event(
                event.id, status=PresentationStatus.PENDING
            )
            for candidate in pending:
                try:
                    async with self._savepoint():
                        presentation = (
                            await self._presentation_repo.get_by_id_for_update(
                                candidate.id
                            )
                        )
                        if presentation is None or not presentation.is_pending:
                            continue
                        resolution = await self._resolver.resolve(
                            presentation, force=True
                        )
                except Exception:
                    logger.exception(
                        "Voting deadline sweep failed for presentation %s",
                        candidate.id,
                    )
                    failed.append(candidate.id)
                    continue
                if resolution.outcome is ResolutionOutcome.APPROVED:
                    approved += 1
                else:
                    rejected += 1
                if resolution.notification:
                    notifications.append(resolution.notification)

        if approved or rejected or failed:
            logger.info(
                "Voting deadline sweep: %s events, %s approved, %s rejected, %s failed",
                len(events),
                approved,
                rejected,
                len(failed),
            )
        return VotingDeadlineSweepResult(
            events_processed=len(events),
            processed_count=approved + rejected,
            approved_count=approved,
            rejected_count=rejected,
            error_count=len(failed),
            error_presentation_ids=tuple(failed),
            notifications=tuple(notifications),
        )
