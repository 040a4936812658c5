"""Vote ledger: cast, retract and tally attendee votes on presentations.

Cast and retract lock the presentation row, then check the event's voting
deadline, then re-check that the presentation is still pending. A closed
deadline is reported as such whatever the presentation's status. A cast
re-evaluates resolution inside the same transaction, so a presentation
resolved by the deadline sweep cannot be reopened by a late vote.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from podium.application.dtos.notification import Outcome
from podium.domain.exceptions import (
    NotEligibleException,
    PresentationNotVotableException,
    ResourceNotFoundException,
    VotingDeadlinePassedException,
)
from podium.shared.telemetry.logging import get_logger
from podium.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from podium.application.dtos.event import EventResult
    from podium.application.dtos.presentation import PresentationResult
    from podium.application.dtos.principal import Principal
    from podium.application.interfaces.repositories import (
        IAttendanceRepository,
        IEventRepository,
        IPresentationRepository,
        IVoteRepository,
    )
    from podium.application.interfaces.services import Clock
    from podium.application.services.presentation_resolution import (
        PresentationResolver,
    )
    from podium.domain.enums import VoteChoice
    from podium.domain.value_objects.core import VoteTally

logger = get_logger(__name__)


class VoteLedger:
    """One vote per (user, presentation), replaced on flip and deleted on retract."""

    def __init__(
        self,
        presentation_repo: IPresentationRepository,
        event_repo: IEventRepository,
        attendance_repo: IAttendanceRepository,
        vote_repo: IVoteRepository,
        resolver: PresentationResolver,
        clock: Clock = utc_now,
    ) -> None:
        self.presentation_repo = presentation_repo
        self.event_repo = event_repo
        self.attendance_repo = attendance_repo
        self.vote_repo = vote_repo
        self.resolver = resolver
        self.clock = clock

    async def _lock_votable(
        self, presentation_id: str
    ) -> tuple[PresentationResult, EventResult]:
        presentation = await self.presentation_repo.get_by_id_for_update(
            presentation_id
        )
        if not presentation:
            raise ResourceNotFoundException("presentation", presentation_id)
        event = await self.event_repo.get_by_id(presentation.event_id)
        if not event:
            raise ResourceNotFoundException("event", presentation.event_id)
        if event.voting_closed_at(self.clock()):
            raise VotingDeadlinePassedException(
                event.id, event.voting_deadline.isoformat()
            )
        if not presentation.is_pending:
            raise PresentationNotVotableException(
                presentation_id, presentation.status.value
            )
        return presentation, event

    async def cast(
        self, presentation_id: str, principal: Principal, vote: VoteChoice
    ) -> Outcome[PresentationResult]:
        """Cast or change principal's vote, then re-check resolution.

        Raises:
            ResourceNotFoundException: Presentation or event missing.
            VotingDeadlinePassedException: Event voting deadline has passed.
            PresentationNotVotableException: Presentation is not pending.
            NotEligibleException: Principal does not attend the event.
        """
        presentation, event = await self._lock_votable(presentation_id)
        if not await self.attendance_repo.get(event.id, principal.id):
            raise NotEligibleException(event.id)

        await self.vote_repo.upsert(presentation_id, principal.id, vote)
        logger.debug(
            "User %s voted %s on presentation %s",
            principal.id,
            vote.value,
            presentation_id,
        )
        resolution = await self.resolver.resolve(presentation)
        notifications = (
            (resolution.notification,) if resolution.notification else ()
        )
        return Outcome(value=resolution.presentation, notifications=notifications)

    async def retract(
        self, presentation_id: str, principal: Principal
    ) -> PresentationResult:
        """Delete principal's vote. Never triggers resolution.

        Raises:
            ResourceNotFoundException: Presentation, event or vote missing.
            VotingDeadlinePassedException: Event voting deadline has passed.
            PresentationNotVotableException: Presentation is not pending.
        """
        presentation, _ = await self._lock_votable(presentation_id)
        if not await self.vote_repo.delete(presentation_id, principal.id):
            raise ResourceNotFoundException("vote", presentation_id)
        logger.debug(
            "User %s retracted vote on presentation %s", principal.id, presentation_id
        )
        return presentation

    async def tally(self, presentation_id: str) -> VoteTally:
        """Return approve/reject/total counts for an existing presentation."""
        if not await self.presentation_repo.get_by_id(presentation_id):
            raise ResourceNotFoundException("presentation", presentation_id)
        return await self.vote_repo.tally(presentation_id)

    async def my_vote(
        self, presentation_id: str, principal: Principal | None
    ) -> VoteChoice | None:
        """Return the caller's vote; None for anonymous callers or no vote."""
        if principal is None:
            return None
        vote = await self.vote_repo.get(presentation_id, principal.id)
        return vote.vote if vote else None
