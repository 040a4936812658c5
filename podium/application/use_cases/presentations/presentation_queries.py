"""Read models for presentations: detail with quorum, event lists with tallies."""

from __future__ import annotations

from typing import TYPE_CHECKING

from podium.application.dtos.presentation import (
    PresentationDetail,
    PresentationWithVotes,
)
from podium.domain.exceptions import ResourceNotFoundException
from podium.domain.resolution import min_votes_required
from podium.domain.value_objects.core import VoteTally

if TYPE_CHECKING:
    from podium.application.dtos.presentation import PresentationResult
    from podium.application.dtos.principal import Principal
    from podium.application.interfaces.repositories import (
        IAttendanceRepository,
        IPresentationRepository,
        IVoteRepository,
    )
    from podium.domain.enums import PresentationStatus


class PresentationQueryService:
    """Query presentations with their tallies and the caller's own vote."""

    def __init__(
        self,
        presentation_repo: IPresentationRepository,
        attendance_repo: IAttendanceRepository,
        vote_repo: IVoteRepository,
    ) -> None:
        self.presentation_repo = presentation_repo
        self.attendance_repo = attendance_repo
        self.vote_repo = vote_repo

    async def get_detail(self, presentation_id: str) -> PresentationDetail:
        """Return presentation with tally, attendee count and quorum; raise if missing."""
        presentation = await self.presentation_repo.get_by_id(presentation_id)
        if not presentation:
            raise ResourceNotFoundException("presentation", presentation_id)
        attendee_count = await self.attendance_repo.count_by_event(
            presentation.event_id
        )
        return PresentationDetail(
            presentation=presentation,
            tally=await self.vote_repo.tally(presentation_id),
            attendee_count=attendee_count,
            min_votes_required=min_votes_required(attendee_count),
        )

    async def list_by_event(
        self,
        event_id: str,
        principal: Principal | None = None,
        status: PresentationStatus | None = None,
    ) -> list[PresentationWithVotes]:
        """Return event presentations (optionally one status) with tallies and my vote."""
        presentations = await self.presentation_repo.list_by_event(
            event_id, status=status
        )
        return await self._with_votes(presentations, principal)

    async def list_mine(self, principal: Principal) -> list[PresentationResult]:
        """Return presentations submitted by the caller (newest first)."""
        return await self.presentation_repo.list_by_submitter(principal.id)

    async def _with_votes(
        self,
        presentations: list[PresentationResult],
        principal: Principal | None,
    ) -> list[PresentationWithVotes]:
        if not presentations:
            return []
        ids = [p.id for p in presentations]
        tallies = await self.vote_repo.tallies(ids)
        mine = (
            await self.vote_repo.choices_by_user(ids, principal.id)
            if principal is not None
            else {}
        )
        return [
            PresentationWithVotes(
                presentation=p,
                tally=tallies.get(p.id, VoteTally()),
                user_vote=mine.get(p.id),
            )
            for p in presentations
        ]
