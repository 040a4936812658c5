"""Vote repository. Callers hold the presentation row lock while writing votes."""

from __future__ import annotations

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from podium.application.dtos.vote import VoteResult
from podium.domain.enums import VoteChoice
from podium.domain.value_objects.core import VoteTally
from podium.infrastructure.persistence.models.vote import Vote


def _to_result(v: Vote) -> VoteResult:
    """Map Vote ORM to VoteResult DTO."""
    return VoteResult(
        id=v.id,
        presentation_id=v.presentation_id,
        user_id=v.user_id,
        vote=VoteChoice(v.vote),
        created_at=v.created_at,
    )


def _tally_from_rows(rows: list[tuple[str, int]]) -> VoteTally:
    counts = dict(rows)
    return VoteTally(
        approve=counts.get(VoteChoice.APPROVE.value, 0),
        reject=counts.get(VoteChoice.REJECT.value, 0),
    )


class VoteRepository:
    """Vote repository. Implements IVoteRepository."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _get(self, presentation_id: str, user_id: str) -> Vote | None:
        result = await self.db.execute(
            select(Vote).where(
                Vote.presentation_id == presentation_id, Vote.user_id == user_id
            )
        )
        return result.scalar_one_or_none()

    async def get(self, presentation_id: str, user_id: str) -> VoteResult | None:
        vote = await self._get(presentation_id, user_id)
        return _to_result(vote) if vote else None

    async def upsert(
        self, presentation_id: str, user_id: str, vote: VoteChoice
    ) -> VoteResult:
        existing = await self._get(presentation_id, user_id)
        if existing:
            existing.vote = vote.value
        else:
            existing = Vote(
                presentation_id=presentation_id, user_id=user_id, vote=vote.value
            )
            self.db.add(existing)
        await self.db.flush()
        await self.db.refresh(existing)
        return _to_result(existing)

    async def delete(self, presentation_id: str, user_id: str) -> bool:
        result = await self.db.execute(
            delete(Vote).where(
                Vote.presentation_id == presentation_id, Vote.user_id == user_id
            )
        )
        return result.rowcount > 0

    async def tally(self, presentation_id: str) -> VoteTally:
        result = await self.db.execute(
            select(Vote.vote, func.count())
            .where(Vote.presentation_id == presentation_id)
            .group_by(Vote.vote)
        )
        return _tally_from_rows([(choice, count) for choice, count in result.all()])

    async def tallies(self, presentation_ids: list[str]) -> dict[str, VoteTally]:
        if not presentation_ids:
            return {}
        result = await self.db.execute(
            select(Vote.presentation_id, Vote.vote, func.count())
            .where(Vote.presentation_id.in_(presentation_ids))
            .group_by(Vote.presentation_id, Vote.vote)
        )
        rows: dict[str, list[tuple[str, int]]] = {pid: [] for pid in presentation_ids}
        for presentation_id, choice, count in result.all():
            rows[presentation_id].append((choice, count))
        return {pid: _tally_from_rows(r) for pid, r in rows.items()}

    async def choices_by_user(
        self, presentation_ids: list[str], user_id: str
    ) -> dict[str, VoteChoice]:
        if not presentation_ids:
            return {}
        result = await self.db.execute(
            select(Vote.presentation_id, Vote.vote).where(
                Vote.presentation_id.in_(presentation_ids), Vote.user_id == user_id
            )
        )
        return {pid: VoteChoice(choice) for pid, choice in result.all()}
