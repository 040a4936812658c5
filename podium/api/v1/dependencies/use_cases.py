"""Use case dependencies: repositories on the request session (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from podium.api.v1.dependencies.db import get_session
from podium.application.services.presentation_resolution import PresentationResolver
from podium.application.use_cases.attendance import AttendanceRegistry
from podium.application.use_cases.presentations import (
    PresentationLifecycle,
    PresentationQueryService,
)
from podium.application.use_cases.sweeps import (
    RunEventStatusSweepUseCase,
    RunVotingDeadlineSweepUseCase,
)
from podium.application.use_cases.votes import VoteLedger
from podium.infrastructure.persistence.repositories import (
    AttendanceRepository,
    EventRepository,
    PresentationRepository,
    VoteRepository,
)
from podium.infrastructure.scheduling import (
    build_event_status_sweep,
    build_voting_deadline_sweep,
)

Session = Annotated[AsyncSession, Depends(get_session)]


def _resolver(db: AsyncSession) -> PresentationResolver:
    return PresentationResolver(
        PresentationRepository(db), AttendanceRepository(db), VoteRepository(db)
    )


async def get_attendance_registry(db: Session) -> AttendanceRegistry:
    return AttendanceRegistry(AttendanceRepository(db), EventRepository(db))


async def get_vote_ledger(db: Session) -> VoteLedger:
    return VoteLedger(
        presentation_repo=PresentationRepository(db),
        event_repo=EventRepository(db),
        attendance_repo=AttendanceRepository(db),
        vote_repo=VoteRepository(db),
        resolver=_resolver(db),
    )


async def get_presentation_lifecycle(db: Session) -> PresentationLifecycle:
    return PresentationLifecycle(
        presentation_repo=PresentationRepository(db),
        event_repo=EventRepository(db),
        attendance_repo=AttendanceRepository(db),
        resolver=_resolver(db),
    )


async def get_presentation_queries(db: Session) -> PresentationQueryService:
    return PresentationQueryService(
        PresentationRepository(db), AttendanceRepository(db), VoteRepository(db)
    )


async def get_voting_deadline_sweep(db: Session) -> RunVotingDeadlineSweepUseCase:
    return build_voting_deadline_sweep(db)


async def get_event_status_sweep(db: Session) -> RunEventStatusSweepUseCase:
    return build_event_status_sweep(db)
