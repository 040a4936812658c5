"""Sweep wiring: build the sweep use cases on a session and run them on a timer.

Used by the lifespan background loops, the POST /sweeps/* triggers and
scripts/run_voting_deadlines.py. Notifications are dispatched only after the
sweep transaction commits.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from podium.application.services.presentation_resolution import PresentationResolver
from podium.application.use_cases.sweeps import (
    RunEventStatusSweepUseCase,
    RunVotingDeadlineSweepUseCase,
)
from podium.infrastructure.persistence import database
from podium.infrastructure.persistence.repositories import (
    AttendanceRepository,
    EventRepository,
    PresentationRepository,
    VoteRepository,
)
from podium.shared.telemetry.logging import get_logger
from podium.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from podium.application.dtos.sweep import (
        EventStatusSweepResult,
        VotingDeadlineSweepResult,
    )
    from podium.application.interfaces.services import Clock
    from podium.infrastructure.services.notification_dispatcher import (
        NotificationDispatcher,
    )

logger = get_logger(__name__)


def build_voting_deadline_sweep(
    session: AsyncSession, clock: Clock = utc_now
) -> RunVotingDeadlineSweepUseCase:
    """Wire the voting deadline sweep on session; each presentation gets a savepoint."""
    presentation_repo = PresentationRepository(session)
    resolver = PresentationResolver(
        presentation_repo, AttendanceRepository(session), VoteRepository(session)
    )
    return RunVotingDeadlineSweepUseCase(
        event_repo=EventRepository(session),
        presentation_repo=presentation_repo,
        resolver=resolver,
        savepoint=session.begin_nested,
        clock=clock,
    )


def build_event_status_sweep(
    session: AsyncSession, clock: Clock = utc_now
) -> RunEventStatusSweepUseCase:
    return RunEventStatusSweepUseCase(EventRepository(session), clock=clock)


async def run_voting_deadline_sweep(
    dispatcher: NotificationDispatcher,
) -> VotingDeadlineSweepResult:
    """Run one voting deadline sweep in its own transaction, then dispatch results."""
    async with database.session_scope() as session:
        result = await build_voting_deadline_sweep(session).run()
    await dispatcher.dispatch(result.notifications)
    return result


async def run_event_status_sweep() -> EventStatusSweepResult:
    """Run one event status sweep in its own transaction."""
    async with database.session_scope() as session:
        return await build_event_status_sweep(session).run()


async def run_periodically(
    name: str,
    interval_seconds: float,
    job: Callable[[], Awaitable[object]],
) -> None:
    """Call job every interval_seconds until cancelled.

    A failing run is logged and the loop keeps going. Call as a background
    task from lifespan; cancelling the task stops the loop.
    """
    logger.info("Periodic %s started (every %ss)", name, interval_seconds)
    try:
        while True:
            try:
                await job()
            except Exception:
                logger.exception("Periodic %s run failed", name)
            await asyncio.sleep(interval_seconds)
    except asyncio.CancelledError:
        logger.info("Periodic %s cancelled", name)
        raise
