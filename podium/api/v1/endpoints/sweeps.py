"""Scheduler triggers: run the voting deadline and event status sweeps on demand."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from podium.api.v1.dependencies import (
    UnitOfWork,
    get_event_status_sweep,
    get_unit_of_work,
    get_voting_deadline_sweep,
    require_cron_secret,
)
from podium.application.use_cases.sweeps import (
    RunEventStatusSweepUseCase,
    RunVotingDeadlineSweepUseCase,
)
from podium.core.limiter import limit_sweeps
from podium.schemas.sweep import EventStatusSweepResponse, VotingDeadlineSweepResponse

router = APIRouter(dependencies=[Depends(require_cron_secret)])


@router.post("/voting-deadlines", response_model=VotingDeadlineSweepResponse)
@limit_sweeps
async def run_voting_deadline_sweep(
    request: Request,
    sweep: Annotated[
        RunVotingDeadlineSweepUseCase, Depends(get_voting_deadline_sweep)
    ],
    uow: Annotated[UnitOfWork, Depends(get_unit_of_work)],
):
    """Force-resolve pending presentations of upcoming events past their voting deadline."""
    result = await sweep.run()
    uow.notifications.extend(result.notifications)
    return VotingDeadlineSweepResponse.model_validate(result)


@router.post("/event-statuses", response_model=EventStatusSweepResponse)
@limit_sweeps
async def run_event_status_sweep(
    request: Request,
    sweep: Annotated[RunEventStatusSweepUseCase, Depends(get_event_status_sweep)],
):
    """Move non-cancelled events to upcoming, ongoing or past based on the current time."""
    result = await sweep.run()
    return EventStatusSweepResponse.model_validate(result)
