"""Presentation API: thin routes delegating to the lifecycle, ledger and queries."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from podium.api.v1.dependencies import (
    UnitOfWork,
    get_current_principal,
    get_current_principal_optional,
    get_presentation_lifecycle,
    get_presentation_queries,
    get_unit_of_work,
    get_vote_ledger,
)
from podium.application.dtos.presentation import PresentationUpdate
from podium.application.dtos.principal import Principal
from podium.application.use_cases.presentations import (
    PresentationLifecycle,
    PresentationQueryService,
)
from podium.application.use_cases.votes import VoteLedger
from podium.core.limiter import limit_votes, limit_writes
from podium.schemas.presentation import (
    PresentationDetailResponse,
    PresentationResponse,
    PresentationUpdateRequest,
    RecordingUrlRequest,
)
from podium.schemas.vote import VoteCastRequest, VoteSummaryResponse, VoteTallyResponse

router = APIRouter()


@router.get("/mine", response_model=list[PresentationResponse])
async def list_my_presentations(
    principal: Annotated[Principal, Depends(get_current_principal)],
    queries: Annotated[PresentationQueryService, Depends(get_presentation_queries)],
):
    """Presentations submitted by the caller (newest first)."""
    return [
        PresentationResponse.model_validate(p) for p in await queries.list_mine(principal)
    ]


@router.get("/{presentation_id}", response_model=PresentationDetailResponse)
async def get_presentation(
    presentation_id: str,
    queries: Annotated[PresentationQueryService, Depends(get_presentation_queries)],
):
    """Presentation with its tally, attendee count and the votes needed for quorum."""
    detail = await queries.get_detail(presentation_id)
    return PresentationDetailResponse.model_validate(detail)


@router.patch("/{presentation_id}", response_model=PresentationResponse)
@limit_writes
async def update_presentation(
    request: Request,
    presentation_id: str,
    body: PresentationUpdateRequest,
    principal: Annotated[Principal, Depends(get_current_principal)],
    lifecycle: Annotated[PresentationLifecycle, Depends(get_presentation_lifecycle)],
):
    """Edit talk fields of the caller's own pending presentation."""
    updated = await lifecycle.update(
        presentation_id,
        PresentationUpdate(**body.model_dump(exclude_unset=True)),
        principal,
    )
    return PresentationResponse.model_validate(updated)


@router.post("/{presentation_id}/approve", response_model=PresentationResponse)
@limit_writes
async def approve_presentation(
    request: Request,
    presentation_id: str,
    principal: Annotated[Principal, Depends(get_current_principal)],
    lifecycle: Annotated[PresentationLifecycle, Depends(get_presentation_lifecycle)],
    uow: Annotated[UnitOfWork, Depends(get_unit_of_work)],
):
    """Admin sign-off; approves immediately when quorum and majority already hold."""
    presentation = uow.collect(await lifecycle.admin_approve(presentation_id, principal))
    return PresentationResponse.model_validate(presentation)


@router.post("/{presentation_id}/reject", response_model=PresentationResponse)
@limit_writes
async def reject_presentation(
    request: Request,
    presentation_id: str,
    principal: Annotated[Principal, Depends(get_current_principal)],
    lifecycle: Annotated[PresentationLifecycle, Depends(get_presentation_lifecycle)],
    uow: Annotated[UnitOfWork, Depends(get_unit_of_work)],
):
    """Admin rejection of a pending presentation, regardless of votes."""
    presentation = uow.collect(await lifecycle.admin_reject(presentation_id, principal))
    return PresentationResponse.model_validate(presentation)


@router.put("/{presentation_id}/recording-url", response_model=PresentationResponse)
@limit_writes
async def update_recording_url(
    request: Request,
    presentation_id: str,
    body: RecordingUrlRequest,
    principal: Annotated[Principal, Depends(get_current_principal)],
    lifecycle: Annotated[PresentationLifecycle, Depends(get_presentation_lifecycle)],
):
    """Set (YouTube or Vimeo) or clear (null) the recording link. Moderators and admins."""
    updated = await lifecycle.update_recording_url(
        presentation_id, body.recording_url, principal
    )
    return PresentationResponse.model_validate(updated)


@router.put("/{presentation_id}/vote", response_model=PresentationResponse)
@limit_votes
async def cast_vote(
    request: Request,
    presentation_id: str,
    body: VoteCastRequest,
    principal: Annotated[Principal, Depends(get_current_principal)],
    ledger: Annotated[VoteLedger, Depends(get_vote_ledger)],
    uow: Annotated[UnitOfWork, Depends(get_unit_of_work)],
):
    """Cast or change the caller's vote; returns the presentation after the resolution check."""
    presentation = uow.collect(await ledger.cast(presentation_id, principal, body.vote))
    return PresentationResponse.model_validate(presentation)


@router.delete("/{presentation_id}/vote", response_model=PresentationResponse)
@limit_votes
async def retract_vote(
    request: Request,
    presentation_id: str,
    principal: Annotated[Principal, Depends(get_current_principal)],
    ledger: Annotated[VoteLedger, Depends(get_vote_ledger)],
):
    """Retract the caller's vote while voting is open."""
    presentation = await ledger.retract(presentation_id, principal)
    return PresentationResponse.model_validate(presentation)


@router.get("/{presentation_id}/votes", response_model=VoteSummaryResponse)
async def get_votes(
    presentation_id: str,
    principal: Annotated[Principal | None, Depends(get_current_principal_optional)],
    ledger: Annotated[VoteLedger, Depends(get_vote_ledger)],
):
    """Tally for the presentation and the caller's own vote (None when anonymous)."""
    tally = await ledger.tally(presentation_id)
    return VoteSummaryResponse(
        presentation_id=presentation_id,
        tally=VoteTallyResponse.model_validate(tally),
        user_vote=await ledger.my_vote(presentation_id, principal),
    )
