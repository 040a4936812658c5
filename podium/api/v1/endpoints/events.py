"""Event-scoped API: attendance and presentation submission/listing."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from podium.api.v1.dependencies import (
    UnitOfWork,
    get_attendance_registry,
    get_current_principal,
    get_current_principal_optional,
    get_presentation_lifecycle,
    get_presentation_queries,
    get_unit_of_work,
)
from podium.application.dtos.presentation import PresentationCreate
from podium.application.dtos.principal import Principal
from podium.application.use_cases.attendance import AttendanceRegistry
from podium.application.use_cases.presentations import (
    PresentationLifecycle,
    PresentationQueryService,
)
from podium.core.limiter import limit_writes
from podium.domain.enums import PresentationStatus
from podium.schemas.attendance import (
    AttendanceResponse,
    AttendanceStatusResponse,
    UnregisterResponse,
)
from podium.schemas.presentation import (
    PresentationCreateRequest,
    PresentationListItem,
    PresentationResponse,
)

router = APIRouter()


@router.post(
    "/{event_id}/attendance", response_model=AttendanceResponse, status_code=201
)
@limit_writes
async def register_attendance(
    request: Request,
    event_id: str,
    principal: Annotated[Principal, Depends(get_current_principal)],
    registry: Annotated[AttendanceRegistry, Depends(get_attendance_registry)],
    uow: Annotated[UnitOfWork, Depends(get_unit_of_work)],
):
    """Register the caller for the event; the event creator is notified."""
    attendance = uow.collect(await registry.register(event_id, principal))
    return AttendanceResponse.model_validate(attendance)


@router.delete("/{event_id}/attendance", response_model=UnregisterResponse)
@limit_writes
async def unregister_attendance(
    request: Request,
    event_id: str,
    principal: Annotated[Principal, Depends(get_current_principal)],
    registry: Annotated[AttendanceRegistry, Depends(get_attendance_registry)],
):
    """Remove the caller's attendance. Votes already cast are kept."""
    return UnregisterResponse(id=await registry.unregister(event_id, principal))


@router.get("/{event_id}/attendance", response_model=AttendanceStatusResponse)
async def get_attendance_status(
    event_id: str,
    principal: Annotated[Principal | None, Depends(get_current_principal_optional)],
    registry: Annotated[AttendanceRegistry, Depends(get_attendance_registry)],
):
    """Return whether the caller attends (False when anonymous) and the attendee count."""
    status = await registry.status(event_id, principal)
    return AttendanceStatusResponse.model_validate(status)


@router.get("/{event_id}/attendees", response_model=list[AttendanceResponse])
async def list_attendees(
    event_id: str,
    registry: Annotated[AttendanceRegistry, Depends(get_attendance_registry)],
):
    """List attendance rows of the event (oldest first)."""
    attendees = await registry.list_attendees(event_id)
    return [AttendanceResponse.model_validate(a) for a in attendees]


@router.post(
    "/{event_id}/presentations", response_model=PresentationResponse, status_code=201
)
@limit_writes
async def submit_presentation(
    request: Request,
    event_id: str,
    body: PresentationCreateRequest,
    principal: Annotated[Principal, Depends(get_current_principal)],
    lifecycle: Annotated[PresentationLifecycle, Depends(get_presentation_lifecycle)],
    uow: Annotated[UnitOfWork, Depends(get_unit_of_work)],
):
    """Submit a talk proposal to an upcoming event; attendees are notified."""
    presentation = uow.collect(
        await lifecycle.submit(
            event_id, principal, PresentationCreate(**body.model_dump())
        )
    )
    return PresentationResponse.model_validate(presentation)


@router.get(
    "/{event_id}/presentations", response_model=list[PresentationListItem]
)
async def list_event_presentations(
    event_id: str,
    principal: Annotated[Principal | None, Depends(get_current_principal_optional)],
    queries: Annotated[PresentationQueryService, Depends(get_presentation_queries)],
    status: Annotated[
        PresentationStatus | None,
        Query(description="pending for voting, approved for the programme"),
    ] = None,
):
    """List event presentations with tallies and the caller's own vote."""
    items = await queries.list_by_event(event_id, principal, status=status)
    return [PresentationListItem.model_validate(item) for item in items]
