"""Attendance API for the current caller."""

from typing import Annotated

from fastapi import APIRouter, Depends

from podium.api.v1.dependencies import (
    get_attendance_registry,
    get_current_principal_optional,
)
from podium.application.dtos.principal import Principal
from podium.application.use_cases.attendance import AttendanceRegistry
from podium.schemas.attendance import AttendanceResponse

router = APIRouter()


@router.get("/mine", response_model=list[AttendanceResponse])
async def my_events(
    principal: Annotated[Principal | None, Depends(get_current_principal_optional)],
    registry: Annotated[AttendanceRegistry, Depends(get_attendance_registry)],
):
    """Return the caller's attendance rows; empty when anonymous."""
    rows = await registry.my_events(principal)
    return [AttendanceResponse.model_validate(a) for a in rows]
