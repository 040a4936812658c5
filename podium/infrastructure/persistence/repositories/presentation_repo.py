"""Presentation repository. get_by_id_for_update takes a row lock (SELECT ... FOR UPDATE)."""

from __future__ import annotations

from enum import Enum
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from podium.application.dtos.presentation import PresentationResult
from podium.domain.enums import PresentationStatus
from podium.domain.value_objects.core import TalkDetails
from podium.infrastructure.persistence.models.presentation import Presentation

# Columns that update() may patch; identity and ownership are immutable.
_MUTABLE_COLUMNS = frozenset(
    {
        "title",
        "description",
        "speaker_name",
        "speaker_bio",
        "duration",
        "target_audience",
        "status",
        "admin_approved",
        "admin_approved_by",
        "recording_url",
    }
)


def _to_result(p: Presentation) -> PresentationResult:
    """Map Presentation ORM to PresentationResult DTO."""
    return PresentationResult(
        id=p.id,
        event_id=p.event_id,
        submitted_by=p.submitted_by,
        title=p.title,
        description=p.description,
        speaker_name=p.speaker_name,
        speaker_bio=p.speaker_bio,
        duration=p.duration,
        target_audience=p.target_audience,
        status=PresentationStatus(p.status),
        admin_approved=p.admin_approved,
        admin_approved_by=p.admin_approved_by,
        recording_url=p.recording_url,
        created_at=p.created_at,
        updated_at=p.updated_at,
    )


class PresentationRepository:
    """Presentation repository. Implements IPresentationRepository."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _get(self, presentation_id: str) -> Presentation | None:
        result = await self.db.execute(
            select(Presentation).where(Presentation.id == presentation_id)
        )
        return result.scalar_one_or_none()

    async def get_by_id(self, presentation_id: str) -> PresentationResult | None:
        presentation = await self._get(presentation_id)
        return _to_result(presentation) if presentation else None

    async def get_by_id_for_update(
        self, presentation_id: str
    ) -> PresentationResult | None:
        # populate_existing: the locked read must not reuse a stale identity-map row.
        stmt = (
            select(Presentation)
            .where(Presentation.id == presentation_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        presentation = result.scalar_one_or_none()
        return _to_result(presentation) if presentation else None

    async def create(
        self, event_id: str, submitted_by: str, details: TalkDetails
    ) -> PresentationResult:
        presentation = Presentation(
            event_id=event_id,
            submitted_by=submitted_by,
            title=details.title,
            description=details.description,
            speaker_name=details.speaker_name,
            speaker_bio=details.speaker_bio,
            duration=details.duration,
            target_audience=details.target_audience,
            status=PresentationStatus.PENDING.value,
            admin_approved=False,
        )
        self.db.add(presentation)
        await self.db.flush()
        await self.db.refresh(presentation)
        return _to_result(presentation)

    async def update(
        self, presentation_id: str, changes: dict[str, Any]
    ) -> PresentationResult | None:
        unknown = set(changes) - _MUTABLE_COLUMNS
        if unknown:
            raise ValueError(f"Cannot update presentation columns: {sorted(unknown)}")
        presentation = await self._get(presentation_id)
        if not presentation:
            return None
        for key, value in changes.items():
            setattr(presentation, key, value.value if isinstance(value, Enum) else value)
        await self.db.flush()
        await self.db.refresh(presentation)
        return _to_result(presentation)

    async def list_by_event(
        self, event_id: str, status: PresentationStatus | None = None
    ) -> list[PresentationResult]:
        stmt = select(Presentation).where(Presentation.event_id == event_id)
        if status is not None:
            stmt = stmt.where(Presentation.status == status.value)
        result = await self.db.execute(
            stmt.order_by(Presentation.created_at, Presentation.id)
        )
        return [_to_result(p) for p in result.scalars().all()]

    async def list_by_submitter(self, user_id: str) -> list[PresentationResult]:
        result = await self.db.execute(
            select(Presentation)
            .where(Presentation.submitted_by == user_id)
            .order_by(Presentation.created_at.desc(), Presentation.id)
        )
        return [_to_result(p) for p in result.scalars().all()]
