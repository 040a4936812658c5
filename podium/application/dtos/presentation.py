"""DTOs for presentations (commands and read models)."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any

from podium.domain.enums import PresentationStatus, VoteChoice
from podium.domain.value_objects.core import VoteTally


@dataclass(frozen=True)
class PresentationCreate:
    """Talk fields supplied at submission."""

    title: str
    description: str
    speaker_name: str
    duration: int
    target_audience: str
    speaker_bio: str | None = None


@dataclass(frozen=True)
class PresentationUpdate:
    """Owner edit; None means "leave unchanged"."""

    title: str | None = None
    description: str | None = None
    speaker_name: str | None = None
    speaker_bio: str | None = None
    duration: int | None = None
    target_audience: str | None = None

    def changes(self) -> dict[str, Any]:
        """Return only the provided fields."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass(frozen=True)
class PresentationResult:
    """Presentation read-model (result of get_by_id, create, patch)."""

    id: str
    event_id: str
    submitted_by: str
    title: str
    description: str
    speaker_name: str
    speaker_bio: str | None
    duration: int
    target_audience: str
    status: PresentationStatus
    admin_approved: bool
    admin_approved_by: str | None
    recording_url: str | None
    created_at: datetime
    updated_at: datetime

    @property
    def is_pending(self) -> bool:
        return self.status is PresentationStatus.PENDING


@dataclass(frozen=True)
class PresentationDetail:
    """Presentation with its tally and the quorum it is measured against."""

    presentation: PresentationResult
    tally: VoteTally
    attendee_count: int
    min_votes_required: int


@dataclass(frozen=True)
class PresentationWithVotes:
    """List item: presentation, tally and the caller's own vote (None if anonymous or not voted)."""

    presentation: PresentationResult
    tally: VoteTally
    user_vote: VoteChoice | None
