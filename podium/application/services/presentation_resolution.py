"""Apply the resolution policy to a locked, pending presentation.

Shared by every trigger: a vote cast, an admin approval and the voting
deadline sweep. The caller must hold the presentation row lock so the
attendee count, the tally and the status patch are read and written in
one transaction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from podium.application.dtos.notification import OutboundNotification
from podium.domain.enums import NotificationKind, PresentationStatus
from podium.domain.exceptions import ResourceNotFoundException
from podium.domain.resolution import ResolutionOutcome, evaluate_resolution
from podium.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from podium.application.dtos.presentation import PresentationResult
    from podium.application.interfaces.repositories import (
        IAttendanceRepository,
        IPresentationRepository,
        IVoteRepository,
    )

logger = get_logger(__name__)


def presentation_result_notification(
    presentation: PresentationResult,
) -> OutboundNotification:
    """Build the approved/rejected signal addressed to the submitter."""
    return OutboundNotification(
        kind=NotificationKind.PRESENTATION_RESULT,
        payload={
            "presentation_id": presentation.id,
            "event_id": presentation.event_id,
            "title": presentation.title,
            "status": presentation.status.value,
        },
        recipient_ids=(presentation.submitted_by,),
    )


@dataclass(frozen=True)
class ResolutionResult:
    """Presentation after the check and the notification to emit (None when still pending)."""

    presentation: PresentationResult
    outcome: ResolutionOutcome
    notification: OutboundNotification | None = None


class PresentationResolver:
    """Evaluate quorum + majority + admin gate and persist terminal outcomes."""

    def __init__(
        self,
        presentation_repo: IPresentationRepository,
        attendance_repo: IAttendanceRepository,
        vote_repo: IVoteRepository,
    ) -> None:
        self.presentation_repo = presentation_repo
        self.attendance_repo = attendance_repo
        self.vote_repo = vote_repo

    async def resolve(
        self, presentation: PresentationResult, *, force: bool = False
    ) -> ResolutionResult:
        """Resolve presentation if the policy allows it.

        Non-pending presentations are returned untouched. With force (voting
        deadline elapsed) a pending presentation always ends approved or
        rejected; otherwise it is approved or stays pending.
        """
        if not presentation.is_pending:
            return ResolutionResult(
                presentation=presentation,
                outcome=ResolutionOutcome(presentation.status.value),
            )

        attendee_count = await self.attendance_repo.count_by_event(
            presentation.event_id
        )
        tally = await self.vote_repo.tally(presentation.id)
        outcome = evaluate_resolution(
            presentation.admin_approved, attendee_count, tally, force=force
        )
        if outcome is ResolutionOutcome.PENDING:
            return ResolutionResult(presentation=presentation, outcome=outcome)

        updated = await self.presentation_repo.update(
            presentation.id, {"status": PresentationStatus(outcome.value)}
        )
        if updated is None:
            raise ResourceNotFoundException("presentation", presentation.id)
        logger.info(
            "Presentation %s resolved %s (approve=%s reject=%s attendees=%s forced=%s)",
            presentation.id,
            outcome.value,
            tally.approve,
            tally.reject,
            attendee_count,
            force,
        )
        return ResolutionResult(
            presentation=updated,
            outcome=outcome,
            notification=presentation_result_notification(updated),
        )
