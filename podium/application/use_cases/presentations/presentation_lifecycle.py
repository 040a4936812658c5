"""Presentation lifecycle: submit, edit, admin gate and recording URL.

States: pending -> approved | rejected. Approval needs two independent
gates: admin sign-off and attendee voting under quorum + majority.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from podium.application.dtos.notification import OutboundNotification, Outcome
from podium.application.services.authorization import (
    ensure_admin,
    ensure_moderator,
    ensure_owner,
)
from podium.application.services.presentation_resolution import (
    presentation_result_notification,
)
from podium.domain.enums import EventStatus, NotificationKind, PresentationStatus
from podium.domain.exceptions import (
    InvalidStateException,
    ResourceNotFoundException,
    ValidationException,
)
from podium.domain.value_objects.core import RecordingUrl, TalkDetails
from podium.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from podium.application.dtos.presentation import (
        PresentationCreate,
        PresentationResult,
        PresentationUpdate,
    )
    from podium.application.dtos.principal import Principal
    from podium.application.interfaces.repositories import (
        IAttendanceRepository,
        IEventRepository,
        IPresentationRepository,
    )
    from podium.application.services.presentation_resolution import (
        PresentationResolver,
    )

logger = get_logger(__name__)

RESOURCE = "presentation"


def _talk_details(**fields: object) -> TalkDetails:
    try:
        return TalkDetails(**fields)  # type: ignore[arg-type]
    except ValueError as e:
        raise ValidationException(str(e)) from e


class PresentationLifecycle:
    """Mutations on presentations. Every read-then-write locks the presentation row."""

    def __init__(
        self,
        presentation_repo: IPresentationRepository,
        event_repo: IEventRepository,
        attendance_repo: IAttendanceRepository,
        resolver: PresentationResolver,
    ) -> None:
        self.presentation_repo = presentation_repo
        self.event_repo = event_repo
        self.attendance_repo = attendance_repo
        self.resolver = resolver

    async def _lock(self, presentation_id: str) -> PresentationResult:
        presentation = await self.presentation_repo.get_by_id_for_update(
            presentation_id
        )
        if not presentation:
            raise ResourceNotFoundException(RESOURCE, presentation_id)
        return presentation

    async def _patch(
        self, presentation_id: str, changes: dict[str, object]
    ) -> PresentationResult:
        updated = await self.presentation_repo.update(presentation_id, changes)
        if not updated:
            raise ResourceNotFoundException(RESOURCE, presentation_id)
        return updated

    @staticmethod
    def _ensure_pending(presentation: PresentationResult, action: str) -> None:
        if not presentation.is_pending:
            raise InvalidStateException(
                f"Can only {action} pending presentations",
                current_status=presentation.status.value,
            )

    async def submit(
        self, event_id: str, principal: Principal, data: PresentationCreate
    ) -> Outcome[PresentationResult]:
        """Submit a talk proposal to an upcoming event.

        Creates a pending, not admin-approved presentation and notifies all
        current attendees of the event.

        Raises:
            ResourceNotFoundException: Event does not exist.
            InvalidStateException: Event is not upcoming.
            ValidationException: Blank required field or non-positive duration.
        """
        event = await self.event_repo.get_by_id(event_id)
        if not event:
            raise ResourceNotFoundException("event", event_id)
        if event.status is not EventStatus.UPCOMING:
            raise InvalidStateException(
                "Can only submit presentations to upcoming events",
                current_status=event.status.value,
            )
        details = _talk_details(**asdict(data))
        presentation = await self.presentation_repo.create(
            event_id, principal.id, details
        )
        attendees = await self.attendance_repo.list_by_event(event_id)
        logger.info(
            "Presentation %s submitted to event %s by %s",
            presentation.id,
            event_id,
            principal.id,
        )
        notification = OutboundNotification(
            kind=NotificationKind.PRESENTATION_SUBMITTED,
            payload={
                "presentation_id": presentation.id,
                "event_id": event.id,
                "event_title": event.title,
                "title": presentation.title,
                "speaker_name": presentation.speaker_name,
            },
            recipient_ids=tuple(a.user_id for a in attendees),
        )
        return Outcome(value=presentation, notifications=(notification,))

    async def update(
        self,
        presentation_id: str,
        data: PresentationUpdate,
        principal: Principal,
    ) -> PresentationResult:
        """Patch talk fields of the caller's own pending presentation.

        Raises:
            ResourceNotFoundException: Presentation does not exist.
            AuthorizationException: Caller is not the submitter.
            InvalidStateException: Presentation is not pending.
            ValidationException: A provided field is blank or duration is not positive.
        """
        presentation = await self._lock(presentation_id)
        ensure_owner(principal, presentation.submitted_by, RESOURCE, "update")
        self._ensure_pending(presentation, "edit")
        changes = data.changes()
        if not changes:
            return presentation
        _talk_details(
            title=changes.get("title", presentation.title),
            description=changes.get("description", presentation.description),
            speaker_name=changes.get("speaker_name", presentation.speaker_name),
            duration=changes.get("duration", presentation.duration),
            target_audience=changes.get(
                "target_audience", presentation.target_audience
            ),
            speaker_bio=changes.get("speaker_bio", presentation.speaker_bio),
        )
        return await self._patch(presentation_id, changes)

    async def admin_approve(
        self, presentation_id: str, principal: Principal
    ) -> Outcome[PresentationResult]:
        """Record admin sign-off, then run the resolution check.

        Raises:
            AuthorizationException: Caller is not an admin.
            ResourceNotFoundException: Presentation does not exist.
            InvalidStateException: Not pending, or already admin-approved.
        """
        ensure_admin(principal, RESOURCE, "approve")
        presentation = await self._lock(presentation_id)
        self._ensure_pending(presentation, "approve")
        if presentation.admin_approved:
            raise InvalidStateException(
                "Presentation is already admin-approved",
                current_status=presentation.status.value,
                admin_approved_by=presentation.admin_approved_by,
            )
        approved = await self._patch(
            presentation_id,
            {"admin_approved": True, "admin_approved_by": principal.id},
        )
        logger.info("Presentation %s admin-approved by %s", presentation_id, principal.id)
        resolution = await self.resolver.resolve(approved)
        notifications = (
            (resolution.notification,) if resolution.notification else ()
        )
        return Outcome(value=resolution.presentation, notifications=notifications)

    async def admin_reject(
        self, presentation_id: str, principal: Principal
    ) -> Outcome[PresentationResult]:
        """Reject a pending presentation regardless of votes.

        Raises:
            AuthorizationException: Caller is not an admin.
            ResourceNotFoundException: Presentation does not exist.
            InvalidStateException: Presentation is not pending.
        """
        ensure_admin(principal, RESOURCE, "reject")
        presentation = await self._lock(presentation_id)
        self._ensure_pending(presentation, "reject")
        rejected = await self._patch(
            presentation_id, {"status": PresentationStatus.REJECTED}
        )
        logger.info("Presentation %s rejected by admin %s", presentation_id, principal.id)
        return Outcome(
            value=rejected,
            notifications=(presentation_result_notification(rejected),),
        )

    async def update_recording_url(
        self,
        presentation_id: str,
        url: str | None,
        principal: Principal,
    ) -> PresentationResult:
        """Set or clear (None or blank) the recording link. Allowed in any status.

        Raises:
            AuthorizationException: Caller is neither moderator nor admin.
            ResourceNotFoundException: Presentation does not exist.
            ValidationException: URL is not a YouTube or Vimeo link.
        """
        ensure_moderator(principal, RESOURCE, "update_recording_url")
        await self._lock(presentation_id)
        value: str | None = None
        if url and url.strip():
            try:
                value = RecordingUrl(url.strip()).value
            except ValueError as e:
                raise ValidationException(str(e), field="recording_url") from e
        return await self._patch(presentation_id, {"recording_url": value})
