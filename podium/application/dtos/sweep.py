"""DTOs for periodic sweeps (voting deadlines, event statuses)."""

from dataclasses import dataclass, field

from podium.application.dtos.notification import OutboundNotification


@dataclass(frozen=True)
class VotingDeadlineSweepResult:
    """Result of one voting deadline sweep."""

    events_processed: int
    processed_count: int
    """Presentations force-resolved in this run."""

    approved_count: int
    rejected_count: int
    error_count: int = 0
    error_presentation_ids: tuple[str, ...] = ()
    notifications: tuple[OutboundNotification, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class EventStatusSweepResult:
    """Result of one event status sweep."""

    updated_count: int
    updated_event_ids: tuple[str, ...] = ()
