"""Presentation resolution policy (quorum + majority + admin gate).

One pure function decides the outcome for every trigger: a vote cast, an
admin approval, and the voting deadline sweep. Only the forced (deadline)
path may reject; the regular check either approves or leaves the
presentation pending.
"""

from dataclasses import dataclass
from enum import Enum

from podium.domain.value_objects.core import VoteTally

APPROVAL_THRESHOLD = 0.5


class ResolutionOutcome(str, Enum):
    """Result of evaluating a pending presentation."""

    APPROVED = "approved"
    PENDING = "pending"
    REJECTED = "rejected"


def min_votes_required(attendee_count: int) -> int:
    """Return the quorum for an event: ceil(attendee_count / 2)."""
    if attendee_count < 0:
        raise ValueError("attendee_count cannot be negative")
    return (attendee_count + 1) // 2


@dataclass(frozen=True)
class ResolutionInput:
    """Snapshot the policy is evaluated against (read inside one transaction)."""

    admin_approved: bool
    attendee_count: int
    tally: VoteTally

    @property
    def min_votes_required(self) -> int:
        return min_votes_required(self.attendee_count)

    @property
    def has_quorum(self) -> bool:
        return self.tally.total >= self.min_votes_required

    @property
    def has_majority(self) -> bool:
        # Exactly 50% counts as approval.
        return self.tally.approval_rate >= APPROVAL_THRESHOLD


def evaluate_resolution(
    admin_approved: bool,
    attendee_count: int,
    tally: VoteTally,
    *,
    force: bool = False,
) -> ResolutionOutcome:
    """Decide a pending presentation's outcome.

    Approved when admin_approved, total >= ceil(attendee_count / 2) and
    approve/total >= 0.5. Otherwise PENDING, or REJECTED when force is set
    (voting deadline elapsed).

    Args:
        admin_approved: Whether an admin has signed off.
        attendee_count: Current number of attendees of the event.
        tally: Current vote tally for the presentation.
        force: Deadline path; turns "not yet" into a final rejection.

    Returns:
        The resolution outcome.
    """
    snapshot = ResolutionInput(
        admin_approved=admin_approved,
        attendee_count=attendee_count,
        tally=tally,
    )
    if snapshot.admin_approved and snapshot.has_quorum and snapshot.has_majority:
        return ResolutionOutcome.APPROVED
    return ResolutionOutcome.REJECTED if force else ResolutionOutcome.PENDING
