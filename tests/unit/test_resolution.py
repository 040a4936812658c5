"""Resolution policy: quorum, majority and the admin gate."""

import pytest

from podium.domain.resolution import (
    ResolutionInput,
    ResolutionOutcome,
    evaluate_resolution,
    min_votes_required,
)
from podium.domain.value_objects.core import VoteTally


@pytest.mark.parametrize(
    ("attendees", "expected"),
    [(0, 0), (1, 1), (2, 1), (3, 2), (7, 4), (8, 4)],
)
def test_min_votes_required_is_half_rounded_up(attendees: int, expected: int) -> None:
    assert min_votes_required(attendees) == expected


def test_min_votes_required_rejects_negative() -> None:
    with pytest.raises(ValueError, match="negative"):
        min_votes_required(-1)


class TestSevenAttendees:
    """attendee_count=7 needs 4 votes with at least half approving."""

    def test_three_approvals_below_quorum_stay_pending(self) -> None:
        assert (
            evaluate_resolution(True, 7, VoteTally(approve=3))
            is ResolutionOutcome.PENDING
        )

    def test_four_approvals_approve(self) -> None:
        assert (
            evaluate_resolution(True, 7, VoteTally(approve=4))
            is ResolutionOutcome.APPROVED
        )

    def test_even_split_counts_as_majority(self) -> None:
        assert (
            evaluate_resolution(True, 7, VoteTally(approve=2, reject=2))
            is ResolutionOutcome.APPROVED
        )

    def test_minority_stays_pending_without_force(self) -> None:
        assert (
            evaluate_resolution(True, 7, VoteTally(approve=1, reject=3))
            is ResolutionOutcome.PENDING
        )

    def test_minority_is_rejected_when_forced(self) -> None:
        assert (
            evaluate_resolution(True, 7, VoteTally(approve=1, reject=3), force=True)
            is ResolutionOutcome.REJECTED
        )


def test_votes_alone_never_approve_without_admin() -> None:
    tally = VoteTally(approve=7)
    assert evaluate_resolution(False, 7, tally) is ResolutionOutcome.PENDING
    assert evaluate_resolution(False, 7, tally, force=True) is ResolutionOutcome.REJECTED


def test_forced_resolution_approves_when_conditions_hold() -> None:
    assert (
        evaluate_resolution(True, 2, VoteTally(approve=1), force=True)
        is ResolutionOutcome.APPROVED
    )


def test_no_attendees_and_no_votes_is_not_a_majority() -> None:
    """Quorum of 0 is met but an approval rate of 0 is below the threshold."""
    assert evaluate_resolution(True, 0, VoteTally()) is ResolutionOutcome.PENDING
    assert (
        evaluate_resolution(True, 0, VoteTally(), force=True)
        is ResolutionOutcome.REJECTED
    )


def test_resolution_input_exposes_quorum_and_majority() -> None:
    snapshot = ResolutionInput(
        admin_approved=True, attendee_count=5, tally=VoteTally(approve=2, reject=1)
    )
    assert snapshot.min_votes_required == 3
    assert snapshot.has_quorum
    assert snapshot.has_majority
