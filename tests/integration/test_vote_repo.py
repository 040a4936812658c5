"""Vote repository integration tests. Require Postgres; session is rolled back after each test."""

import pytest

from podium.domain.enums import VoteChoice
from podium.domain.value_objects.core import TalkDetails, VoteTally
from podium.infrastructure.persistence.repositories import (
    PresentationRepository,
    VoteRepository,
)

TALK = TalkDetails(
    title="Async SQLAlchemy in practice",
    description="Sessions, savepoints and row locks.",
    speaker_name="Ada",
    duration=30,
    target_audience="Backend developers",
)


async def _presentation_id(db_session, add_event_row) -> str:
    event = await add_event_row()
    presentation = await PresentationRepository(db_session).create(
        event.id, "speaker", TALK
    )
    return presentation.id


@pytest.mark.requires_db
async def test_flip_updates_the_existing_row(db_session, add_event_row) -> None:
    """A second upsert by the same user keeps one row, its id and created_at."""
    presentation_id = await _presentation_id(db_session, add_event_row)
    repo = VoteRepository(db_session)

    first = await repo.upsert(presentation_id, "user-1", VoteChoice.APPROVE)
    flipped = await repo.upsert(presentation_id, "user-1", VoteChoice.REJECT)

    assert flipped.id == first.id
    assert flipped.created_at == first.created_at
    assert flipped.vote is VoteChoice.REJECT
    assert await repo.tally(presentation_id) == VoteTally(approve=0, reject=1)


@pytest.mark.requires_db
async def test_tally_counts_each_choice(db_session, add_event_row) -> None:
    """Tally groups votes by choice; a presentation without votes tallies zero."""
    presentation_id = await _presentation_id(db_session, add_event_row)
    other_id = await _presentation_id(db_session, add_event_row)
    repo = VoteRepository(db_session)
    await repo.upsert(presentation_id, "user-1", VoteChoice.APPROVE)
    await repo.upsert(presentation_id, "user-2", VoteChoice.APPROVE)
    await repo.upsert(presentation_id, "user-3", VoteChoice.REJECT)

    tally = await repo.tally(presentation_id)

    assert (tally.approve, tally.reject, tally.total) == (2, 1, 3)
    assert await repo.tally(other_id) == VoteTally()
    assert await repo.tallies([presentation_id, other_id]) == {
        presentation_id: VoteTally(approve=2, reject=1),
        other_id: VoteTally(),
    }


@pytest.mark.requires_db
async def test_get_choices_and_delete(db_session, add_event_row) -> None:
    """Per-user lookups follow the stored vote; delete reports whether a row went."""
    presentation_id = await _presentation_id(db_session, add_event_row)
    repo = VoteRepository(db_session)
    await repo.upsert(presentation_id, "user-1", VoteChoice.APPROVE)

    vote = await repo.get(presentation_id, "user-1")
    assert vote is not None
    assert vote.vote is VoteChoice.APPROVE
    assert await repo.choices_by_user([presentation_id], "user-1") == {
        presentation_id: VoteChoice.APPROVE
    }

    assert await repo.delete(presentation_id, "user-1") is True
    assert await repo.delete(presentation_id, "user-1") is False
    assert await repo.get(presentation_id, "user-1") is None
