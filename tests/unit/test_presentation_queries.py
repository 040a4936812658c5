"""PresentationQueryService read models."""

import pytest

from podium.application.dtos.principal import Principal
from podium.domain.enums import PresentationStatus, VoteChoice
from podium.domain.exceptions import ResourceNotFoundException
from tests.fakes import Engine


async def test_detail_reports_tally_and_quorum(engine: Engine) -> None:
    event = engine.store.add_event()
    for user_id in ("a1", "a2", "a3", "a4", "a5"):
        engine.store.add_attendee(event.id, user_id)
    presentation = engine.store.add_presentation(event.id)
    engine.store.add_vote(presentation.id, "a1", VoteChoice.APPROVE)
    engine.store.add_vote(presentation.id, "a2", VoteChoice.REJECT)

    detail = await engine.queries.get_detail(presentation.id)

    assert detail.presentation.id == presentation.id
    assert (detail.tally.approve, detail.tally.reject) == (1, 1)
    assert detail.attendee_count == 5
    assert detail.min_votes_required == 3


async def test_detail_of_missing_presentation(engine: Engine) -> None:
    with pytest.raises(ResourceNotFoundException):
        await engine.queries.get_detail("missing")


async def test_event_list_includes_my_vote(engine: Engine, member: Principal) -> None:
    event = engine.store.add_event()
    voted = engine.store.add_presentation(event.id)
    untouched = engine.store.add_presentation(event.id)
    engine.store.add_vote(voted.id, member.id, VoteChoice.REJECT)

    items = {i.presentation.id: i for i in await engine.queries.list_by_event(event.id, member)}

    assert items[voted.id].user_vote is VoteChoice.REJECT
    assert items[voted.id].tally.reject == 1
    assert items[untouched.id].user_vote is None
    assert items[untouched.id].tally.total == 0


async def test_event_list_for_anonymous_and_status_filter(engine: Engine) -> None:
    event = engine.store.add_event()
    engine.store.add_presentation(event.id)
    approved = engine.store.add_presentation(
        event.id, status=PresentationStatus.APPROVED
    )

    items = await engine.queries.list_by_event(
        event.id, status=PresentationStatus.APPROVED
    )

    assert [i.presentation.id for i in items] == [approved.id]
    assert items[0].user_vote is None


async def test_empty_event_list(engine: Engine) -> None:
    event = engine.store.add_event()
    assert await engine.queries.list_by_event(event.id) == []


async def test_list_mine(engine: Engine, member: Principal) -> None:
    event = engine.store.add_event()
    mine = engine.store.add_presentation(event.id, submitted_by=member.id)
    engine.store.add_presentation(event.id, submitted_by="someone-else")

    assert [p.id for p in await engine.queries.list_mine(member)] == [mine.id]
