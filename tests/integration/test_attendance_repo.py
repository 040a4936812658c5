"""Attendance repository integration tests. Require Postgres; session is rolled back after each test."""

import pytest

from podium.domain.exceptions import AlreadyRegisteredException
from podium.infrastructure.persistence.repositories import AttendanceRepository


@pytest.mark.requires_db
async def test_create_and_get(db_session, add_event_row) -> None:
    """Register a user then look the row up by (event, user)."""
    event = await add_event_row()
    repo = AttendanceRepository(db_session)

    created = await repo.create(event.id, "user-1")

    assert created.id
    assert created.created_at is not None
    found = await repo.get(event.id, "user-1")
    assert found is not None
    assert found.id == created.id
    assert await repo.get(event.id, "user-2") is None


@pytest.mark.requires_db
async def test_duplicate_registration_raises_and_keeps_session_usable(
    db_session, add_event_row
) -> None:
    """The unique (event, user) constraint surfaces as AlreadyRegisteredException."""
    event = await add_event_row()
    repo = AttendanceRepository(db_session)
    await repo.create(event.id, "user-1")

    with pytest.raises(AlreadyRegisteredException):
        await repo.create(event.id, "user-1")

    assert await repo.count_by_event(event.id) == 1
    await repo.create(event.id, "user-2")
    assert await repo.count_by_event(event.id) == 2


@pytest.mark.requires_db
async def test_list_by_event_and_by_user(db_session, add_event_row) -> None:
    """Listings filter by event and by user."""
    first = await add_event_row(title="First")
    second = await add_event_row(title="Second")
    repo = AttendanceRepository(db_session)
    await repo.create(first.id, "user-1")
    await repo.create(first.id, "user-2")
    await repo.create(second.id, "user-1")

    by_event = await repo.list_by_event(first.id)
    assert sorted(a.user_id for a in by_event) == ["user-1", "user-2"]
    by_user = await repo.list_by_user("user-1")
    assert sorted(a.event_id for a in by_user) == sorted([first.id, second.id])


@pytest.mark.requires_db
async def test_delete(db_session, add_event_row) -> None:
    """Delete by attendance id; a second delete finds nothing."""
    event = await add_event_row()
    repo = AttendanceRepository(db_session)
    created = await repo.create(event.id, "user-1")

    assert await repo.delete(created.id) is True
    assert await repo.delete(created.id) is False
    assert await repo.count_by_event(event.id) == 0
