"""Attendance endpoints over in-memory use cases."""

from httpx import AsyncClient

from podium.application.dtos.principal import Principal
from podium.domain.enums import NotificationKind
from tests.fakes import Engine, RecordingSink, bearer


async def test_register_requires_authentication(
    client: AsyncClient, engine: Engine
) -> None:
    event = engine.store.add_event()

    response = await client.post(f"/api/v1/events/{event.id}/attendance")

    assert response.status_code == 401
    assert response.json()["error"] == "AUTHENTICATION_ERROR"
    assert response.headers["www-authenticate"] == "Bearer"


async def test_invalid_token_is_unauthorized(
    client: AsyncClient, engine: Engine
) -> None:
    event = engine.store.add_event()

    response = await client.post(
        f"/api/v1/events/{event.id}/attendance",
        headers={"Authorization": "Bearer not-a-jwt"},
    )

    assert response.status_code == 401


async def test_register_then_status_and_notification(
    client: AsyncClient, engine: Engine, member: Principal, sink: RecordingSink
) -> None:
    event = engine.store.add_event(created_by="organizer")

    response = await client.post(
        f"/api/v1/events/{event.id}/attendance", headers=bearer(member)
    )

    assert response.status_code == 201
    assert response.json()["user_id"] == member.id
    [(kind, payload, recipients)] = sink.emitted
    assert kind is NotificationKind.NEW_ATTENDEE
    assert recipients == ("organizer",)
    assert payload["attendee_id"] == member.id

    status = await client.get(
        f"/api/v1/events/{event.id}/attendance", headers=bearer(member)
    )
    assert status.json() == {
        "event_id": event.id,
        "is_attending": True,
        "attendee_count": 1,
    }


async def test_duplicate_registration_conflicts_and_sends_nothing(
    client: AsyncClient, engine: Engine, member: Principal, sink: RecordingSink
) -> None:
    event = engine.store.add_event()
    engine.store.add_attendee(event.id, member.id)

    response = await client.post(
        f"/api/v1/events/{event.id}/attendance", headers=bearer(member)
    )

    assert response.status_code == 409
    assert response.json()["error"] == "ALREADY_REGISTERED"
    assert sink.emitted == []


async def test_register_for_missing_event(
    client: AsyncClient, member: Principal
) -> None:
    response = await client.post(
        "/api/v1/events/missing/attendance", headers=bearer(member)
    )
    assert response.status_code == 404


async def test_unregister(
    client: AsyncClient, engine: Engine, member: Principal
) -> None:
    event = engine.store.add_event()
    attendance = engine.store.add_attendee(event.id, member.id)

    response = await client.delete(
        f"/api/v1/events/{event.id}/attendance", headers=bearer(member)
    )
    again = await client.delete(
        f"/api/v1/events/{event.id}/attendance", headers=bearer(member)
    )

    assert response.status_code == 200
    assert response.json() == {"id": attendance.id}
    assert again.status_code == 404
    assert again.json()["error"] == "NOT_REGISTERED"


async def test_anonymous_status_and_my_events(
    client: AsyncClient, engine: Engine
) -> None:
    event = engine.store.add_event()
    engine.store.add_attendee(event.id, "someone")

    status = await client.get(f"/api/v1/events/{event.id}/attendance")
    mine = await client.get("/api/v1/attendance/mine")

    assert status.json()["is_attending"] is False
    assert status.json()["attendee_count"] == 1
    assert mine.json() == []


async def test_list_attendees(client: AsyncClient, engine: Engine) -> None:
    event = engine.store.add_event()
    engine.store.add_attendee(event.id, "a1")
    engine.store.add_attendee(event.id, "a2")

    response = await client.get(f"/api/v1/events/{event.id}/attendees")

    assert response.status_code == 200
    assert [a["user_id"] for a in response.json()] == ["a1", "a2"]
