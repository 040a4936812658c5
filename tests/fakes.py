"""In-memory repository doubles, a controllable clock and the use cases wired over them.

Each fake implements the matching Protocol from
podium.application.interfaces over one shared InMemoryStore, so use cases
see a consistent view across repositories (like one DB session).
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime, timedelta
from typing import Any

from podium.application.dtos.attendance import AttendanceResult
from podium.application.dtos.event import EventResult
from podium.application.dtos.presentation import PresentationCreate, PresentationResult
from podium.application.dtos.principal import Principal
from podium.application.dtos.vote import VoteResult
from podium.application.services.presentation_resolution import PresentationResolver
from podium.application.use_cases.attendance import AttendanceRegistry
from podium.application.use_cases.presentations import (
    PresentationLifecycle,
    PresentationQueryService,
)
from podium.application.use_cases.sweeps import (
    RunEventStatusSweepUseCase,
    RunVotingDeadlineSweepUseCase,
)
from podium.application.use_cases.votes import VoteLedger
from podium.domain.enums import (
    EventStatus,
    NotificationKind,
    PresentationStatus,
    VoteChoice,
)
from podium.domain.exceptions import AlreadyRegisteredException
from podium.domain.value_objects.core import TalkDetails, VoteTally
from podium.infrastructure.security.jwt import create_access_token

NOW = datetime(2026, 3, 10, 12, 0, tzinfo=UTC)


class MutableClock:
    """Clock whose current time tests can move."""

    def __init__(self, now: datetime = NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


@dataclass
class InMemoryStore:
    clock: MutableClock = field(default_factory=MutableClock)
    events: dict[str, EventResult] = field(default_factory=dict)
    attendees: dict[str, AttendanceResult] = field(default_factory=dict)
    presentations: dict[str, PresentationResult] = field(default_factory=dict)
    votes: dict[tuple[str, str], VoteResult] = field(default_factory=dict)
    locked_presentation_ids: list[str] = field(default_factory=list)
    _ids: Any = field(default_factory=lambda: itertools.count(1))

    def next_id(self, prefix: str) -> str:
        return f"{prefix}{next(self._ids)}"

    def add_event(
        self,
        *,
        status: EventStatus = EventStatus.UPCOMING,
        starts_at: datetime | None = None,
        ends_at: datetime | None = None,
        voting_deadline: datetime | None = None,
        created_by: str = "organizer",
        title: str = "Python Meetup",
    ) -> EventResult:
        event = EventResult(
            id=self.next_id("ev"),
            title=title,
            status=status,
            starts_at=starts_at or self.clock.now + timedelta(days=7),
            ends_at=ends_at,
            voting_deadline=voting_deadline,
            created_by=created_by,
        )
        self.events[event.id] = event
        return event

    def add_attendee(self, event_id: str, user_id: str) -> AttendanceResult:
        attendance = AttendanceResult(
            id=self.next_id("att"),
            event_id=event_id,
            user_id=user_id,
            created_at=self.clock.now,
        )
        self.attendees[attendance.id] = attendance
        return attendance

    def add_presentation(
        self,
        event_id: str,
        *,
        submitted_by: str = "speaker",
        status: PresentationStatus = PresentationStatus.PENDING,
        admin_approved: bool = False,
        title: str = "Async SQLAlchemy in practice",
    ) -> PresentationResult:
        presentation = PresentationResult(
            id=self.next_id("pr"),
            event_id=event_id,
            submitted_by=submitted_by,
            title=title,
            description="Sessions, savepoints and row locks.",
            speaker_name="Ada",
            speaker_bio=None,
            duration=30,
            target_audience="Intermediate",
            status=status,
            admin_approved=admin_approved,
            admin_approved_by="admin" if admin_approved else None,
            recording_url=None,
            created_at=self.clock.now,
            updated_at=self.clock.now,
        )
        self.presentations[presentation.id] = presentation
        return presentation

    def add_vote(
        self, presentation_id: str, user_id: str, vote: VoteChoice
    ) -> VoteResult:
        row = VoteResult(
            id=self.next_id("vo"),
            presentation_id=presentation_id,
            user_id=user_id,
            vote=vote,
            created_at=self.clock.now,
        )
        self.votes[(presentation_id, user_id)] = row
        return row


def talk(**overrides: Any) -> PresentationCreate:
    fields: dict[str, Any] = {
        "title": "Pattern matching for parsers",
        "description": "Structural pattern matching beyond switch statements.",
        "speaker_name": "Grace",
        "duration": 25,
        "target_audience": "Everyone",
        "speaker_bio": None,
    }
    fields.update(overrides)
    return PresentationCreate(**fields)


class FakeEventRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def get_by_id(self, event_id: str) -> EventResult | None:
        return self.store.events.get(event_id)

    async def list_voting_deadline_elapsed(self, now: datetime) -> list[EventResult]:
        return [
            e
            for e in self.store.events.values()
            if e.status is EventStatus.UPCOMING
            and e.voting_deadline is not None
            and e.voting_deadline < now
        ]

    async def list_not_cancelled(self) -> list[EventResult]:
        return [
            e for e in self.store.events.values() if e.status is not EventStatus.CANCELLED
        ]

    async def update_status(
        self, event_id: str, status: EventStatus
    ) -> EventResult | None:
        event = self.store.events.get(event_id)
        if event is None:
            return None
        self.store.events[event_id] = replace(event, status=status)
        return self.store.events[event_id]


class FakeAttendanceRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def get(self, event_id: str, user_id: str) -> AttendanceResult | None:
        for a in self.store.attendees.values():
            if a.event_id == event_id and a.user_id == user_id:
                return a
        return None

    async def create(self, event_id: str, user_id: str) -> AttendanceResult:
        if await self.get(event_id, user_id):
            raise AlreadyRegisteredException(event_id, user_id)
        return self.store.add_attendee(event_id, user_id)

    async def delete(self, attendance_id: str) -> bool:
        return self.store.attendees.pop(attendance_id, None) is not None

    async def count_by_event(self, event_id: str) -> int:
        return len(await self.list_by_event(event_id))

    async def list_by_event(self, event_id: str) -> list[AttendanceResult]:
        return [a for a in self.store.attendees.values() if a.event_id == event_id]

    async def list_by_user(self, user_id: str) -> list[AttendanceResult]:
        return [a for a in self.store.attendees.values() if a.user_id == user_id]


class FakePresentationRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def get_by_id(self, presentation_id: str) -> PresentationResult | None:
        return self.store.presentations.get(presentation_id)

    async def get_by_id_for_update(
        self, presentation_id: str
    ) -> PresentationResult | None:
        self.store.locked_presentation_ids.append(presentation_id)
        return self.store.presentations.get(presentation_id)

    async def create(
        self, event_id: str, submitted_by: str, details: TalkDetails
    ) -> PresentationResult:
        presentation = self.store.add_presentation(
            event_id, submitted_by=submitted_by, title=details.title
        )
        presentation = replace(
            presentation,
            description=details.description,
            speaker_name=details.speaker_name,
            speaker_bio=details.speaker_bio,
            duration=details.duration,
            target_audience=details.target_audience,
        )
        self.store.presentations[presentation.id] = presentation
        return presentation

    async def update(
        self, presentation_id: str, changes: dict[str, Any]
    ) -> PresentationResult | None:
        presentation = self.store.presentations.get(presentation_id)
        if presentation is None:
            return None
        updated = replace(presentation, **changes, updated_at=self.store.clock.now)
        self.store.presentations[presentation_id] = updated
        return updated

    async def list_by_event(
        self, event_id: str, status: PresentationStatus | None = None
    ) -> list[PresentationResult]:
        return [
            p
            for p in self.store.presentations.values()
            if p.event_id == event_id and (status is None or p.status is status)
        ]

    async def list_by_submitter(self, user_id: str) -> list[PresentationResult]:
        return [
            p for p in self.store.presentations.values() if p.submitted_by == user_id
        ]


class FakeVoteRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def get(self, presentation_id: str, user_id: str) -> VoteResult | None:
        return self.store.votes.get((presentation_id, user_id))

    async def upsert(
        self, presentation_id: str, user_id: str, vote: VoteChoice
    ) -> VoteResult:
        existing = self.store.votes.get((presentation_id, user_id))
        if existing:
            self.store.votes[(presentation_id, user_id)] = replace(existing, vote=vote)
            return self.store.votes[(presentation_id, user_id)]
        return self.store.add_vote(presentation_id, user_id, vote)

    async def delete(self, presentation_id: str, user_id: str) -> bool:
        return self.store.votes.pop((presentation_id, user_id), None) is not None

    async def tally(self, presentation_id: str) -> VoteTally:
        choices = [
            v.vote
            for (pid, _), v in self.store.votes.items()
            if pid == presentation_id
        ]
        return VoteTally(
            approve=choices.count(VoteChoice.APPROVE),
            reject=choices.count(VoteChoice.REJECT),
        )

    async def tallies(self, presentation_ids: list[str]) -> dict[str, VoteTally]:
        return {pid: await self.tally(pid) for pid in presentation_ids}

    async def choices_by_user(
        self, presentation_ids: list[str], user_id: str
    ) -> dict[str, VoteChoice]:
        return {
            pid: self.store.votes[(pid, user_id)].vote
            for pid in presentation_ids
            if (pid, user_id) in self.store.votes
        }


class RecordingSink:
    """INotificationSink double: records emits, optionally failing for some kinds."""

    def __init__(self, fail_kinds: tuple[NotificationKind, ...] = ()) -> None:
        self.emitted: list[tuple[NotificationKind, dict[str, Any], tuple[str, ...]]] = []
        self.fail_kinds = fail_kinds

    async def emit(
        self,
        kind: NotificationKind,
        payload: dict[str, Any],
        recipient_ids: tuple[str, ...] = (),
    ) -> None:
        if kind in self.fail_kinds:
            raise RuntimeError(f"{kind.value} delivery failed")
        self.emitted.append((kind, payload, recipient_ids))


@dataclass
class Engine:
    """Use cases wired over one in-memory store."""

    store: InMemoryStore
    clock: MutableClock
    registry: AttendanceRegistry
    ledger: VoteLedger
    lifecycle: PresentationLifecycle
    queries: PresentationQueryService
    voting_sweep: RunVotingDeadlineSweepUseCase
    status_sweep: RunEventStatusSweepUseCase
    resolver: PresentationResolver


def build_engine(store: InMemoryStore | None = None) -> Engine:
    store = store or InMemoryStore()
    events = FakeEventRepository(store)
    attendance = FakeAttendanceRepository(store)
    presentations = FakePresentationRepository(store)
    votes = FakeVoteRepository(store)
    resolver = PresentationResolver(presentations, attendance, votes)
    return Engine(
        store=store,
        clock=store.clock,
        registry=AttendanceRegistry(attendance, events),
        ledger=VoteLedger(
            presentations, events, attendance, votes, resolver, clock=store.clock
        ),
        lifecycle=PresentationLifecycle(presentations, events, attendance, resolver),
        queries=PresentationQueryService(presentations, attendance, votes),
        voting_sweep=RunVotingDeadlineSweepUseCase(
            events, presentations, resolver, clock=store.clock
        ),
        status_sweep=RunEventStatusSweepUseCase(events, clock=store.clock),
        resolver=resolver,
    )


def bearer(principal: Principal) -> dict[str, str]:
    """Authorization header for principal (token signed with the test SECRET_KEY)."""
    token = create_access_token({"sub": principal.id, "role": principal.role.value})
    return {"Authorization": f"Bearer {token}"}
