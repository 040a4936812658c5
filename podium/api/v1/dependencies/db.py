"""Request unit of work: one transaction plus a notification outbox (composition root)."""

from __future__ import annotations

from collections.abc import AsyncIterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Annotated, TypeVar

from fastapi import Depends, Request

from podium.infrastructure.persistence import database
from podium.infrastructure.services import (
    LogOnlyNotificationSink,
    NotificationDispatcher,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from podium.application.dtos.notification import OutboundNotification, Outcome

T = TypeVar("T")


@dataclass
class UnitOfWork:
    """Session of the current request and the notifications its use cases produced."""

    session: AsyncSession | None = None
    notifications: list[OutboundNotification] = field(default_factory=list)

    def collect(self, outcome: Outcome[T]) -> T:
        """Queue outcome's notifications for after-commit dispatch; return its value."""
        self.notifications.extend(outcome.notifications)
        return outcome.value


def get_notification_dispatcher(request: Request) -> NotificationDispatcher:
    """Dispatcher created by lifespan; a log-only one when lifespan did not run."""
    dispatcher = getattr(request.app.state, "notification_dispatcher", None)
    if dispatcher is None:
        dispatcher = NotificationDispatcher(LogOnlyNotificationSink())
        request.app.state.notification_dispatcher = dispatcher
    return dispatcher


async def get_unit_of_work(
    dispatcher: Annotated[NotificationDispatcher, Depends(get_notification_dispatcher)],
) -> AsyncIterator[UnitOfWork]:
    """Begin a transaction for the request; dispatch notifications only after commit.

    An exception raised by the endpoint rolls back the transaction and the
    queued notifications are dropped.
    """
    async with database.session_scope() as session:
        uow = UnitOfWork(session=session)
        yield uow
    await dispatcher.dispatch(uow.notifications)


async def get_session(
    uow: Annotated[UnitOfWork, Depends(get_unit_of_work)],
) -> AsyncSession:
    """Session of the request unit of work (for repository construction)."""
    if uow.session is None:
        raise RuntimeError("Unit of work has no session")
    return uow.session
