"""Outbound notifications (outbox) returned alongside operation results.

Use cases never deliver notifications themselves: they append them to the
Outcome, and the caller hands them to a dispatcher after the transaction
commits.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from podium.domain.enums import NotificationKind

T = TypeVar("T")


@dataclass(frozen=True)
class OutboundNotification:
    """One fire-and-forget signal for the notification collaborator."""

    kind: NotificationKind
    payload: dict[str, Any]
    recipient_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of a mutating operation plus the notifications it produced."""

    value: T
    notifications: tuple[OutboundNotification, ...] = field(default_factory=tuple)
