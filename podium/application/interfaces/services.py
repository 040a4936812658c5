"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from podium.domain.enums import NotificationKind

# Injectable time source for deadline and status comparisons.
Clock = Callable[[], datetime]


# Notification sink interface
class INotificationSink(Protocol):
    """Protocol for the outbound notification collaborator (email, push)."""

    async def emit(
        self,
        kind: NotificationKind,
        payload: dict[str, Any],
        recipient_ids: tuple[str, ...] = (),
    ) -> None:
        """Deliver one signal. Failures are raised to the dispatcher, which logs them."""
