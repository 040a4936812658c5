"""Notification delivery: drain outbox notifications after commit.

Delivery is fire-and-forget: a failing notification is logged and never
retried, and never affects the transaction that produced it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from podium.shared.telemetry.logging import get_logger
from podium.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from podium.application.dtos.notification import OutboundNotification
    from podium.application.interfaces.services import INotificationSink
    from podium.domain.enums import NotificationKind

logger = get_logger(__name__)


class LogOnlyNotificationSink:
    """INotificationSink implementation that logs instead of sending email.

    Use when no email provider is configured. Production can swap in a
    provider- or queue-based implementation.
    """

    async def emit(
        self,
        kind: NotificationKind,
        payload: dict[str, Any],
        recipient_ids: tuple[str, ...] = (),
    ) -> None:
        """Log the notification; nothing is sent."""
        if not recipient_ids:
            logger.info("Notify %s: no recipients, skipping", kind.value)
            return
        logger.info(
            "Notify %s: would send to %d recipients", kind.value, len(recipient_ids)
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Notify %s recipients=%s payload=%s (at %s)",
                kind.value,
                list(recipient_ids),
                payload,
                utc_now().isoformat(),
            )


class NotificationDispatcher:
    """Hands outbox notifications to the sink one by one, logging failures."""

    def __init__(self, sink: INotificationSink) -> None:
        self.sink = sink

    async def dispatch(self, notifications: Iterable[OutboundNotification]) -> int:
        """Deliver notifications. Returns the number delivered without error."""
        delivered = 0
        for notification in notifications:
            try:
                await self.sink.emit(
                    notification.kind,
                    notification.payload,
                    notification.recipient_ids,
                )
            except Exception:
                logger.exception(
                    "Failed to deliver %s notification (payload=%s)",
                    notification.kind.value,
                    notification.payload,
                )
                continue
            delivered += 1
        return delivered
