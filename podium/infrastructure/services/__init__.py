"""Infrastructure services: notification sink and dispatcher."""

from podium.infrastructure.services.notification_dispatcher import (
    LogOnlyNotificationSink,
    NotificationDispatcher,
)

__all__ = ["LogOnlyNotificationSink", "NotificationDispatcher"]
