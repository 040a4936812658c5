"""Event ORM model. Owned by the event collaborator; the status sweep patches status."""

from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from podium.infrastructure.persistence.database import Base
from podium.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin
from podium.shared.utils.datetime import default_voting_deadline


def _voting_deadline_default(context: Any) -> datetime | None:
    starts_at = context.get_current_parameters().get("starts_at")
    return default_voting_deadline(starts_at) if starts_at is not None else None


class Event(CuidMixin, TimestampMixin, Base):
    """Community event. Table: event."""

    __tablename__ = "event"

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, default="upcoming", server_default="upcoming"
    )
    starts_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    ends_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    voting_deadline: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, default=_voting_deadline_default
    )
    created_by: Mapped[str] = mapped_column(String, nullable=False, index=True)

    __table_args__ = (
        Index("ix_event_status_voting_deadline", "status", "voting_deadline"),
    )
