"""Attendee ORM model: one row per (event, user)."""

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from podium.infrastructure.persistence.database import Base
from podium.infrastructure.persistence.models.mixins import CreatedAtMixin, CuidMixin


class Attendee(CuidMixin, CreatedAtMixin, Base):
    """Event attendance. Table: attendee. Never updated, only inserted and deleted."""

    __tablename__ = "attendee"

    event_id: Mapped[str] = mapped_column(
        String, ForeignKey("event.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[str] = mapped_column(String, nullable=False, index=True)

    __table_args__ = (
        UniqueConstraint("event_id", "user_id", name="uq_attendee_event_user"),
    )
