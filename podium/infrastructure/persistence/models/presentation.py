"""Presentation ORM model: talk proposal submitted to an event."""

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from podium.infrastructure.persistence.database import Base
from podium.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class Presentation(CuidMixin, TimestampMixin, Base):
    """Talk proposal. Table: presentation. Status: pending, approved, rejected."""

    __tablename__ = "presentation"

    event_id: Mapped[str] = mapped_column(
        String, ForeignKey("event.id", ondelete="CASCADE"), nullable=False, index=True
    )
    submitted_by: Mapped[str] = mapped_column(String, nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    speaker_name: Mapped[str] = mapped_column(String(255), nullable=False)
    speaker_bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    target_audience: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, default="pending", server_default="pending"
    )
    admin_approved: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="false"
    )
    admin_approved_by: Mapped[str | None] = mapped_column(String, nullable=True)
    recording_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)

    __table_args__ = (
        Index("ix_presentation_event_status", "event_id", "status"),
        CheckConstraint("duration > 0", name="ck_presentation_duration_positive"),
        CheckConstraint(
            "status IN ('pending', 'approved', 'rejected')",
            name="ck_presentation_status",
        ),
    )
