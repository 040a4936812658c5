"""Vote ORM model: one row per (presentation, user)."""

from sqlalchemy import CheckConstraint, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from podium.infrastructure.persistence.database import Base
from podium.infrastructure.persistence.models.mixins import CreatedAtMixin, CuidMixin


class Vote(CuidMixin, CreatedAtMixin, Base):
    """Attendee vote. Table: vote. created_at is kept when the vote flips."""

    __tablename__ = "vote"

    presentation_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("presentation.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    vote: Mapped[str] = mapped_column(String(16), nullable=False)

    __table_args__ = (
        UniqueConstraint("presentation_id", "user_id", name="uq_vote_presentation_user"),
        CheckConstraint("vote IN ('approve', 'reject')", name="ck_vote_choice"),
    )
