"""Initial schema: events, attendees, presentations, votes

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 09:12:41.508221

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create initial schema."""
    # Create event table
    op.create_table(
        "event",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("status", sa.String(length=32), server_default="upcoming", nullable=False),
        sa.Column("starts_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("ends_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("voting_deadline", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_by", sa.String(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_event_created_by"), "event", ["created_by"], unique=False)
    op.create_index(
        "ix_event_status_voting_deadline",
        "event",
        ["status", "voting_deadline"],
        unique=False,
    )

    # Create attendee table
    op.create_table(
        "attendee",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("event_id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["event_id"], ["event.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("event_id", "user_id", name="uq_attendee_event_user"),
    )
    op.create_index(op.f("ix_attendee_event_id"), "attendee", ["event_id"], unique=False)
    op.create_index(op.f("ix_attendee_user_id"), "attendee", ["user_id"], unique=False)

    # Create presentation table
    op.create_table(
        "presentation",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("event_id", sa.String(), nullable=False),
        sa.Column("submitted_by", sa.String(), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("speaker_name", sa.String(length=255), nullable=False),
        sa.Column("speaker_bio", sa.Text(), nullable=True),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("target_audience", sa.String(length=255), nullable=False),
        sa.Column("status", sa.String(length=32), server_default="pending", nullable=False),
        sa.Column(
            "admin_approved", sa.Boolean(), server_default="false", nullable=False
        ),
        sa.Column("admin_approved_by", sa.String(), nullable=True),
        sa.Column("recording_url", sa.String(length=2048), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.CheckConstraint("duration > 0", name="ck_presentation_duration_positive"),
        sa.CheckConstraint(
            "status IN ('pending', 'approved', 'rejected')",
            name="ck_presentation_status",
        ),
        sa.ForeignKeyConstraint(["event_id"], ["event.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_presentation_event_id"), "presentation", ["event_id"], unique=False
    )
    op.create_index(
        op.f("ix_presentation_submitted_by"),
        "presentation",
        ["submitted_by"],
        unique=False,
    )
    op.create_index(
        "ix_presentation_event_status",
        "presentation",
        ["event_id", "status"],
        unique=False,
    )

    # Create vote table
    op.create_table(
        "vote",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("presentation_id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("vote", sa.String(length=16), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.CheckConstraint("vote IN ('approve', 'reject')", name="ck_vote_choice"),
        sa.ForeignKeyConstraint(
            ["presentation_id"], ["presentation.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "presentation_id", "user_id", name="uq_vote_presentation_user"
        ),
    )
    op.create_index(
        op.f("ix_vote_presentation_id"), "vote", ["presentation_id"], unique=False
    )
    op.create_index(op.f("ix_vote_user_id"), "vote", ["user_id"], unique=False)


def downgrade() -> None:
    """Drop initial schema."""
    op.drop_index(op.f("ix_vote_user_id"), table_name="vote")
    op.drop_index(op.f("ix_vote_presentation_id"), table_name="vote")
    op.drop_table("vote")
    op.drop_index("ix_presentation_event_status", table_name="presentation")
    op.drop_index(op.f("ix_presentation_submitted_by"), table_name="presentation")
    op.drop_index(op.f("ix_presentation_event_id"), table_name="presentation")
    op.drop_table("presentation")
    op.drop_index(op.f("ix_attendee_user_id"), table_name="attendee")
    op.drop_index(op.f("ix_attendee_event_id"), table_name="attendee")
    op.drop_table("attendee")
    op.drop_index("ix_event_status_voting_deadline", table_name="event")
    op.drop_index(op.f("ix_event_created_by"), table_name="event")
    op.drop_table("event")
