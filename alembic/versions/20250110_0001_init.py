"""Initial schema

Revision ID: 20250110_0001_init
Revises: 
Create Date: 2025-01-10 00:01:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20250110_0001_init"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=128), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("credential_digest", sa.String(length=255), nullable=False),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )

    op.create_table(
        "routines",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("owner_user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(length=128), nullable=False),
        sa.Column("weekday_label", sa.String(length=32), nullable=True),
    )
    op.create_index("ix_routines_owner", "routines", ["owner_user_id"])

    op.create_table(
        "routine_exercises",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("routine_id", sa.Integer(), sa.ForeignKey("routines.id", ondelete="CASCADE"), nullable=False),
        sa.Column("exercise_name", sa.String(length=128), nullable=False),
        sa.Column("muscle_group", sa.String(length=64), nullable=True),
        sa.Column("setup_notes", sa.Text(), nullable=True),
        sa.Column("is_superset", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("order_index", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index("ix_routine_exercises_routine_order", "routine_exercises", ["routine_id", "order_index"])

    op.create_table(
        "history_entries",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "routine_exercise_id",
            sa.Integer(),
            sa.ForeignKey("routine_exercises.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("weight", sa.Float(), nullable=False),
        sa.Column("reps", sa.Integer(), nullable=False),
        sa.Column("set_type", sa.String(length=32), nullable=False, server_default="working"),
        sa.Column("recorded_at", sa.Date(), nullable=False),
    )
    op.create_index("ix_history_exercise_date", "history_entries", ["routine_exercise_id", "recorded_at"])

    op.create_table(
        "weight_entries",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("owner_user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("weight", sa.Numeric(6, 2), nullable=False),
        sa.Column("recorded_at", sa.Date(), nullable=False),
    )
    op.create_index("ix_weight_entries_owner_date", "weight_entries", ["owner_user_id", "recorded_at"])

    op.create_table(
        "library_exercises",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=128), nullable=False),
        sa.Column("muscle_group", sa.String(length=64), nullable=True),
        sa.Column("equipment", sa.String(length=64), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.UniqueConstraint("name", name="uq_library_exercises_name"),
    )


def downgrade() -> None:
    op.drop_table("library_exercises")
    op.drop_index("ix_weight_entries_owner_date", table_name="weight_entries")
    op.drop_table("weight_entries")
    op.drop_index("ix_history_exercise_date", table_name="history_entries")
    op.drop_table("history_entries")
    op.drop_index("ix_routine_exercises_routine_order", table_name="routine_exercises")
    op.drop_table("routine_exercises")
    op.drop_index("ix_routines_owner", table_name="routines")
    op.drop_table("routines")
    op.drop_table("users")
