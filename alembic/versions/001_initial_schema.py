"""Initial schema: routines, routine_days, exercise_templates, workout_sessions, set_logs.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "routines",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_routines")),
    )
    op.create_index(op.f("ix_routines_name"), "routines", ["name"], unique=False)

    op.create_table(
        "routine_days",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("routine_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(
            ["routine_id"], ["routines.id"],
            name=op.f("fk_routine_days_routine_id_routines"), ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_routine_days")),
    )
    op.create_index(op.f("ix_routine_days_routine_id"), "routine_days", ["routine_id"], unique=False)

    op.create_table(
        "exercise_templates",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("routine_day_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("target_config", sa.String(length=50), nullable=False),
        sa.Column("target_weights", sa.String(length=50), nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(
            ["routine_day_id"], ["routine_days.id"],
            name=op.f("fk_exercise_templates_routine_day_id_routine_days"), ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_exercise_templates")),
    )
    op.create_index(
        op.f("ix_exercise_templates_routine_day_id"), "exercise_templates", ["routine_day_id"], unique=False
    )

    op.create_table(
        "workout_sessions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("routine_day_id", sa.Integer(), nullable=True),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("notes", sa.String(length=1000), nullable=True),
        sa.ForeignKeyConstraint(
            ["routine_day_id"], ["routine_days.id"],
            name=op.f("fk_workout_sessions_routine_day_id_routine_days"), ondelete="SET NULL",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_workout_sessions")),
    )
    op.create_index("ix_workout_sessions_start_time", "workout_sessions", ["start_time"], unique=False)
    op.create_index("ix_workout_sessions_end_time", "workout_sessions", ["end_time"], unique=False)

    op.create_table(
        "set_logs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("workout_session_id", sa.Integer(), nullable=False),
        sa.Column("exercise_name", sa.String(length=100), nullable=False),
        sa.Column("set_number", sa.Integer(), nullable=False),
        sa.Column("reps_performed", sa.Integer(), nullable=False),
        sa.Column("weight_used", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(
            ["workout_session_id"], ["workout_sessions.id"],
            name=op.f("fk_set_logs_workout_session_id_workout_sessions"), ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_set_logs")),
    )
    op.create_index("ix_set_logs_completed_at", "set_logs", ["completed_at"], unique=False)
    op.create_index(
        "ix_set_logs_session_exercise", "set_logs", ["workout_session_id", "exercise_name"], unique=False
    )


def downgrade() -> None:
    op.drop_index("ix_set_logs_session_exercise", table_name="set_logs")
    op.drop_index("ix_set_logs_completed_at", table_name="set_logs")
    op.drop_table("set_logs")
    op.drop_index("ix_workout_sessions_end_time", table_name="workout_sessions")
    op.drop_index("ix_workout_sessions_start_time", table_name="workout_sessions")
    op.drop_table("workout_sessions")
    op.drop_index(op.f("ix_exercise_templates_routine_day_id"), table_name="exercise_templates")
    op.drop_table("exercise_templates")
    op.drop_index(op.f("ix_routine_days_routine_id"), table_name="routine_days")
    op.drop_table("routine_days")
    op.drop_index(op.f("ix_routines_name"), table_name="routines")
    op.drop_table("routines")
