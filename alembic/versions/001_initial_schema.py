"""Initial schema: user profiles, appointments and eye-drop schedules.

Revision ID: 001
Revises:
Create Date: 2024-03-01

user_info.id holds the identity provider's user id. On a Supabase project
where these tables were created from the dashboard, run: alembic stamp 001
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "user_info",
        sa.Column("id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("full_name", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("phone_number", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("now()"),
            nullable=True,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("now()"),
            nullable=True,
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_user_info")),
    )
    op.create_index("idx_user_info_email", "user_info", ["email"], unique=False)

    op.create_table(
        "appointments",
        sa.Column("appointment_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("last_checkup_date", sa.Date(), nullable=True),
        sa.Column("next_appointment_date", sa.Date(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("now()"),
            nullable=True,
        ),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["user_info.id"],
            name=op.f("fk_appointments_user_id_user_info"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("appointment_id", name=op.f("pk_appointments")),
    )
    op.create_index(
        "idx_appointments_user_id", "appointments", ["user_id"], unique=False
    )
    op.create_index(
        "idx_appointments_next_date",
        "appointments",
        ["next_appointment_date"],
        unique=False,
    )

    op.create_table(
        "eye_drop_schedules",
        sa.Column("schedule_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("medication_name", sa.Text(), nullable=False),
        sa.Column("frequency", sa.Integer(), nullable=False),
        sa.Column("times_of_day", postgresql.ARRAY(sa.Text()), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("now()"),
            nullable=True,
        ),
        sa.CheckConstraint(
            "frequency BETWEEN 1 AND 4",
            name=op.f("ck_eye_drop_schedules_frequency_range"),
        ),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["user_info.id"],
            name=op.f("fk_eye_drop_schedules_user_id_user_info"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("schedule_id", name=op.f("pk_eye_drop_schedules")),
    )
    op.create_index(
        "idx_eye_drop_schedules_user_id",
        "eye_drop_schedules",
        ["user_id"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("idx_eye_drop_schedules_user_id", table_name="eye_drop_schedules")
    op.drop_table("eye_drop_schedules")
    op.drop_index("idx_appointments_next_date", table_name="appointments")
    op.drop_index("idx_appointments_user_id", table_name="appointments")
    op.drop_table("appointments")
    op.drop_index("idx_user_info_email", table_name="user_info")
    op.drop_table("user_info")
