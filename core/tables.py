"""SQLAlchemy Core table definitions for the database schema."""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Naming convention for constraints (helps Alembic generate better names)
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}
metadata = MetaData(naming_convention=convention)


# =====================================================
# 1. USER PROFILES
# =====================================================
# id is the identity provider's user id (JWT "sub")
user_info = Table(
    "user_info",
    metadata,
    Column("id", UUID(as_uuid=False), primary_key=True),
    Column("full_name", Text, nullable=False),
    Column("email", Text, nullable=False),
    Column("phone_number", Text),
    Column("created_at", TIMESTAMP(timezone=True), server_default=func.now()),
    Column("updated_at", TIMESTAMP(timezone=True), server_default=func.now()),
    Index("idx_user_info_email", "email"),
)


# =====================================================
# 2. APPOINTMENTS
# =====================================================
appointments = Table(
    "appointments",
    metadata,
    Column("appointment_id", Integer, primary_key=True, autoincrement=True),
    Column(
        "user_id",
        UUID(as_uuid=False),
        ForeignKey("user_info.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("last_checkup_date", Date),
    Column("next_appointment_date", Date, nullable=False),
    Column("notes", Text),
    Column("created_at", TIMESTAMP(timezone=True), server_default=func.now()),
    Index("idx_appointments_user_id", "user_id"),
    Index("idx_appointments_next_date", "next_appointment_date"),
)


# =====================================================
# 3. EYE-DROP SCHEDULES
# =====================================================
eye_drop_schedules = Table(
    "eye_drop_schedules",
    metadata,
    Column("schedule_id", Integer, primary_key=True, autoincrement=True),
    Column(
        "user_id",
        UUID(as_uuid=False),
        ForeignKey("user_info.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("medication_name", Text, nullable=False),
    Column("frequency", Integer, nullable=False),
    Column("times_of_day", ARRAY(Text), nullable=False),  # "HH:MM" strings
    Column("notes", Text),
    Column("created_at", TIMESTAMP(timezone=True), server_default=func.now()),
    CheckConstraint("frequency BETWEEN 1 AND 4", name="frequency_range"),
    Index("idx_eye_drop_schedules_user_id", "user_id"),
)
