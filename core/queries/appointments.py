"""Appointment database queries using SQLAlchemy Core."""

from datetime import date
from typing import Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncConnection

from ..tables import appointments


async def list_appointments(
    conn: AsyncConnection,
    user_id: str,
) -> list[dict[str, Any]]:
    """Get a user's appointments, soonest first."""
    result = await conn.execute(
        select(appointments)
        .where(appointments.c.user_id == user_id)
        .order_by(appointments.c.next_appointment_date.asc())
    )
    return [dict(row) for row in result.mappings()]


async def get_appointments_in_window(
    conn: AsyncConnection,
    start: date,
    end: date,
    user_id: str | None = None,
) -> list[dict[str, Any]]:
    """
    Get appointments whose next date falls within [start, end].

    Args:
        start: First date of the window (inclusive)
        end: Last date of the window (inclusive)
        user_id: Restrict to one user; None loads every user's appointments
    """
    query = select(appointments).where(
        appointments.c.next_appointment_date >= start,
        appointments.c.next_appointment_date <= end,
    )
    if user_id is not None:
        query = query.where(appointments.c.user_id == user_id)
    result = await conn.execute(query)
    return [dict(row) for row in result.mappings()]


async def create_appointment(
    conn: AsyncConnection,
    user_id: str,
    next_appointment_date: date,
    last_checkup_date: date | None = None,
    notes: str | None = None,
) -> dict[str, Any]:
    """Create an appointment and return the created record."""
    result = await conn.execute(
        insert(appointments)
        .values(
            user_id=user_id,
            last_checkup_date=last_checkup_date,
            next_appointment_date=next_appointment_date,
            notes=notes,
        )
        .returning(appointments)
    )
    return dict(result.mappings().first())


async def update_appointment(
    conn: AsyncConnection,
    user_id: str,
    appointment_id: int,
    **updates: Any,
) -> dict[str, Any] | None:
    """Update one of the user's appointments. Returns None if not found."""
    result = await conn.execute(
        update(appointments)
        .where(
            appointments.c.appointment_id == appointment_id,
            appointments.c.user_id == user_id,
        )
        .values(**updates)
        .returning(appointments)
    )
    row = result.mappings().first()
    return dict(row) if row else None


async def delete_appointment(
    conn: AsyncConnection,
    user_id: str,
    appointment_id: int,
) -> bool:
    """Delete one of the user's appointments. Returns False if not found."""
    result = await conn.execute(
        delete(appointments)
        .where(
            appointments.c.appointment_id == appointment_id,
            appointments.c.user_id == user_id,
        )
        .returning(appointments.c.appointment_id)
    )
    return result.first() is not None
