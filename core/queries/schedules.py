"""Eye-drop schedule database queries using SQLAlchemy Core."""

from typing import Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncConnection

from ..tables import eye_drop_schedules


async def list_schedules(
    conn: AsyncConnection,
    user_id: str,
) -> list[dict[str, Any]]:
    """Get a user's schedules, newest first."""
    result = await conn.execute(
        select(eye_drop_schedules)
        .where(eye_drop_schedules.c.user_id == user_id)
        .order_by(eye_drop_schedules.c.created_at.desc())
    )
    return [dict(row) for row in result.mappings()]


async def get_schedules(
    conn: AsyncConnection,
    user_id: str | None = None,
) -> list[dict[str, Any]]:
    """
    Get schedules for reminder matching.

    Args:
        user_id: Restrict to one user; None loads every user's schedules
    """
    query = select(eye_drop_schedules).order_by(eye_drop_schedules.c.schedule_id)
    if user_id is not None:
        query = query.where(eye_drop_schedules.c.user_id == user_id)
    result = await conn.execute(query)
    return [dict(row) for row in result.mappings()]


async def create_schedule(
    conn: AsyncConnection,
    user_id: str,
    medication_name: str,
    frequency: int,
    times_of_day: list[str],
    notes: str | None = None,
) -> dict[str, Any]:
    """Create a schedule and return the created record."""
    result = await conn.execute(
        insert(eye_drop_schedules)
        .values(
            user_id=user_id,
            medication_name=medication_name,
            frequency=frequency,
            times_of_day=times_of_day,
            notes=notes,
        )
        .returning(eye_drop_schedules)
    )
    return dict(result.mappings().first())


async def update_schedule(
    conn: AsyncConnection,
    user_id: str,
    schedule_id: int,
    **updates: Any,
) -> dict[str, Any] | None:
    """Update one of the user's schedules. Returns None if not found."""
    result = await conn.execute(
        update(eye_drop_schedules)
        .where(
            eye_drop_schedules.c.schedule_id == schedule_id,
            eye_drop_schedules.c.user_id == user_id,
        )
        .values(**updates)
        .returning(eye_drop_schedules)
    )
    row = result.mappings().first()
    return dict(row) if row else None


async def delete_schedule(
    conn: AsyncConnection,
    user_id: str,
    schedule_id: int,
) -> bool:
    """Delete one of the user's schedules. Returns False if not found."""
    result = await conn.execute(
        delete(eye_drop_schedules)
        .where(
            eye_drop_schedules.c.schedule_id == schedule_id,
            eye_drop_schedules.c.user_id == user_id,
        )
        .returning(eye_drop_schedules.c.schedule_id)
    )
    return result.first() is not None
