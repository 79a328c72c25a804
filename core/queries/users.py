"""User profile database queries using SQLAlchemy Core."""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncConnection

from ..tables import user_info


async def get_user_profile(
    conn: AsyncConnection,
    user_id: str,
) -> dict[str, Any] | None:
    """Get a user's profile by provider user id."""
    result = await conn.execute(select(user_info).where(user_info.c.id == user_id))
    row = result.mappings().first()
    return dict(row) if row else None


async def update_user_profile(
    conn: AsyncConnection,
    user_id: str,
    **updates: Any,
) -> dict[str, Any] | None:
    """Update a user's profile and return the updated record."""
    updates["updated_at"] = datetime.now(timezone.utc)
    result = await conn.execute(
        update(user_info)
        .where(user_info.c.id == user_id)
        .values(**updates)
        .returning(user_info)
    )
    row = result.mappings().first()
    return dict(row) if row else None


async def ensure_user_profile(
    conn: AsyncConnection,
    user_id: str,
    email: str,
    full_name: str | None = None,
) -> None:
    """
    Insert the user's profile row if it does not exist yet.

    Sign-up happens at the identity provider, so the row may be missing the
    first time a user calls the API. Appointments and schedules reference
    user_info, so this runs before their first insert.
    """
    await conn.execute(
        pg_insert(user_info)
        .values(id=user_id, email=email, full_name=full_name or email.split("@")[0])
        .on_conflict_do_nothing(index_elements=["id"])
    )


async def get_or_create_user_profile(
    conn: AsyncConnection,
    user_id: str,
    email: str,
    full_name: str | None = None,
) -> dict[str, Any]:
    """Get a user's profile, creating it from token claims on first sight."""
    await ensure_user_profile(conn, user_id, email, full_name)
    return await get_user_profile(conn, user_id)
