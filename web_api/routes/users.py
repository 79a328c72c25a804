"""
User profile routes.

Endpoints:
- GET /api/users/profile - Get current user's profile
- PUT /api/users/profile - Update current user's profile
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from core.database import get_connection, get_transaction
from core.queries.users import (
    get_or_create_user_profile,
    get_user_profile,
    update_user_profile,
)
from web_api.auth import get_current_user, profile_claims
from web_api.errors import database_errors

router = APIRouter(prefix="/api/users", tags=["users"])


class UserProfileUpdate(BaseModel):
    """Schema for updating user profile."""

    full_name: str | None = None
    phone_number: str | None = None


@router.get("/profile")
async def get_my_profile(user: dict = Depends(get_current_user)) -> dict[str, Any]:
    """
    Get the current user's profile.

    The profile row is created from the token's email on first access,
    since sign-up happens at the identity provider.
    """
    user_id = user["sub"]
    claims = profile_claims(user)

    async with database_errors("Failed to fetch profile"):
        if claims:
            async with get_transaction() as conn:
                profile = await get_or_create_user_profile(conn, user_id, **claims)
        else:
            async with get_connection() as conn:
                profile = await get_user_profile(conn, user_id)

    if not profile:
        raise HTTPException(404, "User not found")

    return profile


@router.put("/profile")
async def update_my_profile(
    updates: UserProfileUpdate,
    user: dict = Depends(get_current_user),
) -> dict[str, Any]:
    """
    Update the current user's profile.

    Only allows updating specific fields: full_name, phone_number
    """
    update_data = updates.model_dump(exclude_unset=True)

    async with database_errors("Failed to update profile"):
        async with get_transaction() as conn:
            profile = await update_user_profile(conn, user["sub"], **update_data)

    if not profile:
        raise HTTPException(404, "User not found")

    return profile
