"""
Eye-drop schedule routes.

Endpoints:
- GET /api/schedules - List current user's schedules (newest first)
- POST /api/schedules - Create a schedule
- PUT /api/schedules/{schedule_id} - Update a schedule
- DELETE /api/schedules/{schedule_id} - Delete a schedule
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from core.database import get_connection, get_transaction
from core.queries.schedules import (
    create_schedule,
    delete_schedule,
    list_schedules,
    update_schedule,
)
from web_api.auth import ensure_profile, get_current_user
from web_api.errors import database_errors

router = APIRouter(prefix="/api/schedules", tags=["schedules"])

# 24-hour, zero-padded: the reminder matcher compares these as strings
TimeOfDay = Annotated[str, Field(pattern=r"^([01][0-9]|2[0-3]):[0-5][0-9]$")]


class ScheduleCreate(BaseModel):
    medication_name: str = Field(min_length=1)
    frequency: int = Field(ge=1, le=4)  # doses per day
    times_of_day: list[TimeOfDay] = Field(min_length=1, max_length=6)
    notes: str | None = None


class ScheduleUpdate(BaseModel):
    """Only fields present in the request body are updated."""

    medication_name: str | None = Field(default=None, min_length=1)
    frequency: int | None = Field(default=None, ge=1, le=4)
    times_of_day: list[TimeOfDay] | None = Field(
        default=None, min_length=1, max_length=6
    )
    notes: str | None = None


@router.get("")
async def get_my_schedules(
    user: dict = Depends(get_current_user),
) -> list[dict[str, Any]]:
    async with database_errors("Failed to fetch schedules"):
        async with get_connection() as conn:
            return await list_schedules(conn, user["sub"])


@router.post("", status_code=201)
async def create_my_schedule(
    body: ScheduleCreate,
    user: dict = Depends(get_current_user),
) -> dict[str, Any]:
    async with database_errors("Failed to create schedule"):
        async with get_transaction() as conn:
            await ensure_profile(conn, user)
            return await create_schedule(
                conn,
                user["sub"],
                medication_name=body.medication_name,
                frequency=body.frequency,
                times_of_day=body.times_of_day,
                notes=body.notes,
            )


@router.put("/{schedule_id}")
async def update_my_schedule(
    schedule_id: int,
    body: ScheduleUpdate,
    user: dict = Depends(get_current_user),
) -> dict[str, Any]:
    updates = body.model_dump(exclude_unset=True)
    required = ("medication_name", "frequency", "times_of_day")
    if any(field in updates and updates[field] is None for field in required):
        raise HTTPException(422, "medication_name, frequency and times_of_day cannot be null")
    if not updates:
        raise HTTPException(400, "No fields to update")

    async with database_errors("Failed to update schedule"):
        async with get_transaction() as conn:
            schedule = await update_schedule(conn, user["sub"], schedule_id, **updates)

    if not schedule:
        raise HTTPException(404, "Schedule not found")
    return schedule


@router.delete("/{schedule_id}")
async def delete_my_schedule(
    schedule_id: int,
    user: dict = Depends(get_current_user),
) -> dict[str, str]:
    async with database_errors("Failed to delete schedule"):
        async with get_transaction() as conn:
            deleted = await delete_schedule(conn, user["sub"], schedule_id)

    if not deleted:
        raise HTTPException(404, "Schedule not found")
    return {"message": "Schedule deleted successfully"}
