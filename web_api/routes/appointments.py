"""
Appointment routes.

Endpoints:
- GET /api/appointments - List current user's appointments (soonest first)
- POST /api/appointments - Create an appointment
- PUT /api/appointments/{appointment_id} - Update an appointment
- DELETE /api/appointments/{appointment_id} - Delete an appointment
"""

from datetime import date
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from core.database import get_connection, get_transaction
from core.queries.appointments import (
    create_appointment,
    delete_appointment,
    list_appointments,
    update_appointment,
)
from web_api.auth import ensure_profile, get_current_user
from web_api.errors import database_errors

router = APIRouter(prefix="/api/appointments", tags=["appointments"])


class AppointmentCreate(BaseModel):
    next_appointment_date: date
    last_checkup_date: date | None = None
    notes: str | None = None


class AppointmentUpdate(BaseModel):
    """Only fields present in the request body are updated."""

    next_appointment_date: date | None = None
    last_checkup_date: date | None = None
    notes: str | None = None


@router.get("")
async def get_my_appointments(
    user: dict = Depends(get_current_user),
) -> list[dict[str, Any]]:
    async with database_errors("Failed to fetch appointments"):
        async with get_connection() as conn:
            return await list_appointments(conn, user["sub"])


@router.post("", status_code=201)
async def create_my_appointment(
    body: AppointmentCreate,
    user: dict = Depends(get_current_user),
) -> dict[str, Any]:
    async with database_errors("Failed to create appointment"):
        async with get_transaction() as conn:
            await ensure_profile(conn, user)
            return await create_appointment(
                conn,
                user["sub"],
                next_appointment_date=body.next_appointment_date,
                last_checkup_date=body.last_checkup_date,
                notes=body.notes,
            )


@router.put("/{appointment_id}")
async def update_my_appointment(
    appointment_id: int,
    body: AppointmentUpdate,
    user: dict = Depends(get_current_user),
) -> dict[str, Any]:
    updates = body.model_dump(exclude_unset=True)
    if updates.get("next_appointment_date", date.min) is None:
        raise HTTPException(422, "next_appointment_date cannot be null")
    if not updates:
        raise HTTPException(400, "No fields to update")

    async with database_errors("Failed to update appointment"):
        async with get_transaction() as conn:
            appointment = await update_appointment(
                conn, user["sub"], appointment_id, **updates
            )

    if not appointment:
        raise HTTPException(404, "Appointment not found")
    return appointment


@router.delete("/{appointment_id}")
async def delete_my_appointment(
    appointment_id: int,
    user: dict = Depends(get_current_user),
) -> dict[str, str]:
    async with database_errors("Failed to delete appointment"):
        async with get_transaction() as conn:
            deleted = await delete_appointment(conn, user["sub"], appointment_id)

    if not deleted:
        raise HTTPException(404, "Appointment not found")
    return {"message": "Appointment deleted successfully"}
