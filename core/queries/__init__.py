"""Query layer for database operations using SQLAlchemy Core."""

from .appointments import (
    create_appointment,
    delete_appointment,
    get_appointments_in_window,
    list_appointments,
    update_appointment,
)
from .schedules import (
    create_schedule,
    delete_schedule,
    get_schedules,
    list_schedules,
    update_schedule,
)
from .users import (
    ensure_user_profile,
    get_or_create_user_profile,
    get_user_profile,
    update_user_profile,
)

__all__ = [
    # Users
    "get_user_profile",
    "update_user_profile",
    "get_or_create_user_profile",
    "ensure_user_profile",
    # Appointments
    "list_appointments",
    "get_appointments_in_window",
    "create_appointment",
    "update_appointment",
    "delete_appointment",
    # Schedules
    "list_schedules",
    "get_schedules",
    "create_schedule",
    "update_schedule",
    "delete_schedule",
]
