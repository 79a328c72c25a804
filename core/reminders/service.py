"""
Reminder checks: load records from a ReminderSource and run the matcher.

Two callers, two appointment windows:
- check_user_reminders(): one user, polled from the web client
  (USER_APPOINTMENT_WINDOW_DAYS, default 7)
- check_all_reminders(): every user, from the background job
  (BACKGROUND_APPOINTMENT_WINDOW_DAYS, default 1)

Both windows are further narrowed by the matcher to today and tomorrow.
"""

import logging
from datetime import datetime

from ..config import (
    get_background_appointment_window_days,
    get_user_appointment_window_days,
)
from .matcher import match_reminders
from .sources import ALL_USERS, DateWindow, ReminderSource
from .types import NotificationEvent, NotificationKind

logger = logging.getLogger(__name__)


async def check_user_reminders(
    source: ReminderSource,
    user_id: str,
    now: datetime,
    window_days: int | None = None,
) -> list[NotificationEvent]:
    """Reminders due right now for a single user."""
    if window_days is None:
        window_days = get_user_appointment_window_days()
    window = DateWindow.from_today(now.date(), window_days)

    schedules = await source.load_schedules(user_id)
    appointments = await source.load_appointments(user_id, window)
    return match_reminders(now, schedules, appointments)


async def check_all_reminders(
    source: ReminderSource,
    now: datetime,
    window_days: int | None = None,
) -> list[NotificationEvent]:
    """Reminders due right now across every user."""
    if window_days is None:
        window_days = get_background_appointment_window_days()
    window = DateWindow.from_today(now.date(), window_days)

    schedules = await source.load_schedules(ALL_USERS)
    appointments = await source.load_appointments(ALL_USERS, window)
    return match_reminders(now, schedules, appointments)


def log_events(events: list[NotificationEvent]) -> None:
    """Write one log line per event, tagged with the owning user."""
    for event in events:
        if event.kind == NotificationKind.medication:
            logger.info(f"{event.message} (user {event.owner_id})")
        else:
            logger.info(f"Appointment reminder for user {event.owner_id}: {event.message}")
