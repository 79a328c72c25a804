"""
Notification polling route.

Endpoints:
- GET /api/notifications - Reminders due right now for the current user

The web client calls this on load and then once a minute, and shows each
returned reminder as a banner for a few seconds. Nothing is stored: a
reminder that isn't fetched during its minute is not delivered.
"""

from fastapi import APIRouter, Depends, Request

from core.reminders import DatabaseReminderSource, ReminderSource, check_user_reminders
from core.timezone import now_local
from web_api.auth import get_current_user
from web_api.errors import database_errors
from web_api.rate_limit import notifications_limiter

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


def get_reminder_source() -> ReminderSource:
    """FastAPI dependency providing the reminder data source."""
    return DatabaseReminderSource()


@router.get("")
async def get_my_notifications(
    request: Request,
    user: dict = Depends(get_current_user),
    source: ReminderSource = Depends(get_reminder_source),
) -> list[dict[str, str]]:
    """Medication and appointment reminders due this minute."""
    notifications_limiter.check(request, key=user["sub"])

    async with database_errors("Failed to fetch notifications"):
        events = await check_user_reminders(source, user["sub"], now_local())

    return [event.to_response() for event in events]
