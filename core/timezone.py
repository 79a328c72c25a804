"""
Wall-clock helpers for reminder matching.

Schedules store bare "HH:MM" strings and appointments store bare dates,
so matching happens on naive datetimes in one canonical zone.
"""

from datetime import datetime

import pytz

from .config import get_reminder_timezone


def now_local(tz_str: str | None = None) -> datetime:
    """
    Current time as a naive datetime in the reminder timezone.

    Args:
        tz_str: IANA timezone (e.g., "Europe/London"). Defaults to
            REMINDER_TIMEZONE, falling back to the process local time.

    Returns:
        Naive datetime, truncated to whole seconds
    """
    tz_str = tz_str or get_reminder_timezone()
    if tz_str:
        now = datetime.now(pytz.timezone(tz_str)).replace(tzinfo=None)
    else:
        now = datetime.now()
    return now.replace(microsecond=0)


def to_local(dt: datetime, tz_str: str | None = None) -> datetime:
    """
    Convert an aware datetime to a naive one in the reminder timezone.

    Naive input is assumed to already be local and is returned unchanged.
    """
    if dt.tzinfo is None:
        return dt
    tz_str = tz_str or get_reminder_timezone()
    if tz_str:
        return dt.astimezone(pytz.timezone(tz_str)).replace(tzinfo=None)
    return dt.astimezone().replace(tzinfo=None)


def localize(dt: datetime, tz_str: str | None = None) -> datetime:
    """
    Attach the reminder timezone to a naive local datetime.

    Aware input is returned unchanged.
    """
    if dt.tzinfo is not None:
        return dt
    tz_str = tz_str or get_reminder_timezone()
    if tz_str:
        return pytz.timezone(tz_str).localize(dt)
    return dt.astimezone()
