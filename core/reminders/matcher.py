"""
Reminder matching.

match_reminders() decides which medication times and appointments are due
at a given instant. It is a pure function: callers load the records and
deliver the events.

Medication times match on exact "HH:MM" equality with the current minute.
There is no tolerance window, so a check that runs late by a minute misses
that dose. The background job fires once per minute, which keeps this to at
most one reminder per schedule entry per minute.
"""

import math
from datetime import date, datetime, time, timedelta
from typing import Iterable

from .types import Appointment, MedicationSchedule, NotificationEvent, NotificationKind

MEDICATION_TITLE = "Medication Reminder"
APPOINTMENT_TITLE = "Appointment Reminder"

_ONE_DAY = timedelta(days=1)


def format_minute(now: datetime) -> str:
    """Zero-padded 24-hour "HH:MM" for the given instant."""
    return now.strftime("%H:%M")


def days_until(appointment_date: date, now: datetime) -> int:
    """
    Whole days from now until the appointment, rounded up.

    The appointment is taken to start at midnight of its date, so an
    appointment later today gives 0 and one tomorrow gives 1.
    """
    start = datetime.combine(appointment_date, time.min)
    return math.ceil((start - now) / _ONE_DAY)


def match_medications(
    now: datetime, schedules: Iterable[MedicationSchedule]
) -> list[NotificationEvent]:
    current_minute = format_minute(now)
    events = []
    for schedule in schedules:
        for time_of_day in schedule.times_of_day:
            if time_of_day == current_minute:
                events.append(
                    NotificationEvent(
                        kind=NotificationKind.medication,
                        title=MEDICATION_TITLE,
                        message=f"Time to take {schedule.medication_name}",
                        occurred_at=now,
                        owner_id=schedule.owner_id,
                    )
                )
    return events


def match_appointments(
    now: datetime, appointments: Iterable[Appointment]
) -> list[NotificationEvent]:
    events = []
    for appointment in appointments:
        days = days_until(appointment.next_appointment_date, now)
        if days < 0 or days > 1:
            continue
        when = "today" if days == 0 else "tomorrow"
        events.append(
            NotificationEvent(
                kind=NotificationKind.appointment,
                title=APPOINTMENT_TITLE,
                message=f"Eye appointment {when}",
                occurred_at=now,
                owner_id=appointment.owner_id,
            )
        )
    return events


def match_reminders(
    now: datetime,
    schedules: Iterable[MedicationSchedule],
    appointments: Iterable[Appointment],
) -> list[NotificationEvent]:
    """
    Compute the notification events due at `now`.

    Args:
        now: Naive datetime in the canonical reminder timezone
        schedules: Medication schedules to check
        appointments: Appointments to check (already window-filtered or not)

    Returns:
        Medication events in schedule order, then appointment events in
        appointment order
    """
    return match_medications(now, schedules) + match_appointments(now, appointments)
