"""
Medication and appointment reminders.

Public API:
    match_reminders(now, schedules, appointments) - Pure matching routine
    check_user_reminders(source, user_id, now) - On-demand check for one user
    check_all_reminders(source, now) - Check across all users
    init_reminder_scheduler() / shutdown_reminder_scheduler() - Background job
"""

from .matcher import match_reminders
from .scheduler import (
    init_reminder_scheduler,
    run_reminder_check,
    shutdown_reminder_scheduler,
)
from .service import check_all_reminders, check_user_reminders, log_events
from .sources import (
    ALL_USERS,
    DatabaseReminderSource,
    DateWindow,
    OwnerScope,
    ReminderSource,
    StaticReminderSource,
)
from .types import Appointment, MedicationSchedule, NotificationEvent, NotificationKind

__all__ = [
    # Matching
    "match_reminders",
    "check_user_reminders",
    "check_all_reminders",
    "log_events",
    # Background job
    "init_reminder_scheduler",
    "shutdown_reminder_scheduler",
    "run_reminder_check",
    # Data access
    "ALL_USERS",
    "OwnerScope",
    "DateWindow",
    "ReminderSource",
    "DatabaseReminderSource",
    "StaticReminderSource",
    # Types
    "Appointment",
    "MedicationSchedule",
    "NotificationEvent",
    "NotificationKind",
]
