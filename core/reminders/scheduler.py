"""
APScheduler-based background reminder check.

One interval job runs every REMINDER_CHECK_INTERVAL_SECONDS (default 60),
loads every user's schedules and near-term appointments, and logs the
reminders that are due. Events are not persisted or retried: a failed or
missed tick produces no reminders for that minute.
"""

import logging
from datetime import datetime, timedelta

import sentry_sdk
from apscheduler.schedulers.asyncio import AsyncIOScheduler

from ..config import get_reminder_interval_seconds
from ..timezone import now_local
from .service import check_all_reminders, log_events
from .sources import DatabaseReminderSource, ReminderSource
from .types import NotificationEvent

logger = logging.getLogger(__name__)

REMINDER_JOB_ID = "reminder_check"

_scheduler: AsyncIOScheduler | None = None


# =============================================================================
# Job execution
# =============================================================================


async def run_reminder_check(source: ReminderSource) -> list[NotificationEvent]:
    """
    Run one background matching cycle.

    This is the job function called by APScheduler.

    Returns:
        The events that were logged (empty if the cycle failed)
    """
    now = now_local()
    logger.debug(f"Checking for reminders at {now.isoformat()}")

    try:
        events = await check_all_reminders(source, now)
    except Exception as e:
        logger.exception(f"Reminder check failed: {e}")
        sentry_sdk.capture_exception(e)
        return []

    log_events(events)
    return events


# =============================================================================
# Scheduler initialization and shutdown
# =============================================================================


def init_reminder_scheduler(
    source: ReminderSource | None = None,
    interval_seconds: int | None = None,
) -> AsyncIOScheduler:
    """
    Start the scheduler with the reminder check job.

    Call this during app startup (in FastAPI lifespan).

    Args:
        source: Where to load schedules and appointments from.
                Defaults to the application database.
        interval_seconds: Check cadence. Defaults to REMINDER_CHECK_INTERVAL_SECONDS.
    """
    global _scheduler

    if _scheduler is not None:
        return _scheduler

    if source is None:
        source = DatabaseReminderSource()
    if interval_seconds is None:
        interval_seconds = get_reminder_interval_seconds()

    _scheduler = AsyncIOScheduler(
        job_defaults={
            "coalesce": True,  # Combine missed runs into one
            "max_instances": 1,
            "misfire_grace_time": 30,  # Late ticks past this are skipped, not backfilled
        },
    )
    # First tick on the next minute boundary, so checks land early in each minute
    start_at = datetime.now().replace(second=0, microsecond=0) + timedelta(minutes=1)

    _scheduler.add_job(
        run_reminder_check,
        trigger="interval",
        seconds=interval_seconds,
        start_date=start_at,
        id=REMINDER_JOB_ID,
        replace_existing=True,
        kwargs={"source": source},
    )
    _scheduler.start()
    print(f"Reminder scheduler started (every {interval_seconds}s)")

    return _scheduler


def shutdown_reminder_scheduler() -> None:
    """
    Shutdown the scheduler gracefully.

    Call this during app shutdown.
    """
    global _scheduler
    if _scheduler:
        _scheduler.shutdown(wait=False)
        _scheduler = None
        print("Reminder scheduler stopped")


def is_running() -> bool:
    return bool(_scheduler and _scheduler.running)
