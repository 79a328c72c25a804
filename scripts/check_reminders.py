#!/usr/bin/env python3
"""
Run one reminder check against the configured database.

Loads every user's schedules and near-term appointments, runs the matcher
and prints the reminders that would fire. Nothing is sent or stored.

Usage:
    python scripts/check_reminders.py
    python scripts/check_reminders.py --at 2024-03-01T08:00
    python scripts/check_reminders.py --user 5b0f...-uuid --window-days 7

Requirements:
    - DATABASE_URL set (in .env or .env.local)
"""

import argparse
import asyncio
import logging
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
load_dotenv(project_root / ".env")
load_dotenv(project_root / ".env.local", override=True)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    force=True,
)
logger = logging.getLogger(__name__)


async def main(at: datetime | None, user_id: str | None, window_days: int | None):
    from core.database import close_engine, is_configured
    from core.reminders import (
        DatabaseReminderSource,
        check_all_reminders,
        check_user_reminders,
        log_events,
    )
    from core.timezone import now_local, to_local

    if not is_configured():
        print("ERROR: DATABASE_URL is not set")
        sys.exit(1)

    now = to_local(at) if at else now_local()
    source = DatabaseReminderSource()

    print(f"\nChecking reminders at {now.isoformat()}")
    try:
        if user_id:
            events = await check_user_reminders(source, user_id, now, window_days)
        else:
            events = await check_all_reminders(source, now, window_days)
    finally:
        await close_engine()

    log_events(events)
    print(f"{len(events)} reminder(s) due")
    for event in events:
        print(f"  [{event.kind.value}] {event.title}: {event.message} (user {event.owner_id})")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run one reminder check")
    parser.add_argument(
        "--at",
        type=datetime.fromisoformat,
        help="Check as of this time (ISO format, default: now)",
    )
    parser.add_argument("--user", help="Only check this user id")
    parser.add_argument(
        "--window-days",
        type=int,
        help="Appointment look-ahead in days (default depends on --user)",
    )
    args = parser.parse_args()

    asyncio.run(main(args.at, args.user, args.window_days))
