"""Tests for reminder data sources."""

from contextlib import asynccontextmanager
from datetime import date
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from core.reminders.sources import (
    ALL_USERS,
    DatabaseReminderSource,
    DateWindow,
    StaticReminderSource,
)
from core.reminders.types import Appointment, MedicationSchedule


def connection_factory(conn):
    @asynccontextmanager
    async def connect():
        yield conn

    return connect


class TestDateWindow:
    def test_from_today_is_inclusive(self):
        window = DateWindow.from_today(date(2024, 3, 1), 7)

        assert window == DateWindow(date(2024, 3, 1), date(2024, 3, 8))
        assert date(2024, 3, 1) in window
        assert date(2024, 3, 8) in window
        assert date(2024, 3, 9) not in window
        assert date(2024, 2, 29) not in window

    def test_crosses_month_end(self):
        window = DateWindow.from_today(date(2024, 2, 29), 1)

        assert window.end == date(2024, 3, 1)


class TestDatabaseReminderSource:
    @pytest.mark.asyncio
    async def test_load_schedules_for_one_user(self):
        conn = AsyncMock()
        rows = [
            {
                "schedule_id": 1,
                "user_id": "alice",
                "medication_name": "Latanoprost",
                "frequency": 2,
                "times_of_day": ["08:00", "20:00"],
                "notes": None,
            }
        ]
        source = DatabaseReminderSource(connection_factory(conn))

        with patch(
            "core.reminders.sources.schedule_queries.get_schedules",
            new_callable=AsyncMock,
            return_value=rows,
        ) as mock_get:
            schedules = await source.load_schedules("alice")

        mock_get.assert_awaited_once_with(conn, user_id="alice")
        assert schedules == [
            MedicationSchedule(1, "alice", "Latanoprost", 2, ["08:00", "20:00"])
        ]

    @pytest.mark.asyncio
    async def test_load_schedules_for_all_users_passes_no_filter(self):
        conn = AsyncMock()
        source = DatabaseReminderSource(connection_factory(conn))

        with patch(
            "core.reminders.sources.schedule_queries.get_schedules",
            new_callable=AsyncMock,
            return_value=[],
        ) as mock_get:
            await source.load_schedules(ALL_USERS)

        mock_get.assert_awaited_once_with(conn, user_id=None)

    @pytest.mark.asyncio
    async def test_load_appointments_uses_window(self):
        conn = AsyncMock()
        rows = [
            {
                "appointment_id": 7,
                "user_id": "alice",
                "last_checkup_date": date(2023, 9, 1),
                "next_appointment_date": date(2024, 3, 2),
                "notes": "Dilated exam",
            }
        ]
        source = DatabaseReminderSource(connection_factory(conn))
        window = DateWindow(date(2024, 3, 1), date(2024, 3, 2))

        with patch(
            "core.reminders.sources.appointment_queries.get_appointments_in_window",
            new_callable=AsyncMock,
            return_value=rows,
        ) as mock_get:
            appointments = await source.load_appointments(ALL_USERS, window)

        mock_get.assert_awaited_once_with(
            conn, date(2024, 3, 1), date(2024, 3, 2), user_id=None
        )
        assert appointments == [
            Appointment(
                appointment_id=7,
                owner_id="alice",
                next_appointment_date=date(2024, 3, 2),
                last_checkup_date=date(2023, 9, 1),
                notes="Dilated exam",
            )
        ]

    @pytest.mark.asyncio
    async def test_real_query_runs_against_connection(self):
        """Without patching, the SQL query is executed on the given connection."""
        conn = AsyncMock()
        result = MagicMock()
        result.mappings.return_value = []
        conn.execute.return_value = result
        source = DatabaseReminderSource(connection_factory(conn))

        schedules = await source.load_schedules("alice")

        assert schedules == []
        conn.execute.assert_awaited_once()


class TestStaticReminderSource:
    @pytest.mark.asyncio
    async def test_filters_by_owner_and_window(self):
        source = StaticReminderSource(
            appointments=[
                Appointment(1, "alice", date(2024, 3, 1)),
                Appointment(2, "bob", date(2024, 3, 1)),
                Appointment(3, "alice", date(2024, 3, 10)),
            ]
        )
        window = DateWindow(date(2024, 3, 1), date(2024, 3, 2))

        alice = await source.load_appointments("alice", window)
        everyone = await source.load_appointments(ALL_USERS, window)

        assert [a.appointment_id for a in alice] == [1]
        assert [a.appointment_id for a in everyone] == [1, 2]
