"""
Data access for reminder matching.

The matcher never touches the database. Callers load its inputs through a
ReminderSource, which is passed in rather than looked up globally, so the
background job and the HTTP endpoint can each be given their own source
(and tests can use an in-memory one).
"""

from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Protocol, Sequence

from sqlalchemy.ext.asyncio import AsyncConnection

from ..database import get_connection
from ..queries import appointments as appointment_queries
from ..queries import schedules as schedule_queries
from .types import Appointment, MedicationSchedule


class _AllUsers:
    def __repr__(self) -> str:
        return "ALL_USERS"


# Owner scope: a single user id, or every user
ALL_USERS = _AllUsers()
OwnerScope = str | _AllUsers


@dataclass(frozen=True)
class DateWindow:
    """Inclusive range of calendar dates."""

    start: date
    end: date

    @classmethod
    def from_today(cls, today: date, days: int) -> "DateWindow":
        return cls(start=today, end=today + timedelta(days=days))

    def __contains__(self, day: date) -> bool:
        return self.start <= day <= self.end


class ReminderSource(Protocol):
    async def load_schedules(self, scope: OwnerScope) -> Sequence[MedicationSchedule]:
        ...

    async def load_appointments(
        self, scope: OwnerScope, window: DateWindow
    ) -> Sequence[Appointment]:
        ...


def _user_id(scope: OwnerScope) -> str | None:
    return None if scope is ALL_USERS else scope


class DatabaseReminderSource:
    """ReminderSource backed by the PostgreSQL tables."""

    def __init__(
        self,
        connection_factory: Callable[
            [], AbstractAsyncContextManager[AsyncConnection]
        ] = get_connection,
    ):
        self._connect = connection_factory

    async def load_schedules(self, scope: OwnerScope) -> list[MedicationSchedule]:
        async with self._connect() as conn:
            rows = await schedule_queries.get_schedules(conn, user_id=_user_id(scope))
        return [MedicationSchedule.from_row(row) for row in rows]

    async def load_appointments(
        self, scope: OwnerScope, window: DateWindow
    ) -> list[Appointment]:
        async with self._connect() as conn:
            rows = await appointment_queries.get_appointments_in_window(
                conn, window.start, window.end, user_id=_user_id(scope)
            )
        return [Appointment.from_row(row) for row in rows]


class StaticReminderSource:
    """In-memory ReminderSource over fixed records."""

    def __init__(
        self,
        schedules: Sequence[MedicationSchedule] = (),
        appointments: Sequence[Appointment] = (),
    ):
        self.schedules = list(schedules)
        self.appointments = list(appointments)

    async def load_schedules(self, scope: OwnerScope) -> list[MedicationSchedule]:
        return [
            s for s in self.schedules if scope is ALL_USERS or s.owner_id == scope
        ]

    async def load_appointments(
        self, scope: OwnerScope, window: DateWindow
    ) -> list[Appointment]:
        return [
            a
            for a in self.appointments
            if (scope is ALL_USERS or a.owner_id == scope)
            and a.next_appointment_date in window
        ]
