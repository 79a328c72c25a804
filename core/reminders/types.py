"""Reminder record types.

Schedules and appointments are read-only snapshots of database rows;
NotificationEvent is derived per matching run and never persisted.
"""

import enum
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from ..timezone import localize


class NotificationKind(str, enum.Enum):
    medication = "medication"
    appointment = "appointment"


@dataclass(frozen=True)
class MedicationSchedule:
    """A daily eye-drop dosing plan."""

    schedule_id: int
    owner_id: str
    medication_name: str
    frequency: int
    times_of_day: tuple[str, ...] = ()  # "HH:MM", not deduplicated
    notes: str | None = None

    def __post_init__(self):
        # Callers may pass a list; keep the record hashable
        object.__setattr__(self, "times_of_day", tuple(self.times_of_day))

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "MedicationSchedule":
        return cls(
            schedule_id=row["schedule_id"],
            owner_id=str(row["user_id"]),
            medication_name=row["medication_name"],
            frequency=row["frequency"],
            times_of_day=tuple(row.get("times_of_day") or ()),
            notes=row.get("notes"),
        )


@dataclass(frozen=True)
class Appointment:
    """An eye-care visit record."""

    appointment_id: int
    owner_id: str
    next_appointment_date: date
    last_checkup_date: date | None = None
    notes: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Appointment":
        return cls(
            appointment_id=row["appointment_id"],
            owner_id=str(row["user_id"]),
            next_appointment_date=row["next_appointment_date"],
            last_checkup_date=row.get("last_checkup_date"),
            notes=row.get("notes"),
        )


@dataclass(frozen=True)
class NotificationEvent:
    """A reminder that is due right now."""

    kind: NotificationKind
    title: str
    message: str
    occurred_at: datetime
    owner_id: str | None = None

    def to_response(self) -> dict[str, str]:
        """Shape used by the notifications endpoint."""
        return {
            "type": self.kind.value,
            "title": self.title,
            "message": self.message,
            "timestamp": localize(self.occurred_at).isoformat(),
        }
