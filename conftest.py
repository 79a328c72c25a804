"""Root pytest configuration."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

_root = Path(__file__).parent
load_dotenv(_root / ".env")
load_dotenv(_root / ".env.local", override=True)

# Local overrides of these would shift the clock and windows the reminder
# tests assert against
REMINDER_ENV_VARS = (
    "REMINDER_TIMEZONE",
    "REMINDER_CHECK_INTERVAL_SECONDS",
    "USER_APPOINTMENT_WINDOW_DAYS",
    "BACKGROUND_APPOINTMENT_WINDOW_DAYS",
)


@pytest.fixture(autouse=True)
def _default_reminder_settings(monkeypatch):
    for name in REMINDER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
