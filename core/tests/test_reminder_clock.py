"""Tests for reminder wall-clock helpers."""

from datetime import datetime, timezone
from unittest.mock import patch

import pytz

from core.timezone import localize, now_local, to_local


class TestNowLocal:
    def test_is_naive_and_whole_seconds(self):
        now = now_local()

        assert now.tzinfo is None
        assert now.microsecond == 0

    def test_uses_configured_timezone(self, monkeypatch):
        monkeypatch.setenv("REMINDER_TIMEZONE", "Asia/Tokyo")
        fixed = datetime(2024, 3, 1, 23, 30, tzinfo=timezone.utc)

        with patch("core.timezone.datetime") as mock_datetime:
            mock_datetime.now.side_effect = lambda tz=None: fixed.astimezone(tz)
            now = now_local()

        # 23:30 UTC is 08:30 the next day in Tokyo
        assert now == datetime(2024, 3, 2, 8, 30)

    def test_explicit_zone_overrides_env(self, monkeypatch):
        monkeypatch.setenv("REMINDER_TIMEZONE", "Asia/Tokyo")
        fixed = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)

        with patch("core.timezone.datetime") as mock_datetime:
            mock_datetime.now.side_effect = lambda tz=None: fixed.astimezone(tz)
            now = now_local("America/New_York")

        assert now == datetime(2024, 3, 1, 7, 0)


class TestToLocal:
    def test_naive_is_unchanged(self):
        dt = datetime(2024, 3, 1, 8, 0)

        assert to_local(dt, "Asia/Tokyo") is dt

    def test_aware_is_converted(self):
        dt = pytz.utc.localize(datetime(2024, 7, 1, 12, 0))

        assert to_local(dt, "Europe/London") == datetime(2024, 7, 1, 13, 0)


class TestLocalize:
    def test_attaches_zone_offset(self):
        dt = datetime(2024, 7, 1, 8, 0)

        assert localize(dt, "Europe/London").isoformat() == "2024-07-01T08:00:00+01:00"

    def test_uses_configured_timezone(self, monkeypatch):
        monkeypatch.setenv("REMINDER_TIMEZONE", "Asia/Tokyo")

        assert localize(datetime(2024, 3, 1, 8, 0)).utcoffset().total_seconds() == 9 * 3600

    def test_aware_is_unchanged(self):
        dt = pytz.utc.localize(datetime(2024, 3, 1, 8, 0))

        assert localize(dt, "Asia/Tokyo") is dt
