"""Tests for DATABASE_URL handling."""

import pytest

from core.database import _get_database_url, get_sync_database_url, is_configured


class TestDatabaseUrls:
    @pytest.mark.parametrize(
        "url",
        [
            "postgresql://u:p@db.example.com:6543/postgres",
            "postgres://u:p@db.example.com:6543/postgres",
            "postgresql+asyncpg://u:p@db.example.com:6543/postgres",
        ],
    )
    def test_async_and_sync_forms(self, monkeypatch, url):
        monkeypatch.setenv("DATABASE_URL", url)

        assert _get_database_url() == "postgresql+asyncpg://u:p@db.example.com:6543/postgres"
        assert get_sync_database_url() == "postgresql://u:p@db.example.com:6543/postgres"

    def test_missing_url(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)

        assert is_configured() is False
        with pytest.raises(ValueError):
            _get_database_url()
        with pytest.raises(ValueError):
            get_sync_database_url()
