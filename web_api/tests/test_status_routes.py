# web_api/tests/test_status_routes.py
"""Tests for unauthenticated status and quote endpoints."""

from unittest.mock import patch

from core.quotes import QUOTES


class TestHealth:
    def test_health(self, anon_client):
        response = anon_client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "OK"
        assert data["timestamp"].endswith("+00:00")

    def test_api_status_reports_scheduler(self, anon_client):
        with patch("core.reminders.scheduler._scheduler", None):
            response = anon_client.get("/api/status")

        assert response.json() == {"status": "ok", "scheduler_running": False}


class TestQuotes:
    def test_random_quote_is_from_list(self, anon_client):
        response = anon_client.get("/api/quotes/random")

        assert response.status_code == 200
        assert response.json()["quote"] in QUOTES
