# web_api/tests/test_rate_limit.py
"""Tests for the in-memory rate limiter."""

from unittest.mock import MagicMock, patch

import pytest
from fastapi import HTTPException

from web_api.rate_limit import RateLimiter


def fake_request(ip="10.0.0.1", forwarded=None):
    request = MagicMock()
    request.headers = {"x-forwarded-for": forwarded} if forwarded else {}
    request.client.host = ip
    return request


class TestRateLimiter:
    def test_allows_up_to_limit_then_429(self):
        limiter = RateLimiter(max_requests=2, window_seconds=60)
        request = fake_request()

        limiter.check(request)
        limiter.check(request)
        with pytest.raises(HTTPException) as exc_info:
            limiter.check(request)

        assert exc_info.value.status_code == 429

    def test_window_expires(self):
        limiter = RateLimiter(max_requests=1, window_seconds=60)
        request = fake_request()

        with patch("web_api.rate_limit.time.monotonic", side_effect=[0.0, 61.0]):
            limiter.check(request)
            limiter.check(request)

    def test_keys_are_separate(self):
        limiter = RateLimiter(max_requests=1, window_seconds=60)
        request = fake_request()

        limiter.check(request, key="alice")
        limiter.check(request, key="bob")

    def test_uses_first_forwarded_ip(self):
        limiter = RateLimiter(max_requests=1, window_seconds=60)

        limiter.check(fake_request(ip="10.0.0.1", forwarded="203.0.113.5, 10.0.0.1"))
        with pytest.raises(HTTPException):
            limiter.check(fake_request(ip="10.0.0.2", forwarded="203.0.113.5"))

    def test_idle_clients_are_forgotten(self):
        limiter = RateLimiter(max_requests=5, window_seconds=60)

        with patch("web_api.rate_limit.time.monotonic", side_effect=[100.0, 101.0, 200.0]):
            limiter.check(fake_request(), key="alice")
            limiter.check(fake_request(), key="bob")
            limiter.check(fake_request(), key="carol")

        assert list(limiter._requests) == ["10.0.0.1:carol"]
