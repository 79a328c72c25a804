"""Simple in-memory rate limiter for polled endpoints."""

import time

from fastapi import HTTPException, Request


class RateLimiter:
    """
    Sliding-window rate limiter keyed by client.

    Args:
        max_requests: Maximum requests allowed in the window.
        window_seconds: Time window in seconds.
    """

    def __init__(self, max_requests: int, window_seconds: int):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        # {key: [timestamp, ...]}
        self._requests: dict[str, list[float]] = {}
        self._last_sweep = 0.0

    def _get_client_ip(self, request: Request) -> str:
        """Extract client IP, respecting X-Forwarded-For behind reverse proxy."""
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            # First IP in the chain is the original client
            return forwarded.split(",")[0].strip()
        return request.client.host if request.client else "unknown"

    def check(self, request: Request, key: str | None = None) -> None:
        """
        Raise 429 if rate limit exceeded.

        Args:
            request: Incoming request (used for the client IP)
            key: Optional extra key, e.g. the user id, so clients behind
                one address do not share a budget
        """
        client = self._get_client_ip(request)
        if key:
            client = f"{client}:{key}"
        now = time.monotonic()
        cutoff = now - self.window_seconds

        if now - self._last_sweep >= self.window_seconds:
            self._sweep(cutoff)
            self._last_sweep = now

        recent = [t for t in self._requests.get(client, ()) if t > cutoff]
        if len(recent) >= self.max_requests:
            self._requests[client] = recent
            raise HTTPException(status_code=429, detail="Too many requests")

        recent.append(now)
        self._requests[client] = recent

    def _sweep(self, cutoff: float) -> None:
        """Drop clients with no requests inside the window."""
        for client in [c for c, entries in self._requests.items() if entries[-1] <= cutoff]:
            del self._requests[client]

    def reset(self) -> None:
        self._requests.clear()
        self._last_sweep = 0.0


# The web client polls notifications once a minute, plus once on load.
# Allow a few extra for reloads and multiple tabs.
notifications_limiter = RateLimiter(max_requests=6, window_seconds=60)
