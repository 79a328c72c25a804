"""
Dashboard quote route.

Endpoints:
- GET /api/quotes/random - A random eye-care quote
"""

from fastapi import APIRouter

from core.quotes import random_quote

router = APIRouter(prefix="/api/quotes", tags=["quotes"])


@router.get("/random")
async def get_random_quote() -> dict[str, str]:
    return {"quote": random_quote()}
