"""
Mapping of database failures to HTTP errors.

Errors the database reports about a request (constraint violations, bad
values) become 400 with the database's message. Anything else is logged,
sent to Sentry, and becomes a 500 with a fixed message.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import sentry_sdk
from fastapi import HTTPException
from sqlalchemy.exc import DBAPIError

logger = logging.getLogger(__name__)


def _provider_message(error: DBAPIError) -> str:
    """First line of the driver's error message."""
    message = str(error.orig) if error.orig is not None else str(error)
    return message.strip().splitlines()[0] if message.strip() else "Database error"


@asynccontextmanager
async def database_errors(failure_message: str) -> AsyncGenerator[None, None]:
    """
    Translate exceptions raised inside the block into HTTPExceptions.

    Usage:
        async with database_errors("Failed to fetch appointments"):
            async with get_connection() as conn:
                rows = await list_appointments(conn, user_id)
    """
    try:
        yield
    except HTTPException:
        raise
    except DBAPIError as e:
        logger.warning(f"{failure_message}: {e}")
        raise HTTPException(status_code=400, detail=_provider_message(e)) from e
    except Exception as e:
        logger.exception(failure_message)
        sentry_sdk.capture_exception(e)
        raise HTTPException(status_code=500, detail=failure_message) from e
