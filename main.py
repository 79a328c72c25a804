"""
Unified backend entry point.

Architecture:
- One Python process, one asyncio event loop
- Two peer services running concurrently:
  1. FastAPI (HTTP API for the web frontend)
  2. Reminder scheduler (APScheduler job checking reminders every minute)

We use FastAPI's lifespan to manage startup/shutdown. The lifespan pattern
gives us uvicorn's signal handling and --reload for free.

Run with: python main.py [--no-scheduler] [--port PORT]
"""

import os
import sys
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path

project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

# Load .env.local first (if exists), then .env as fallback
# .env.local is gitignored and used for local dev overrides
load_dotenv(project_root / ".env.local")  # Local overrides (gitignored)
load_dotenv()  # Fallback to .env

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from core.config import (
    check_required_env_vars,
    get_allowed_origins,
    get_api_port,
    get_sentry_dsn,
    is_production,
    is_reminder_scheduler_disabled,
)
from core.database import close_engine
from core.reminders import scheduler as reminder_scheduler
from web_api.routes.appointments import router as appointments_router
from web_api.routes.notifications import router as notifications_router
from web_api.routes.quotes import router as quotes_router
from web_api.routes.schedules import router as schedules_router
from web_api.routes.users import router as users_router

if get_sentry_dsn():
    sentry_sdk.init(
        dsn=get_sentry_dsn(),
        environment="production" if is_production() else "development",
        traces_sample_rate=0.0,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    Starts the reminder scheduler alongside the HTTP server in the same
    event loop.
    """
    ok, warnings = check_required_env_vars()
    for warning in warnings:
        print(warning)
    if not ok:
        raise RuntimeError("Missing required environment variables")

    if is_reminder_scheduler_disabled():
        print("Reminder scheduler disabled (--no-scheduler or DISABLE_REMINDER_SCHEDULER=true)")
    else:
        reminder_scheduler.init_reminder_scheduler()

    yield

    print("Shutting down peer services...")
    reminder_scheduler.shutdown_reminder_scheduler()
    await close_engine()


app = FastAPI(
    title="Eye Care Tracker API",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users_router)
app.include_router(appointments_router)
app.include_router(schedules_router)
app.include_router(notifications_router)
app.include_router(quotes_router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}


@app.get("/api/status")
async def api_status():
    return {
        "status": "ok",
        "scheduler_running": reminder_scheduler.is_running(),
    }


# SPA - serve the built React app (only if it exists)
spa_path = project_root / "static" / "spa"
if spa_path.exists():
    assets_path = spa_path / "assets"
    if assets_path.exists():
        app.mount("/assets", StaticFiles(directory=assets_path), name="assets")

    @app.get("/{full_path:path}", include_in_schema=False)
    async def spa(full_path: str):
        """Serve React SPA for any non-API route."""
        return FileResponse(spa_path / "index.html")


if __name__ == "__main__":
    import argparse
    import uvicorn

    parser = argparse.ArgumentParser(description="Eye Care Tracker Server")
    parser.add_argument(
        "--no-scheduler",
        action="store_true",
        help="Disable the background reminder job (useful for running multiple dev servers)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=get_api_port(),
        help="Port to run the server on (default: API_PORT or 3001)",
    )
    args = parser.parse_args()

    # Set env var so it persists across uvicorn reloads
    if args.no_scheduler:
        os.environ["DISABLE_REMINDER_SCHEDULER"] = "true"

    # Pass app object directly (not string) to avoid module reimport issues
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=args.port,
    )
