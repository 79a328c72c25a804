"""
Centralized configuration for the eye-care tracker.

Provides environment-aware settings shared by main.py, the web API
and the background reminder job.
"""

import os


def is_dev_mode() -> bool:
    """Check if running in development mode (--dev flag or DEV_MODE env)."""
    return os.getenv("DEV_MODE", "").lower() in ("true", "1", "yes")


def is_production() -> bool:
    """Check if running on Railway (production environment)."""
    return bool(os.environ.get("RAILWAY_ENVIRONMENT"))


def get_api_port() -> int:
    """Get API server port from env or default."""
    return int(os.getenv("API_PORT", "3001"))


def get_frontend_url() -> str:
    """Get frontend URL (the Vite dev server by default)."""
    return os.environ.get("FRONTEND_URL", "http://localhost:5173").rstrip("/")


def get_allowed_origins() -> list[str]:
    """
    Get list of allowed CORS origins.

    Includes localhost variants for dev and the production frontend URL.
    """
    hosts = ["localhost", "127.0.0.1"]
    ports = [5173, get_api_port()]
    origins = [f"http://{host}:{port}" for host in hosts for port in ports]

    frontend_url = get_frontend_url()
    if frontend_url not in origins:
        origins.append(frontend_url)

    return origins


def get_jwt_secret() -> str | None:
    """Secret used by the identity provider to sign access tokens."""
    return os.environ.get("SUPABASE_JWT_SECRET") or os.environ.get("JWT_SECRET")


def get_sentry_dsn() -> str | None:
    return os.environ.get("SENTRY_DSN") or None


# =====================================================
# Reminder settings
# =====================================================


def get_reminder_timezone() -> str | None:
    """
    IANA timezone used to derive "now" for reminder matching.

    None means the local time of the process running the check.
    """
    return os.environ.get("REMINDER_TIMEZONE") or None


def get_reminder_interval_seconds() -> int:
    """Cadence of the background reminder check."""
    return int(os.getenv("REMINDER_CHECK_INTERVAL_SECONDS", "60"))


def get_user_appointment_window_days() -> int:
    """Appointment look-ahead for the on-demand notifications endpoint."""
    return int(os.getenv("USER_APPOINTMENT_WINDOW_DAYS", "7"))


def get_background_appointment_window_days() -> int:
    """Appointment look-ahead for the background reminder job."""
    return int(os.getenv("BACKGROUND_APPOINTMENT_WINDOW_DAYS", "1"))


def is_reminder_scheduler_disabled() -> bool:
    """Check if the background reminder job is disabled (--no-scheduler)."""
    return os.getenv("DISABLE_REMINDER_SCHEDULER", "").lower() in ("true", "1", "yes")


# Required environment variables for production
# Format: (name, description, required_in_dev)
REQUIRED_ENV_VARS = [
    ("DATABASE_URL", "PostgreSQL connection string", True),
    ("SUPABASE_JWT_SECRET", "Secret used to verify access tokens", True),
    ("SENTRY_DSN", "Sentry DSN for error reporting", False),
]


def check_required_env_vars() -> tuple[bool, list[str]]:
    """
    Check that required environment variables are set.

    Returns:
        (all_ok, warnings): Tuple of success flag and list of warning messages
    """
    warnings = []
    errors = []
    in_dev = is_dev_mode()

    for name, description, required_in_dev in REQUIRED_ENV_VARS:
        value = os.environ.get(name)
        if name == "SUPABASE_JWT_SECRET":
            value = get_jwt_secret()

        if not value:
            if is_production():
                errors.append(f"  ✗ {name}: Not set ({description})")
            elif required_in_dev or not in_dev:
                warnings.append(f"  ⚠ {name}: Not set ({description})")

    if errors:
        for error in errors:
            print(error)
        return False, warnings

    return True, warnings
