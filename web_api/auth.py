"""
JWT authentication utilities for the web API.

Sign-up, sign-in and password reset are handled by the hosted identity
provider (Supabase Auth). This module only verifies the access tokens it
issues:
- HS256 signature checked against the project's JWT secret
- Audience must be "authenticated"
- Token taken from the Authorization header, or the session cookie
"""

from datetime import datetime, timedelta, timezone

import jwt
from fastapi import HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncConnection

from core.config import get_jwt_secret
from core.queries.users import ensure_user_profile

JWT_SECRET = get_jwt_secret()
JWT_ALGORITHM = "HS256"
JWT_AUDIENCE = "authenticated"
JWT_EXPIRATION_HOURS = 1


def create_jwt(user_id: str, email: str) -> str:
    """
    Create a signed access token shaped like the provider's.

    Used for local development and tests; production tokens come from
    the identity provider.
    """
    if not JWT_SECRET:
        raise ValueError("SUPABASE_JWT_SECRET environment variable not set")

    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "email": email,
        "aud": JWT_AUDIENCE,
        "role": "authenticated",
        "iat": now,
        "exp": now + timedelta(hours=JWT_EXPIRATION_HOURS),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)


def verify_jwt(token: str) -> dict | None:
    """
    Verify and decode an access token.

    Returns:
        Decoded payload dict if valid, None if invalid
    """
    if not JWT_SECRET:
        raise ValueError("SUPABASE_JWT_SECRET environment variable not set")

    try:
        return jwt.decode(
            token, JWT_SECRET, algorithms=[JWT_ALGORITHM], audience=JWT_AUDIENCE
        )
    except jwt.InvalidTokenError:
        return None


def _get_token(request: Request) -> str | None:
    """Bearer token from the Authorization header, else the session cookie."""
    header = request.headers.get("authorization", "")
    scheme, _, credentials = header.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return request.cookies.get("session")


async def get_current_user(request: Request) -> dict:
    """
    FastAPI dependency to get the current authenticated user.

    Returns:
        The decoded JWT payload; "sub" is the user id

    Raises:
        HTTPException: 401 if not authenticated or invalid token
    """
    token = _get_token(request)
    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")

    payload = verify_jwt(token)
    if not payload or not payload.get("sub"):
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    return payload


def profile_claims(user: dict) -> dict | None:
    """
    Profile fields carried by the token, or None without an email claim.

    The provider puts the sign-up form's name in user_metadata.full_name.
    """
    email = user.get("email")
    if not email:
        return None
    return {
        "email": email,
        "full_name": (user.get("user_metadata") or {}).get("full_name"),
    }


async def ensure_profile(conn: AsyncConnection, user: dict) -> None:
    """Create the caller's user_info row from token claims if missing."""
    claims = profile_claims(user)
    if claims:
        await ensure_user_profile(conn, user["sub"], **claims)
