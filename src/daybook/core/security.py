"""Bearer token handling for identity-provider issued JWTs."""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

from jose import JWTError, jwt

from src.daybook.core.config import get_settings


def create_access_token(
    subject: str | UUID,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a JWT access token shaped like the identity provider's tokens.

    The service never issues tokens to end users; this exists for local
    development and tests.
    """
    settings = get_settings()
    expire = datetime.now(UTC) + (expires_delta or timedelta(minutes=30))

    to_encode: dict[str, Any] = {
        "sub": str(subject),
        "exp": expire,
    }
    if settings.jwt_audience:
        to_encode["aud"] = settings.jwt_audience
    return jwt.encode(  # type: ignore[no-any-return]
        to_encode,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str) -> dict[str, Any] | None:
    """Decode and validate JWT token. Returns None on any error."""
    settings = get_settings()
    options = {"verify_aud": settings.jwt_audience is not None}
    try:
        return jwt.decode(  # type: ignore[no-any-return]
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            options=options,
        )
    except JWTError:
        return None


def actor_id_from_token(token: str) -> UUID | None:
    """Return the user id carried by a valid token, or None."""
    payload = decode_token(token)
    if payload is None:
        return None

    subject = payload.get("sub")
    if not subject:
        return None

    try:
        return UUID(str(subject))
    except ValueError:
        return None
