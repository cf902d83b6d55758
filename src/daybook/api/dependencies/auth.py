"""Actor resolution from identity-provider bearer tokens.

Every route receives the actor explicitly: ``OptionalActor`` is the user id
or None for anonymous callers, ``Actor`` requires a signed-in user.
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status

from src.daybook.core.logging import bind_actor_context
from src.daybook.core.security import actor_id_from_token

_UNAUTHORIZED_HEADERS = {"WWW-Authenticate": "Bearer"}


async def get_optional_actor(
    authorization: Annotated[str | None, Header()] = None,
) -> UUID | None:
    """Return the caller's user id, or None when no token is sent.

    A token that is present but invalid is rejected rather than silently
    downgraded to an anonymous request.
    """
    if not authorization:
        bind_actor_context(None)
        return None

    if not authorization.startswith("Bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid authorization header",
            headers=_UNAUTHORIZED_HEADERS,
        )

    actor_id = actor_id_from_token(authorization[7:])
    if actor_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers=_UNAUTHORIZED_HEADERS,
        )

    bind_actor_context(actor_id)
    return actor_id


OptionalActor = Annotated[UUID | None, Depends(get_optional_actor)]


async def require_actor(actor: OptionalActor) -> UUID:
    """Require a signed-in caller."""
    if actor is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers=_UNAUTHORIZED_HEADERS,
        )
    return actor


Actor = Annotated[UUID, Depends(require_actor)]
