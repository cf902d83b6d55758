"""Repository for Profile entity."""

from collections.abc import Iterable
from uuid import UUID

from sqlmodel import select

from src.daybook.models import Profile
from src.daybook.repositories.base import BaseRepository


class ProfileRepository(BaseRepository[Profile]):
    """Repository for Profile entity."""

    model = Profile

    async def get_many(self, ids: Iterable[UUID]) -> list[Profile]:
        unique_ids = set(ids)
        if not unique_ids:
            return []
        result = await self.session.execute(
            select(Profile).where(Profile.id.in_(unique_ids))  # type: ignore[attr-defined]
        )
        return list(result.scalars().all())

    async def get_by_username(self, username: str) -> Profile | None:
        result = await self.session.execute(select(Profile).where(Profile.username == username))
        return result.scalar_one_or_none()
