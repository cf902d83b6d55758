"""Repository for Project entity."""

from uuid import UUID

from sqlmodel import select

from src.daybook.models import Project
from src.daybook.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project entity."""

    model = Project

    async def list_by_owner(self, owner_id: UUID, limit: int | None = None) -> list[Project]:
        """List an owner's projects, newest first."""
        query = (
            select(Project)
            .where(Project.owner_id == owner_id)
            .order_by(Project.created_at.desc(), Project.id.desc())  # type: ignore[attr-defined]
        )
        if limit is not None:
            query = query.limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_public(self, limit: int | None = None) -> list[Project]:
        """List public projects, newest first."""
        query = (
            select(Project)
            .where(Project.is_public == True)  # noqa: E712
            .order_by(Project.created_at.desc(), Project.id.desc())  # type: ignore[attr-defined]
        )
        if limit is not None:
            query = query.limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())
