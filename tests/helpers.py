"""Test helper functions for common data creation patterns."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.daybook.core.security import create_access_token
from src.daybook.models import Entry, Profile, Project
from tests.factories import EntryFactory, ProfileFactory, ProjectFactory


def auth_headers(user_id: UUID) -> dict[str, str]:
    """Authorization header carrying an identity token for ``user_id``."""
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


async def create_project(session: AsyncSession, **project_kwargs) -> Project:
    """Persist a project built by ProjectFactory."""
    project = ProjectFactory.build(**project_kwargs)
    session.add(project)
    await session.commit()
    await session.refresh(project)
    return project


async def create_entry(session: AsyncSession, project: Project, **entry_kwargs) -> Entry:
    """Persist an entry for ``project``."""
    entry = EntryFactory.build(project_id=project.id, **entry_kwargs)
    session.add(entry)
    await session.commit()
    await session.refresh(entry)
    return entry


async def create_profile(session: AsyncSession, **profile_kwargs) -> Profile:
    """Persist a profile built by ProfileFactory."""
    profile = ProfileFactory.build(**profile_kwargs)
    session.add(profile)
    await session.commit()
    await session.refresh(profile)
    return profile
