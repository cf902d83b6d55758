"""Project directory - creation, listings and visibility-checked lookup."""

from collections.abc import Sequence
from datetime import date
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.daybook.core.db import storage_errors
from src.daybook.core.exceptions import Forbidden, InvalidDuration, InvalidTitle, NotFound
from src.daybook.core.logging import get_logger
from src.daybook.models import Project
from src.daybook.repositories import ProjectRepository
from src.daybook.services.guard import can_read

logger = get_logger(__name__)


class ProjectService:
    """Project directory service - business logic only."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        session: AsyncSession,
        supported_durations: Sequence[int] = (7, 14, 21, 28),
    ):
        self.project_repo = project_repo
        self.session = session
        self.supported_durations = tuple(supported_durations)

    async def create_project(
        self,
        actor: UUID | None,
        title: str,
        description: str | None = None,
        duration_days: int = 7,
        is_public: bool = True,
        start_date: date | None = None,
    ) -> Project:
        """Create a project owned by ``actor``.

        Raises:
            Forbidden: actor is anonymous
            InvalidTitle: title is blank after trimming
            InvalidDuration: duration_days is not a supported length
            StorageUnavailable: the database could not be reached
        """
        if actor is None:
            raise Forbidden("You must be signed in to create a project")
        clean_title = title.strip()
        if not clean_title:
            raise InvalidTitle()
        if duration_days not in self.supported_durations:
            allowed = ", ".join(str(d) for d in self.supported_durations)
            raise InvalidDuration(f"Duration must be one of {allowed} days")

        project = Project(
            owner_id=actor,
            title=clean_title,
            description=(description or "").strip() or None,
            duration_days=duration_days,
            is_public=is_public,
        )
        if start_date is not None:
            project.start_date = start_date

        async with storage_errors(self.session):
            try:
                self.project_repo.add(project)
                await self.session.commit()
                await self.session.refresh(project)
            except Exception:
                await self.session.rollback()
                raise

        logger.info(
            "Project created",
            project_id=str(project.id),
            duration_days=duration_days,
            is_public=is_public,
        )
        return project

    async def get_project(self, project_id: UUID, actor: UUID | None) -> Project:
        """Get a project the actor may read.

        Missing projects and private projects of other users are both
        reported as NotFound.
        """
        async with storage_errors(self.session):
            project = await self.project_repo.get_by_id(project_id)
        if project is None or not can_read(actor, project):
            raise NotFound(f"Project {project_id} not found")
        return project

    async def get_for_write(self, project_id: UUID) -> Project:
        """Get a project for a write, leaving the ownership check to the caller.

        Only a missing project is NotFound; writers that are not the owner
        are rejected with Forbidden by the entry service, whatever the
        project's visibility.
        """
        async with storage_errors(self.session):
            project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise NotFound(f"Project {project_id} not found")
        return project

    async def list_owned(self, actor: UUID | None, limit: int | None = None) -> list[Project]:
        """List the actor's projects, newest first."""
        if actor is None:
            raise Forbidden("You must be signed in to list your projects")
        async with storage_errors(self.session):
            return await self.project_repo.list_by_owner(actor, limit)

    async def list_public(self, limit: int | None = None) -> list[Project]:
        """List public projects, newest first."""
        async with storage_errors(self.session):
            return await self.project_repo.list_public(limit)
