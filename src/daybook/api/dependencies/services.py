"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.daybook.api.dependencies.db import DBSession
from src.daybook.core.config import get_settings
from src.daybook.core.storage import ObjectStore, get_object_store
from src.daybook.repositories import (
    CommentRepository,
    EntryRepository,
    ProfileRepository,
    ProjectRepository,
)
from src.daybook.services import CommentService, EntryService, ProfileService, ProjectService


def get_object_store_dependency() -> ObjectStore:
    """Get the configured object store (overridable in tests)."""
    return get_object_store()


def get_project_service(session: DBSession) -> ProjectService:
    """Get project service."""
    return ProjectService(
        ProjectRepository(session),
        session,
        supported_durations=get_settings().supported_durations,
    )


def get_entry_service(
    session: DBSession,
    object_store: Annotated[ObjectStore, Depends(get_object_store_dependency)],
) -> EntryService:
    """Get entry service with the object store for image uploads."""
    return EntryService(EntryRepository(session), session, object_store)


def get_comment_service(session: DBSession) -> CommentService:
    """Get comment service."""
    return CommentService(CommentRepository(session), session)


def get_profile_service(session: DBSession) -> ProfileService:
    """Get profile service."""
    return ProfileService(ProfileRepository(session), session)


ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
EntryServiceDep = Annotated[EntryService, Depends(get_entry_service)]
CommentServiceDep = Annotated[CommentService, Depends(get_comment_service)]
ProfileServiceDep = Annotated[ProfileService, Depends(get_profile_service)]
