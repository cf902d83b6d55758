"""FastAPI dependency injection definitions."""

from src.daybook.api.dependencies.auth import (
    Actor,
    OptionalActor,
    get_optional_actor,
    require_actor,
)
from src.daybook.api.dependencies.db import DBSession, get_db_session
from src.daybook.api.dependencies.services import (
    CommentServiceDep,
    EntryServiceDep,
    ProfileServiceDep,
    ProjectServiceDep,
    get_comment_service,
    get_entry_service,
    get_object_store_dependency,
    get_profile_service,
    get_project_service,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "Actor",
    "OptionalActor",
    "get_optional_actor",
    "require_actor",
    # Services
    "CommentServiceDep",
    "EntryServiceDep",
    "ProfileServiceDep",
    "ProjectServiceDep",
    "get_comment_service",
    "get_entry_service",
    "get_object_store_dependency",
    "get_profile_service",
    "get_project_service",
]
