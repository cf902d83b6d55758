"""Repository layer - data access abstraction."""

from src.daybook.repositories.base import BaseRepository
from src.daybook.repositories.comment import CommentRepository
from src.daybook.repositories.entry import EntryRepository
from src.daybook.repositories.profile import ProfileRepository
from src.daybook.repositories.project import ProjectRepository

__all__ = [
    "BaseRepository",
    "CommentRepository",
    "EntryRepository",
    "ProfileRepository",
    "ProjectRepository",
]
