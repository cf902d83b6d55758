from src.daybook.schemas.comment import CommentCreate, CommentRead
from src.daybook.schemas.entry import EntryRead, EntryWrite
from src.daybook.schemas.profile import ProfileRead, ProfileUpdate
from src.daybook.schemas.project import (
    ProgressRead,
    ProjectCreate,
    ProjectRead,
    PublicProjectRead,
)

__all__ = [
    # Comment
    "CommentCreate",
    "CommentRead",
    # Entry
    "EntryRead",
    "EntryWrite",
    # Profile
    "ProfileRead",
    "ProfileUpdate",
    # Project
    "ProgressRead",
    "ProjectCreate",
    "ProjectRead",
    "PublicProjectRead",
]
