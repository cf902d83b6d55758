"""Model exports.

Import from here: `from src.daybook.models import Project, Entry`
"""

from src.daybook.models.comment import Comment
from src.daybook.models.entry import Entry
from src.daybook.models.profile import ANONYMOUS_NAME, Profile
from src.daybook.models.project import Project

__all__ = [
    "ANONYMOUS_NAME",
    "Comment",
    "Entry",
    "Profile",
    "Project",
]
