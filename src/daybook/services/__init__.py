from src.daybook.services.comment_service import CommentService
from src.daybook.services.entry_service import EntryService
from src.daybook.services.profile_service import ProfileService
from src.daybook.services.project_service import ProjectService

__all__ = ["CommentService", "EntryService", "ProfileService", "ProjectService"]
