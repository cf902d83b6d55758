"""Comment threads attached to entries."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.daybook.core.db import storage_errors
from src.daybook.core.exceptions import EmptyComment, Forbidden, InvalidReference
from src.daybook.core.logging import get_logger
from src.daybook.models import Comment, Entry, Project
from src.daybook.repositories import CommentRepository
from src.daybook.services.guard import can_comment

logger = get_logger(__name__)


class CommentService:
    """Append-only comment thread per entry."""

    def __init__(self, comment_repo: CommentRepository, session: AsyncSession):
        self.comment_repo = comment_repo
        self.session = session

    async def post_comment(
        self,
        actor: UUID | None,
        entry: Entry,
        project: Project,
        content: str,
    ) -> Comment:
        """Append a comment by ``actor`` to ``entry``.

        Any signed-in user who can see the project may comment; ownership
        is not required.

        Raises:
            Forbidden: actor is anonymous or cannot see the project
            EmptyComment: content is blank after trimming
            InvalidReference: entry does not belong to project
            StorageUnavailable: the database could not be reached
        """
        if actor is None or not can_comment(actor, project):
            raise Forbidden("You must be signed in and able to view this project to comment")
        text = content.strip()
        if not text:
            raise EmptyComment()
        if entry.project_id != project.id:
            logger.error(
                "Comment target mismatch",
                entry_id=str(entry.id),
                entry_project_id=str(entry.project_id),
                project_id=str(project.id),
            )
            raise InvalidReference()

        comment = Comment(entry_id=entry.id, author_id=actor, content=text)
        async with storage_errors(self.session):
            try:
                self.comment_repo.add(comment)
                await self.session.commit()
                await self.session.refresh(comment)
            except Exception:
                await self.session.rollback()
                raise

        logger.info("Comment posted", entry_id=str(entry.id), comment_id=comment.id)
        return comment

    async def list_comments(self, entry: Entry) -> list[Comment]:
        """List the entry's comments in the order they were posted."""
        async with storage_errors(self.session):
            return await self.comment_repo.list_for_entry(entry.id)
