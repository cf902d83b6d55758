"""Repository for Comment entity."""

from uuid import UUID

from sqlmodel import select

from src.daybook.models import Comment
from src.daybook.repositories.base import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    """Repository for Comment entity."""

    model = Comment

    async def list_for_entry(self, entry_id: UUID) -> list[Comment]:
        """List an entry's comments oldest first, insertion order breaking ties."""
        result = await self.session.execute(
            select(Comment)
            .where(Comment.entry_id == entry_id)
            .order_by(
                Comment.created_at.asc(),  # type: ignore[attr-defined]
                Comment.id.asc(),  # type: ignore[union-attr]
            )
        )
        return list(result.scalars().all())
