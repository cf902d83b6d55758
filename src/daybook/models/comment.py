"""Comment model - append-only remarks on an entry."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Index
from sqlmodel import Field, SQLModel

from src.daybook.models.base import utc_now


class Comment(SQLModel, table=True):
    """Comment entity.

    The integer primary key is assigned by the database in insertion order
    and breaks ties between comments sharing a ``created_at`` value.
    """

    __tablename__ = "comments"
    __table_args__ = (Index("ix_comments_entry_created", "entry_id", "created_at", "id"),)

    id: int | None = Field(default=None, primary_key=True)
    entry_id: UUID = Field(foreign_key="entries.id")
    author_id: UUID = Field(index=True)
    content: str = Field(max_length=2000)
    created_at: datetime = Field(default_factory=utc_now)
