"""Comment schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class CommentCreate(BaseModel):
    content: str = Field(max_length=2000)


class CommentRead(BaseModel):
    id: int
    entry_id: UUID
    author_id: UUID
    author_name: str
    content: str
    created_at: datetime
