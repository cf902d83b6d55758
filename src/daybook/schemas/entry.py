"""Entry schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class EntryWrite(BaseModel):
    """Body of an entry upsert. Blank content is rejected by the entry service."""

    content: str = Field(default="", max_length=20000)


class EntryRead(BaseModel):
    id: UUID
    project_id: UUID
    day_number: int
    content: str
    image_url: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
