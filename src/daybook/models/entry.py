"""Entry model - the journal entry for one day of a project."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, UniqueConstraint
from sqlmodel import Field, SQLModel

from src.daybook.models.base import utc_now


class Entry(SQLModel, table=True):
    """Entry entity, at most one per (project_id, day_number)."""

    __tablename__ = "entries"
    __table_args__ = (
        UniqueConstraint("project_id", "day_number", name="uq_entries_project_day"),
        CheckConstraint("day_number >= 1", name="ck_entries_day_positive"),
    )

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_id: UUID = Field(foreign_key="projects.id", index=True)
    day_number: int
    content: str = Field(default="")
    image_url: str | None = Field(default=None, max_length=2048)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
