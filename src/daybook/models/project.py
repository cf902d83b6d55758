"""Project model - a time-boxed personal project owned by one user."""

from datetime import date, datetime
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, Index
from sqlmodel import Field, SQLModel

from src.daybook.models.base import utc_now, utc_today


class Project(SQLModel, table=True):
    """Project entity.

    ``owner_id`` and ``duration_days`` are fixed at creation: entries are
    keyed by day number, so shrinking the duration would orphan them.
    """

    __tablename__ = "projects"
    __table_args__ = (
        CheckConstraint("duration_days > 0", name="ck_projects_duration_positive"),
        Index("ix_projects_owner_created", "owner_id", "created_at"),
        Index("ix_projects_public_created", "is_public", "created_at"),
    )

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    owner_id: UUID = Field(index=True)
    title: str = Field(max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    duration_days: int
    is_public: bool = Field(default=True)
    start_date: date = Field(default_factory=utc_today)
    created_at: datetime = Field(default_factory=utc_now)
