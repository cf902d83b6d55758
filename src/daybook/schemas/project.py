"""Project schemas for API request/response."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class ProjectCreate(BaseModel):
    """Schema for creating a project.

    Emptiness of the title and the allowed durations are domain rules and
    are checked by the project service, not here.
    """

    title: str = Field(max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    duration_days: int = 7
    is_public: bool = True
    start_date: date | None = None

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                return None
        return v


class ProjectRead(BaseModel):
    """Schema for reading a project."""

    id: UUID
    owner_id: UUID
    title: str
    description: str | None
    duration_days: int
    is_public: bool
    start_date: date
    created_at: datetime

    model_config = {"from_attributes": True}


class PublicProjectRead(ProjectRead):
    """Project as listed in the public directory, with its owner's name."""

    owner_name: str


class ProgressRead(BaseModel):
    """Completion of a project derived from its entries."""

    completed: int
    total: int
    percent: int = Field(ge=0, le=100)
    current_day: int | None = Field(
        default=None, description="Today's day number, or null outside the project window"
    )

    model_config = {"from_attributes": True}
