"""Profile schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class ProfileUpdate(BaseModel):
    username: str | None = Field(default=None, max_length=50)
    display_name: str | None = Field(default=None, max_length=100)
    bio: str | None = Field(default=None, max_length=500)

    @field_validator("username", "display_name", "bio")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                return None
        return v


class ProfileRead(BaseModel):
    id: UUID
    username: str | None
    display_name: str | None
    bio: str | None
    created_at: datetime

    model_config = {"from_attributes": True}
