"""Profile model - display information keyed to the identity provider's user id."""

from datetime import datetime
from uuid import UUID

from sqlmodel import Field, SQLModel

from src.daybook.models.base import utc_now

ANONYMOUS_NAME = "Anonymous"


class Profile(SQLModel, table=True):
    """Profile entity. ``id`` is the identity provider's user id."""

    __tablename__ = "profiles"

    id: UUID = Field(primary_key=True)
    username: str | None = Field(default=None, max_length=50, unique=True)
    display_name: str | None = Field(default=None, max_length=100)
    bio: str | None = Field(default=None, max_length=500)
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def shown_name(self) -> str:
        """Name used for attribution: display name, then username."""
        return self.display_name or self.username or ANONYMOUS_NAME
