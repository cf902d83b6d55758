"""Project and entry factories for test data generation."""

from polyfactory import Use

from src.daybook.models import Comment, Entry, Project
from src.daybook.models.base import utc_today
from tests.factories.base import BaseFactory, generate_uuid, utc_now


class ProjectFactory(BaseFactory):
    """Factory for generating Project test data."""

    __model__ = Project

    id = Use(generate_uuid)
    owner_id = Use(generate_uuid)
    title = Use(lambda: f"Project {generate_uuid().hex[-8:]}")
    description = None
    duration_days = 7
    is_public = True
    start_date = Use(utc_today)
    created_at = Use(utc_now)

    @classmethod
    def private(cls, **kwargs):
        """Create a private project."""
        return cls.build(is_public=False, **kwargs)


class EntryFactory(BaseFactory):
    """Factory for generating Entry test data."""

    __model__ = Entry

    id = Use(generate_uuid)
    project_id = None  # Required FK - must be set explicitly
    day_number = 1
    content = "Worked on it today"
    image_url = None
    created_at = Use(utc_now)
    updated_at = Use(utc_now)


class CommentFactory(BaseFactory):
    """Factory for generating Comment test data."""

    __model__ = Comment

    id = None  # Assigned by the database
    entry_id = None  # Required FK - must be set explicitly
    author_id = Use(generate_uuid)
    content = "Nice progress!"
    created_at = Use(utc_now)
