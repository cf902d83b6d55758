"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import ProjectFactory, EntryFactory, ...
"""

from tests.factories.base import BaseFactory, generate_uuid, utc_now
from tests.factories.profile import ProfileFactory
from tests.factories.project import CommentFactory, EntryFactory, ProjectFactory

__all__ = [
    # Base
    "BaseFactory",
    "generate_uuid",
    "utc_now",
    # Project
    "CommentFactory",
    "EntryFactory",
    "ProjectFactory",
    # Profile
    "ProfileFactory",
]
