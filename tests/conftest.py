"""Root test fixtures shared across all test types.

Database-backed fixtures are in tests/integration/conftest.py.
"""

import os

# Set APP_ENV to testing before any app imports to disable rate limiting
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-at-least-32-chars")

# ruff: noqa: E402 - Imports must be after env var setup
from uuid import UUID

import pytest

from src.daybook.core.config import get_settings
from tests.factories import generate_uuid

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def owner_id() -> UUID:
    return generate_uuid()


@pytest.fixture
def other_user_id() -> UUID:
    return generate_uuid()
