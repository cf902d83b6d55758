"""Tests for bearer token handling."""

from datetime import timedelta

import pytest
from jose import jwt

from src.daybook.core.config import get_settings
from src.daybook.core.security import actor_id_from_token, create_access_token, decode_token
from tests.factories import generate_uuid

pytestmark = pytest.mark.unit


class TestActorFromToken:
    def test_valid_token_yields_subject(self):
        user_id = generate_uuid()
        token = create_access_token(user_id)

        assert actor_id_from_token(token) == user_id

    def test_expired_token_is_rejected(self):
        token = create_access_token(generate_uuid(), expires_delta=timedelta(seconds=-10))

        assert decode_token(token) is None
        assert actor_id_from_token(token) is None

    def test_garbage_token_is_rejected(self):
        assert actor_id_from_token("not-a-jwt") is None

    def test_token_signed_with_other_key_is_rejected(self):
        settings = get_settings()
        token = jwt.encode(
            {"sub": str(generate_uuid())},
            "another-secret-key-that-is-at-least-32-chars",
            algorithm=settings.jwt_algorithm,
        )

        assert actor_id_from_token(token) is None

    def test_non_uuid_subject_is_rejected(self):
        token = create_access_token("service-account")

        assert decode_token(token) is not None
        assert actor_id_from_token(token) is None

    def test_missing_subject_is_rejected(self):
        settings = get_settings()
        token = jwt.encode({}, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)

        assert actor_id_from_token(token) is None
