"""
Tests for password hashing, session tokens and settings validation.
"""
from datetime import timedelta

import pytest

from attire.core.config import Settings
from attire.core.security import (
    create_session_token,
    get_password_hash,
    get_session_user_id,
    verify_password,
)


class TestPasswords:

    def test_hash_round_trip(self):
        hashed = get_password_hash("secret123")
        assert hashed != "secret123"
        assert verify_password("secret123", hashed)
        assert not verify_password("wrong", hashed)


class TestSessionTokens:

    def test_token_carries_user_id(self):
        assert get_session_user_id(create_session_token(42)) == 42

    def test_expired_token_is_rejected(self):
        token = create_session_token(42, expires_delta=timedelta(seconds=-1))
        assert get_session_user_id(token) is None

    def test_garbage_token_is_rejected(self):
        assert get_session_user_id("not.a.token") is None


class TestSettings:

    def test_postgres_url_uses_asyncpg(self):
        settings = Settings(
            DATABASE_URL="postgres://u:p@localhost/attire",
            SECRET_KEY="x" * 32,
            ENVIRONMENT="development",
        )
        assert settings.DATABASE_URL == "postgresql+asyncpg://u:p@localhost/attire"

    def test_cors_origins_from_comma_list(self):
        settings = Settings(
            DATABASE_URL="sqlite+aiosqlite:///:memory:",
            SECRET_KEY="x" * 32,
            ENVIRONMENT="development",
            CORS_ORIGINS="https://a.example, https://b.example",
        )
        assert settings.CORS_ORIGINS == ["https://a.example", "https://b.example"]

    def test_trusted_proxies_from_comma_list(self):
        settings = Settings(
            DATABASE_URL="sqlite+aiosqlite:///:memory:",
            SECRET_KEY="x" * 32,
            ENVIRONMENT="development",
            TRUSTED_PROXIES="10.0.0.1, 10.0.0.2",
        )
        assert settings.TRUSTED_PROXIES == ["10.0.0.1", "10.0.0.2"]

    def test_trusted_proxies_default_to_empty(self):
        settings = Settings(
            DATABASE_URL="sqlite+aiosqlite:///:memory:",
            SECRET_KEY="x" * 32,
            ENVIRONMENT="development",
        )
        assert settings.TRUSTED_PROXIES == []

    def test_production_rejects_insecure_configuration(self):
        with pytest.raises(ValueError):
            Settings(
                DATABASE_URL="sqlite+aiosqlite:///:memory:",
                SECRET_KEY="changeme-please",
                ENVIRONMENT="production",
                DEBUG=True,
            )
