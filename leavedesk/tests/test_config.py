"""
Tests for configuration validation
"""
import pytest
from pydantic import ValidationError
from leavedesk.core.config import Settings


def test_prod_settings_rejects_wildcard_origins():
    settings = Settings(
        DATABASE_URL="postgresql://test",
        JWT_SECRET_KEY="a" * 32,
        APP_ENV="prod",
        ALLOWED_ORIGINS="*"
    )

    with pytest.raises(ValueError, match="ALLOWED_ORIGINS"):
        settings.validate_production()


def test_prod_settings_rejects_short_jwt_secret():
    settings = Settings(
        DATABASE_URL="postgresql://test",
        JWT_SECRET_KEY="short",
        APP_ENV="prod",
        ALLOWED_ORIGINS="https://example.com"
    )

    with pytest.raises(ValueError, match="JWT_SECRET_KEY"):
        settings.validate_production()


def test_local_settings_allows_wildcard_origins():
    settings = Settings(
        DATABASE_URL="postgresql://test",
        JWT_SECRET_KEY="test-key",
        APP_ENV="local",
        ALLOWED_ORIGINS="*"
    )

    settings.validate_production()
    assert settings.get_allowed_origins_list() == ["*"]


def test_get_allowed_origins_list():
    settings = Settings(
        JWT_SECRET_KEY="test-key",
        ALLOWED_ORIGINS="https://example.com, https://app.example.com,"
    )
    assert settings.get_allowed_origins_list() == [
        "https://example.com",
        "https://app.example.com",
    ]


def test_invalid_app_env_rejected():
    with pytest.raises(ValidationError):
        Settings(JWT_SECRET_KEY="test-key", APP_ENV="qa")


def test_log_level_normalized():
    settings = Settings(JWT_SECRET_KEY="test-key", LOG_LEVEL="debug")
    assert settings.LOG_LEVEL == "DEBUG"


def test_capture_retries_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(JWT_SECRET_KEY="test-key", CAPTURE_MAX_RETRIES=0)
    assert Settings(JWT_SECRET_KEY="test-key").CAPTURE_MAX_RETRIES >= 1
