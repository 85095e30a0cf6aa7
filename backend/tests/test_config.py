import pytest
from pydantic import ValidationError

from realty.core.config import Settings

STRONG_SECRET = "a-production-secret-that-is-long-enough"


def test_production_requires_long_secret():
    with pytest.raises(ValidationError, match="SECRET_KEY"):
        Settings(ENVIRONMENT="production", SECRET_KEY="short", ADMIN_PASSWORD="s3cret-admin")


def test_production_rejects_default_admin_password():
    with pytest.raises(ValidationError, match="ADMIN_PASSWORD"):
        Settings(ENVIRONMENT="production", SECRET_KEY=STRONG_SECRET, ADMIN_PASSWORD="password")

    with pytest.raises(ValidationError, match="ADMIN_PASSWORD"):
        Settings(ENVIRONMENT="Production", SECRET_KEY=STRONG_SECRET, ADMIN_PASSWORD="")


def test_production_switches_to_json_logs():
    settings = Settings(ENVIRONMENT="production", SECRET_KEY=STRONG_SECRET, ADMIN_PASSWORD="s3cret-admin", LOG_JSON=False)
    assert settings.is_production
    assert settings.LOG_JSON is True


def test_development_allows_defaults():
    settings = Settings(ENVIRONMENT="development", SECRET_KEY="change_me", ADMIN_PASSWORD="password")
    assert not settings.is_production
    assert settings.LOG_JSON is False


def test_missing_required_lists_empty_settings():
    settings = Settings(S3_BUCKET_NAME="", S3_ACCESS_KEY="")
    missing = settings.missing_required()
    assert "S3_BUCKET_NAME" in missing
    assert "S3_ACCESS_KEY" in missing
    assert "DATABASE_URL" not in missing
