"""
Test Configuration Settings.

This module defines the test environment configuration using Pydantic's BaseSettings.
Pydantic automatically loads configuration from the test/.env file via env_file configuration.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TestSettings(BaseSettings):
    """
    Test environment settings model.

    Values come from environment variables or ``test/.env``.
    """

    __test__ = False  # not a test class

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    database_url: str = Field(
        default="sqlite+aiosqlite:///:memory:",
        alias="TEST_DATABASE_URL",
        description="Test database connection URL (defaults to in-memory SQLite)",
    )
    jwt_secret: str = Field(default="test-secret", alias="JWT_SECRET")
    cms_api_url: str = Field(default="http://mock-cms", alias="CMS_API_URL")


test_settings = TestSettings()
