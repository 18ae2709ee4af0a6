"""
Unit tests for the CMS server settings.
"""

import pytest

from blich_cms.server.core.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("DATABASE_URL", "JWT_SECRET", "CORS_ORIGINS", "BLICH_CMS_ENVIRONMENT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.server_port == 3001
        assert settings.is_development
        assert settings.database.url == "sqlite+aiosqlite:///./blich_cms.db"
        assert settings.jwt.algorithm == "HS256"
        assert settings.cors.origins == ["http://localhost:8080"]

    def test_cors_origins_are_comma_separated(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,,")

        settings = Settings(_env_file=None)

        assert settings.cors_origins == ["http://a.test", "http://b.test"]
        assert settings.cors.origins == ["http://a.test", "http://b.test"]

    def test_grouped_configs_follow_env(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://user:pw@db/cms")
        monkeypatch.setenv("JWT_SECRET", "s3cret")
        monkeypatch.setenv("JWT_EXPIRES_MINUTES", "15")
        monkeypatch.setenv("BLICH_CMS_ENVIRONMENT", "production")

        settings = Settings(_env_file=None)

        assert settings.database.url == "postgresql://user:pw@db/cms"
        assert settings.jwt.secret == "s3cret"
        assert settings.jwt.expires_minutes == 15
        assert settings.is_production

    def test_rejects_unknown_environment(self, monkeypatch):
        monkeypatch.setenv("BLICH_CMS_ENVIRONMENT", "staging")

        with pytest.raises(ValueError):
            Settings(_env_file=None)
