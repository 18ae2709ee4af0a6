"""
Configuration Settings.

This module defines the CMS server configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class DatabaseConfig(BaseModel):
    """Application database configuration."""

    url: str = Field(
        default="sqlite+aiosqlite:///./blich_cms.db",
        alias="DATABASE_URL",
        description="Async SQLAlchemy connection URL for the CMS database",
    )
    echo: bool = Field(default=False, alias="DATABASE_ECHO", description="Echo SQL statements (debugging)")

    model_config = {"populate_by_name": True}


class JWTConfig(BaseModel):
    """Bearer token configuration for admin authentication."""

    secret: str = Field(default="change-me", alias="JWT_SECRET", description="HS256 signing secret")
    algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM", description="JWS algorithm")
    expires_minutes: int = Field(
        default=60, alias="JWT_EXPIRES_MINUTES", description="Lifetime of issued access tokens in minutes"
    )

    model_config = {"populate_by_name": True}


class CORSConfig(BaseModel):
    """CORS configuration."""

    origins: list[str] = Field(
        default=["http://localhost:8080"], alias="CORS_ORIGINS", description="Allowed CORS origins"
    )
    allow_credentials: bool = Field(
        default=True, alias="CORS_ALLOW_CREDENTIALS", description="Allow credentials in CORS requests"
    )
    allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
        description="Allowed HTTP methods",
    )
    allow_headers: list[str] = Field(
        default=["Content-Type", "Authorization"], alias="CORS_ALLOW_HEADERS", description="Allowed HTTP headers"
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    CMS server settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # CMS Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="CMS server host address to bind to",
        alias="BLICH_CMS_SERVER_HOST",
    )
    server_port: int = Field(
        default=3001,
        description="CMS server port number",
        alias="BLICH_CMS_SERVER_PORT",
    )
    log_level: str = Field(
        default="INFO",
        description="CMS server logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="BLICH_CMS_LOG_LEVEL",
    )
    environment: Literal["development", "production", "test"] = Field(
        default="development",
        description="Deployment environment; controls how much error detail is exposed",
        alias="BLICH_CMS_ENVIRONMENT",
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: str = Field(
        default="sqlite+aiosqlite:///./blich_cms.db",
        description="Async SQLAlchemy connection URL for the CMS database",
        alias="DATABASE_URL",
    )
    database_echo: bool = Field(default=False, alias="DATABASE_ECHO")

    # =====================================================================
    # Authentication Configuration
    # =====================================================================
    jwt_secret: str = Field(default="change-me", alias="JWT_SECRET")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    jwt_expires_minutes: int = Field(default=60, alias="JWT_EXPIRES_MINUTES")

    # =====================================================================
    # CORS Configuration
    # =====================================================================
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default=["http://localhost:8080"],
        description="Comma separated list of allowed origins",
        alias="CORS_ORIGINS",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value):
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def database(self) -> DatabaseConfig:
        """Get database configuration from environment variables."""
        return DatabaseConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def jwt(self) -> JWTConfig:
        """Get JWT configuration from environment variables."""
        return JWTConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration from environment variables."""
        return CORSConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
