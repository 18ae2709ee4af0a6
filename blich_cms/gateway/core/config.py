"""
Configuration Settings of the API gateway.

This module defines the gateway configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file.
"""

from typing import Annotated

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class CmsApiConfig(BaseModel):
    """Upstream CMS connection configuration."""

    url: str = Field(default="http://localhost:3001", alias="CMS_API_URL", description="Base URL of the CMS server")
    timeout: float = Field(default=10.0, alias="CMS_API_TIMEOUT", description="Request timeout in seconds")

    model_config = {"populate_by_name": True}


class GatewayJWTConfig(BaseModel):
    """Bearer token verification configuration (shared secret with the CMS)."""

    secret: str = Field(default="change-me", alias="JWT_SECRET")
    algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class GatewaySettings(BaseSettings):
    """
    API gateway settings model.

    All properties are automatically bound from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    server_host: str = Field(default="0.0.0.0", alias="BLICH_GATEWAY_SERVER_HOST")
    server_port: int = Field(default=3000, alias="BLICH_GATEWAY_SERVER_PORT")
    log_level: str = Field(default="INFO", alias="BLICH_GATEWAY_LOG_LEVEL")

    cms_api_url: str = Field(default="http://localhost:3001", alias="CMS_API_URL")
    cms_api_timeout: float = Field(default=10.0, alias="CMS_API_TIMEOUT")

    jwt_secret: str = Field(default="change-me", alias="JWT_SECRET")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")

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

    @property
    def cms(self) -> CmsApiConfig:
        """Get upstream CMS configuration from environment variables."""
        return CmsApiConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def jwt(self) -> GatewayJWTConfig:
        """Get JWT configuration from environment variables."""
        return GatewayJWTConfig.model_validate(self.model_dump(by_alias=True))


gateway_settings = GatewaySettings()
