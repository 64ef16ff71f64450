"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Platform REST API
    platform_host: str = Field(
        default="http://localhost:8080",
        description="Workspace URL, without the /api/2.0 suffix",
    )
    platform_token: str = Field(default="", description="Bearer token of the acting principal")
    http_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Timeout for a single platform API call",
    )

    # Application
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
