"""Configuration loading for the fortune lookup client.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv. Variables carry a FORTUNE_ prefix,
    e.g. FORTUNE_API_BASE_URL or FORTUNE_LANGUAGE.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FORTUNE_",
        case_sensitive=False,
    )

    # Fortune API configuration
    api_base_url: str = Field(
        default="https://yumemi-ios-junior-engineer-codecheck.app.swift.cloud",
        description="Base URL of the fortune API",
    )
    api_endpoint: str = Field(
        default="/my_fortune",
        description="Resource path of the fortune lookup",
    )
    api_version: str = Field(
        default="v1",
        description="Value sent in the API-Version header",
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        description="Timeout for one fortune lookup in seconds",
    )

    # Presentation
    language: Literal["ja", "en"] = Field(
        default="ja",
        description="Language for user-facing messages",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    @field_validator("request_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Ensure the timeout is positive."""
        if v <= 0:
            raise ValueError("request_timeout_seconds must be positive")
        return v

    @field_validator("api_version")
    @classmethod
    def validate_api_version(cls, v: str) -> str:
        """Ensure the version header is not blank."""
        if not v.strip():
            raise ValueError("api_version must be a non-empty string")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
